import random

import pytest
from click.testing import CliRunner


@pytest.fixture
def rng():
    """固定种子的随机源，保证采样结果可复现。"""
    return random.Random(1234)


@pytest.fixture
def runner():
    return CliRunner()
