"""
Tests for the rand-str-gen command.
"""

import string

import pyperclip

from rand_str_gen import __version__
from rand_str_gen.cli import main


ALNUM = set(string.ascii_letters + string.digits)
DEFAULT_POOL = ALNUM | set("-._!*&#")


def lines(output: str) -> list[str]:
    return output.splitlines()


class TestGenerate:
    def test_default_pool(self, runner):
        result = runner.invoke(main, ["10"])
        assert result.exit_code == 0
        (generated,) = lines(result.stdout)
        assert len(generated) == 10
        assert set(generated) <= DEFAULT_POOL

    def test_exclude_symbols(self, runner):
        result = runner.invoke(main, ["300", "-s", "-m"])
        assert result.exit_code == 0
        (generated,) = lines(result.stdout)
        assert len(generated) == 300
        assert set(generated) <= ALNUM

    def test_custom_chars(self, runner):
        result = runner.invoke(main, ["200", "-A", "+[%$^@]"])
        assert result.exit_code == 0
        (generated,) = lines(result.stdout)
        assert set(generated) == set("%$^@")

    def test_custom_chars_with_defaults(self, runner):
        result = runner.invoke(main, ["50", "-m", "+[%$^@]"])
        assert result.exit_code == 0
        (generated,) = lines(result.stdout)
        assert set(generated) <= ALNUM | set("-._%$^@")

    def test_remove_custom_char(self, runner):
        result = runner.invoke(main, ["400", "-[.]"])
        assert result.exit_code == 0
        assert "." not in result.stdout

    def test_repeat(self, runner):
        result = runner.invoke(main, ["-r", "3", "8"])
        assert result.exit_code == 0
        generated = lines(result.stdout)
        assert len(generated) == 3
        assert all(len(s) == 8 for s in generated)

    def test_repeat_from_env(self, runner):
        result = runner.invoke(main, ["4"], env={"RAND_STR_GEN_REPEAT": "2"})
        assert result.exit_code == 0
        assert len(lines(result.stdout)) == 2

    def test_show_pool_goes_to_stderr(self, runner):
        result = runner.invoke(main, ["--show-pool", "5", "-A", "+[xy]"])
        assert result.exit_code == 0
        assert "custom: x y" in result.stderr
        (generated,) = lines(result.stdout)
        assert set(generated) <= {"x", "y"}

    def test_show_pool_labels_sets(self, runner):
        result = runner.invoke(main, ["--show-pool", "5", "-lum"])
        assert result.exit_code == 0
        assert "digits: 0 1 2" in result.stderr
        assert "separators: - . _" in result.stderr
        assert "lowercase" not in result.stderr

    def test_show_pool_keeps_backslash(self, runner):
        result = runner.invoke(main, ["--show-pool", "5", "-A", "+[a\\]"])
        assert result.exit_code == 0
        assert "custom: \\ a" in result.stderr
        assert "\\\\" not in result.stderr

    def test_copy_last_string(self, runner, monkeypatch):
        copied = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)
        result = runner.invoke(main, ["-c", "-r", "3", "12"])
        assert result.exit_code == 0
        generated = lines(result.stdout)
        assert len(generated) == 3
        assert copied == [generated[-1]]

    def test_copy_not_requested(self, runner, monkeypatch):
        copied = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)
        result = runner.invoke(main, ["12"])
        assert result.exit_code == 0
        assert copied == []

    def test_ineffective_entries_warn(self, runner):
        result = runner.invoke(main, ["6", "-A", "+[.]", "-[z]"])
        assert result.exit_code == 0
        assert "z" in result.stderr
        assert lines(result.stdout) == ["......"]


class TestErrors:
    def test_missing_length(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 2
        assert "LENGTH" in result.stderr

    def test_zero_length_rejected(self, runner):
        result = runner.invoke(main, ["0"])
        assert result.exit_code == 2
        assert result.stdout == ""

    def test_non_integer_length(self, runner):
        result = runner.invoke(main, ["ten"])
        assert result.exit_code == 2

    def test_unknown_option_before_length(self, runner):
        result = runner.invoke(main, ["-x", "10"])
        assert result.exit_code == 2

    def test_zero_repeat_rejected(self, runner):
        result = runner.invoke(main, ["-r", "0", "10"])
        assert result.exit_code == 2

    def test_invalid_entry_prefix(self, runner):
        result = runner.invoke(main, ["10", "m"])
        assert result.exit_code == 2
        assert "前缀" in result.stderr
        assert result.stdout == ""

    def test_invalid_entry_code(self, runner):
        result = runner.invoke(main, ["10", "+q"])
        assert result.exit_code == 2
        assert "'q'" in result.stderr

    def test_clipboard_unavailable(self, runner, monkeypatch):
        def fail(text):
            raise pyperclip.PyperclipException("no clipboard")

        monkeypatch.setattr(pyperclip, "copy", fail)
        result = runner.invoke(main, ["--copy", "8"])
        assert result.exit_code == 1
        assert len(lines(result.stdout)) == 1
        assert "no clipboard" in result.stderr

    def test_empty_pool(self, runner):
        result = runner.invoke(main, ["10", "-A"])
        assert result.exit_code == 1
        assert "字符池为空" in result.stderr
        assert result.stdout == ""


class TestInfo:
    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "预定义字符集" in result.stdout
        assert "rand-str-gen 10 -m" in result.stdout

    def test_short_help(self, runner):
        result = runner.invoke(main, ["-h"])
        assert result.exit_code == 0
        assert "LENGTH" in result.stdout

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout
