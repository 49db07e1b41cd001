"""rand-str-gen: 随机字符串生成工具。"""

__version__ = "0.1.0"
