"""文本归一化与字段读取工具。

大小写折叠采用简单的 lower()，不做区域化处理。
"""

import re
from typing import Any, Mapping

# 空白、中英文逗号、中英文句号
_WORD_DELIMITER_RE = re.compile(r"[\s,，。.]+")


def normalize(text: str, case_sensitive: bool = False) -> str:
    """归一化文本。

    Args:
        text: 原始文本
        case_sensitive: 是否区分大小写；为 True 时原样返回

    Returns:
        归一化后的文本
    """
    if case_sensitive:
        return text
    return text.lower()


def split_words(text: str) -> list[str]:
    """按分隔符切分为非空词。

    Args:
        text: 已归一化的文本

    Returns:
        词列表，空文本返回空列表
    """
    return [word for word in _WORD_DELIMITER_RE.split(text) if word]


def get_field_value(item: Any, field: str) -> Any:
    """读取条目的字段值，支持映射与普通对象。"""
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)
