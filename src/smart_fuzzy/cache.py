"""单次搜索内的字符相似度缓存。"""

from typing import Callable

_KEY_PREFIX = "char"


class CharSimilarityCache:
    """以 (字段值, 搜索词) 为键缓存字符相似度。

    仅在一次 best_match 调用内有效，调用结束即丢弃。
    """

    def __init__(self):
        self._values: dict[str, float] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def make_key(value: str, term: str) -> str:
        return f"{_KEY_PREFIX}_{value}_{term}"

    def get_or_compute(
        self,
        value: str,
        term: str,
        compute: Callable[[str, str], float],
    ) -> float:
        """命中则返回缓存值，否则计算并写入。"""
        key = self.make_key(value, term)
        cached = self._values.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        result = compute(value, term)
        self._values[key] = result
        return result

    def __len__(self) -> int:
        return len(self._values)
