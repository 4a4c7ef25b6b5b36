"""候选过滤与排序。"""

from typing import Iterable, TypeVar

from smart_fuzzy.models import SearchResult

T = TypeVar("T")


def filter_by_threshold(
    results: Iterable[SearchResult[T]], min_score: float
) -> list[SearchResult[T]]:
    """按分数阈值过滤，保留 score >= min_score 的结果。"""
    return [r for r in results if r.score >= min_score]


def rank_results(
    results: Iterable[SearchResult[T]], min_score: float
) -> list[SearchResult[T]]:
    """过滤低分结果并按分数降序排列。

    分数相同的结果保持原始顺序。

    Args:
        results: 评分结果
        min_score: 最低分数阈值

    Returns:
        排序后的结果列表
    """
    return sorted(
        filter_by_threshold(results, min_score),
        key=lambda r: r.score,
        reverse=True,
    )
