"""模糊搜索入口。

best_match 返回分数最高的单个条目，all_matches 返回全部达标条目。
输入不合法时返回 None 或空列表，不抛出异常。
"""

import logging
from typing import Any, Iterable, Mapping, TypeVar

from smart_fuzzy.aggregator import SearchTerm, score_all_candidate, score_best_candidate
from smart_fuzzy.cache import CharSimilarityCache
from smart_fuzzy.config import MIN_SEARCH_TERM_LENGTH, resolve_options
from smart_fuzzy.models import SearchOptions, SearchResult
from smart_fuzzy.ranking import rank_results
from smart_fuzzy.text import get_field_value

T = TypeVar("T")

OptionsInput = SearchOptions | Mapping[str, Any] | None

logger = logging.getLogger(__name__)


def _as_list(collection: Any) -> list | None:
    if collection is None or isinstance(collection, (str, bytes, Mapping)):
        return None
    if not isinstance(collection, Iterable):
        return None
    return list(collection)


def _check_inputs(collection: Any, field: Any, search_term: Any) -> list | None:
    items = _as_list(collection)
    if items is None:
        logger.debug("invalid_input reason=collection type=%s", type(collection).__name__)
        return None
    if not field or not isinstance(field, str):
        logger.debug("invalid_input reason=field field=%r", field)
        return None
    if not search_term or not isinstance(search_term, str):
        logger.debug("invalid_input reason=search_term")
        return None
    return items


def best_match_result(
    collection: Iterable[T],
    field: str,
    search_term: str,
    options: OptionsInput = None,
) -> SearchResult[T] | None:
    """智能模糊搜索，返回最佳结果及其匹配明细。

    Args:
        collection: 待搜索的条目集合
        field: 比较的字段名
        search_term: 搜索词
        options: 搜索选项

    Returns:
        分数最高的 SearchResult；无达标条目或输入不合法时返回 None
    """
    items = _check_inputs(collection, field, search_term)
    if items is None:
        return None

    resolved = resolve_options(options)
    term = SearchTerm.build(search_term, resolved.case_sensitive)

    # 搜索词太短，直接返回
    if len(term.text) < MIN_SEARCH_TERM_LENGTH:
        logger.debug("search_term_too_short length=%s", len(term.text))
        return None

    cache = CharSimilarityCache() if resolved.enable_cache else None
    scored = [
        score_best_candidate(item, get_field_value(item, field), term, resolved, cache)
        for item in items
    ]
    ranked = rank_results(scored, resolved.min_score)

    logger.debug(
        "best_match term=%s candidates=%s matched=%s top_score=%s",
        term.text,
        len(items),
        len(ranked),
        f"{ranked[0].score:.3f}" if ranked else None,
    )
    return ranked[0] if ranked else None


def best_match(
    collection: Iterable[T],
    field: str,
    search_term: str,
    options: OptionsInput = None,
) -> T | None:
    """智能模糊搜索，返回分数最高的条目。

    搜索词归一化后不足 2 个字符时直接返回 None。
    """
    result = best_match_result(collection, field, search_term, options)
    return result.item if result is not None else None


def all_match_results(
    collection: Iterable[T],
    field: str,
    search_term: str,
    options: OptionsInput = None,
) -> list[SearchResult[T]]:
    """高级模糊搜索，返回全部达标结果及其匹配明细，按分数降序排列。

    enable_cache 与 max_edit_distance 在此不生效。

    Args:
        collection: 待搜索的条目集合
        field: 比较的字段名
        search_term: 搜索词
        options: 搜索选项

    Returns:
        SearchResult 列表
    """
    items = _check_inputs(collection, field, search_term)
    if items is None:
        return []

    resolved = resolve_options(options)
    term = SearchTerm.build(search_term, resolved.case_sensitive)

    scored = [
        score_all_candidate(item, get_field_value(item, field), term, resolved)
        for item in items
    ]
    ranked = rank_results((s.result for s in scored), resolved.min_score)

    logger.debug(
        "all_matches term=%s candidates=%s matched=%s",
        term.text,
        len(items),
        len(ranked),
    )
    return ranked


def all_matches(
    collection: Iterable[T],
    field: str,
    search_term: str,
    options: OptionsInput = None,
) -> list[T]:
    """高级模糊搜索，返回按匹配度降序排列的条目列表。"""
    return [r.item for r in all_match_results(collection, field, search_term, options)]
