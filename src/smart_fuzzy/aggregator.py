"""单个候选的评分聚合。

两种评分方式：
- score_best_candidate：最佳匹配使用，带长度预筛、精确匹配短路、缓存和
  条件编辑距离；
- score_all_candidate：全部匹配使用，启发式更少，无条件计算不设上限的编辑距离。
两者都以各信号加权后的最大值作为最终分数。
"""

from dataclasses import dataclass
from typing import Any, TypeVar

from smart_fuzzy.cache import CharSimilarityCache
from smart_fuzzy.edit_distance import bounded_edit_distance, edit_distance, edit_similarity
from smart_fuzzy.heuristics import (
    char_set_jaccard,
    common_prefix_ratio,
    contains_match,
    continuous_run,
    count_word_matches,
    exact_match,
    ideographic_overlap,
    length_ratio,
    prefix_match,
    substring_ratio,
)
from smart_fuzzy.models import (
    EMPTY_DETAILS,
    EXACT_DETAILS,
    MatchDetails,
    ResolvedOptions,
    SearchResult,
)
from smart_fuzzy.text import normalize, split_words

T = TypeVar("T")

CONTINUOUS_RUN_BOOST = 1.2
IDEOGRAPHIC_BOOST = 1.5
EDIT_SIMILARITY_FACTOR = 0.5


@dataclass(frozen=True)
class SearchTerm:
    """归一化后的搜索词，每次调用只计算一次。"""

    text: str
    words: list[str]

    @classmethod
    def build(cls, raw: str, case_sensitive: bool) -> "SearchTerm":
        text = normalize(raw, case_sensitive)
        return cls(text=text, words=split_words(text))


def _normalized_value(field_value: Any, case_sensitive: bool) -> str:
    return normalize(str(field_value), case_sensitive)


def score_best_candidate(
    item: T,
    field_value: Any,
    term: SearchTerm,
    options: ResolvedOptions,
    cache: CharSimilarityCache | None = None,
) -> SearchResult[T]:
    """按最佳匹配规则计算单个候选的分数。

    Args:
        item: 原始条目
        field_value: 条目中被比较的字段值
        term: 归一化后的搜索词
        options: 完整搜索配置
        cache: 本次调用的字符相似度缓存；None 表示不缓存

    Returns:
        SearchResult
    """
    if not field_value:
        return SearchResult(item=item, score=0.0, details=EMPTY_DETAILS)

    weights = options.weights
    search = term.text
    target = _normalized_value(field_value, options.case_sensitive)

    # 长度差异过大，直接跳过
    if abs(len(target) - len(search)) > options.max_edit_distance * 2:
        return SearchResult(item=item, score=0.0, details=EMPTY_DETAILS)

    # 1. 精确匹配，直接短路
    if exact_match(target, search):
        return SearchResult(item=item, score=weights.exact_match, details=EXACT_DETAILS)

    is_prefix = prefix_match(target, search)
    is_contains = contains_match(target, search)
    max_score = 0.0

    # 2. 前缀匹配
    if is_prefix:
        max_score = max(max_score, weights.prefix_match)

    # 3. 包含匹配
    if is_contains:
        max_score = max(max_score, weights.contains_match)

    # 4. 子串匹配
    substring_score = substring_ratio(target, search)
    if substring_score > 0:
        max_score = max(max_score, substring_score * weights.substring_match)

    # 5. 共同前缀
    prefix_score = common_prefix_ratio(target, search)
    if prefix_score > 0:
        max_score = max(max_score, prefix_score * weights.common_prefix)

    # 6. 词边界匹配
    if term.words:
        word_matches = count_word_matches(split_words(target), term.words)
        if word_matches > 0:
            max_score = max(
                max_score, word_matches / len(term.words) * weights.word_boundary
            )

    # 7. 字符相似度（可缓存）
    if cache is not None:
        char_similarity = cache.get_or_compute(target, search, char_set_jaccard)
    else:
        char_similarity = char_set_jaccard(target, search)
    max_score = max(max_score, char_similarity * weights.char_similarity)

    # 8. 连续字符匹配
    run_score = continuous_run(target, search)
    if run_score > 0:
        max_score = max(
            max_score, run_score * weights.char_similarity * CONTINUOUS_RUN_BOOST
        )

    # 9. 中文逐字匹配
    ideographic_score = ideographic_overlap(target, search)
    if ideographic_score > 0:
        max_score = max(
            max_score, ideographic_score * weights.char_similarity * IDEOGRAPHIC_BOOST
        )

    # 10. 长度相似度
    length_similarity = length_ratio(target, search)
    max_score = max(max_score, length_similarity * weights.length_similarity)

    # 11. 编辑距离，仅在分数仍不足时兜底
    edit_sim = 0.0
    if max_score < options.min_score:
        distance = bounded_edit_distance(target, search, options.max_edit_distance)
        if distance <= options.max_edit_distance:
            similarity = edit_similarity(target, search, distance)
            edit_score = similarity * weights.char_similarity * EDIT_SIMILARITY_FACTOR
            max_score = max(max_score, edit_score)
            if edit_score > 0:
                edit_sim = similarity

    return SearchResult(
        item=item,
        score=max_score,
        details=MatchDetails(
            exact_match=False,
            prefix_match=is_prefix,
            contains_match=is_contains,
            char_similarity=char_similarity,
            length_similarity=length_similarity,
            edit_similarity=edit_sim,
        ),
    )


@dataclass(frozen=True)
class AllMatchScore:
    """全部匹配评分的中间结果，total 仅作诊断用途。"""

    result: SearchResult
    total: float


def score_all_candidate(
    item: T,
    field_value: Any,
    term: SearchTerm,
    options: ResolvedOptions,
) -> AllMatchScore:
    """按全部匹配规则计算单个候选的分数。

    每个信号同时累加到 total 并参与取最大值，最终分数取最大值。
    """
    if not field_value:
        return AllMatchScore(
            result=SearchResult(
                item=item, score=0.0, details=MatchDetails(word_matches=0)
            ),
            total=0.0,
        )

    weights = options.weights
    search = term.text
    target = _normalized_value(field_value, options.case_sensitive)

    total = 0.0
    max_score = 0.0

    def add(score: float) -> None:
        nonlocal total, max_score
        total += score
        max_score = max(max_score, score)

    is_exact = exact_match(target, search)
    is_prefix = prefix_match(target, search)
    is_contains = contains_match(target, search)

    if is_exact:
        add(weights.exact_match)
    if is_prefix:
        add(weights.prefix_match)
    if is_contains:
        add(weights.contains_match)

    word_matches = count_word_matches(split_words(target), term.words)
    if word_matches > 0:
        add(word_matches / len(term.words) * weights.word_boundary)

    char_similarity = char_set_jaccard(target, search)
    add(char_similarity * weights.char_similarity)

    length_similarity = length_ratio(target, search)
    add(length_similarity * weights.length_similarity)

    similarity = edit_similarity(target, search, edit_distance(target, search))
    add(similarity * weights.char_similarity * EDIT_SIMILARITY_FACTOR)

    return AllMatchScore(
        result=SearchResult(
            item=item,
            score=max_score,
            details=MatchDetails(
                exact_match=is_exact,
                prefix_match=is_prefix,
                contains_match=is_contains,
                char_similarity=char_similarity,
                length_similarity=length_similarity,
                edit_similarity=similarity,
                word_matches=word_matches,
            ),
        ),
        total=total,
    )
