"""搜索配置的默认值与合并逻辑。

用户传入的选项与权重均按字段浅合并到默认值之上。
"""

import logging
from dataclasses import fields, replace
from typing import Any, Mapping

from smart_fuzzy.models import ResolvedOptions, SearchOptions, WeightConfig

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORE = 0.3
DEFAULT_CASE_SENSITIVE = False
DEFAULT_ENABLE_CACHE = True
DEFAULT_MAX_EDIT_DISTANCE = 10
MIN_SEARCH_TERM_LENGTH = 2

DEFAULT_WEIGHT_CONFIG = WeightConfig()

_WEIGHT_FIELDS = {f.name for f in fields(WeightConfig)}
_OPTION_FIELDS = {f.name for f in fields(SearchOptions)}

# 兼容 camelCase 写法
_OPTION_ALIASES = {
    "minScore": "min_score",
    "caseSensitive": "case_sensitive",
    "weightConfig": "weight_config",
    "enableCache": "enable_cache",
    "maxEditDistance": "max_edit_distance",
}
_WEIGHT_ALIASES = {
    "exactMatch": "exact_match",
    "prefixMatch": "prefix_match",
    "containsMatch": "contains_match",
    "charSimilarity": "char_similarity",
    "lengthSimilarity": "length_similarity",
    "wordBoundary": "word_boundary",
    "substringMatch": "substring_match",
    "commonPrefix": "common_prefix",
}


def _canonical_items(
    raw: Mapping[str, Any],
    allowed: set[str],
    aliases: dict[str, str],
    kind: str,
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in raw.items():
        name = aliases.get(key, key)
        if name not in allowed:
            logger.warning("unknown_%s_key key=%s", kind, key)
            continue
        if value is None:
            continue
        result[name] = value
    return result


def merge_weights(
    override: WeightConfig | Mapping[str, float] | None,
    base: WeightConfig = DEFAULT_WEIGHT_CONFIG,
) -> WeightConfig:
    """将权重覆盖浅合并到基础权重上。

    Args:
        override: 部分权重（映射）或完整 WeightConfig
        base: 基础权重，默认 DEFAULT_WEIGHT_CONFIG

    Returns:
        合并后的 WeightConfig，缺省字段保持 base 的取值
    """
    if override is None:
        return base
    if isinstance(override, WeightConfig):
        return override

    updates = _canonical_items(override, _WEIGHT_FIELDS, _WEIGHT_ALIASES, "weight")
    if not updates:
        return base
    return replace(base, **{k: float(v) for k, v in updates.items()})


def resolve_options(
    options: SearchOptions | Mapping[str, Any] | None = None,
) -> ResolvedOptions:
    """解析搜索选项，未给出的字段取默认值。

    Args:
        options: SearchOptions、普通映射或 None

    Returns:
        ResolvedOptions
    """
    if options is None:
        options = SearchOptions()
    elif not isinstance(options, SearchOptions):
        options = SearchOptions(
            **_canonical_items(options, _OPTION_FIELDS, _OPTION_ALIASES, "option")
        )

    min_score = options.min_score
    case_sensitive = options.case_sensitive
    enable_cache = options.enable_cache
    max_edit_distance = options.max_edit_distance

    return ResolvedOptions(
        min_score=DEFAULT_MIN_SCORE if min_score is None else float(min_score),
        case_sensitive=(
            DEFAULT_CASE_SENSITIVE if case_sensitive is None else bool(case_sensitive)
        ),
        weights=merge_weights(options.weight_config),
        enable_cache=DEFAULT_ENABLE_CACHE if enable_cache is None else bool(enable_cache),
        max_edit_distance=(
            DEFAULT_MAX_EDIT_DISTANCE
            if max_edit_distance is None
            else int(max_edit_distance)
        ),
    )
