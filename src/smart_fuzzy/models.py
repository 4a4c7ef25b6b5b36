"""核心数据模型定义。

包含权重配置、搜索选项、匹配明细与搜索结果等数据结构。
"""

from dataclasses import dataclass, field
from typing import Generic, Mapping, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class WeightConfig:
    """各启发式匹配信号的权重，取值范围 [0, 1]。"""

    exact_match: float = 1.0
    prefix_match: float = 0.8
    contains_match: float = 0.6
    char_similarity: float = 0.4
    length_similarity: float = 0.2
    word_boundary: float = 0.7
    substring_match: float = 0.9
    common_prefix: float = 0.85


@dataclass(frozen=True)
class SearchOptions:
    """单次搜索的配置。

    所有字段均可省略，None 表示使用默认值。
    weight_config 为部分覆盖，未给出的权重保持默认。
    enable_cache 与 max_edit_distance 仅对最佳匹配生效。
    """

    min_score: float | None = None
    case_sensitive: bool | None = None
    weight_config: WeightConfig | Mapping[str, float] | None = None
    enable_cache: bool | None = None
    max_edit_distance: int | None = None


@dataclass(frozen=True)
class ResolvedOptions:
    """合并默认值之后的完整搜索配置。"""

    min_score: float
    case_sensitive: bool
    weights: WeightConfig
    enable_cache: bool
    max_edit_distance: int


@dataclass(frozen=True)
class MatchDetails:
    """单个候选的匹配明细。"""

    exact_match: bool = False
    prefix_match: bool = False
    contains_match: bool = False
    char_similarity: float = 0.0
    length_similarity: float = 0.0
    edit_similarity: float = 0.0
    word_matches: int | None = None


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """候选条目及其分数、匹配明细。"""

    item: T
    score: float
    details: MatchDetails = field(default_factory=MatchDetails)


EMPTY_DETAILS = MatchDetails()
EXACT_DETAILS = MatchDetails(
    exact_match=True,
    prefix_match=True,
    contains_match=True,
    char_similarity=1.0,
    length_similarity=1.0,
    edit_similarity=1.0,
)
