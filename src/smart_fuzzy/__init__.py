"""Smart fuzzy search package."""

from smart_fuzzy.config import DEFAULT_WEIGHT_CONFIG, merge_weights, resolve_options
from smart_fuzzy.edit_distance import bounded_edit_distance, edit_distance
from smart_fuzzy.models import MatchDetails, SearchOptions, SearchResult, WeightConfig
from smart_fuzzy.search import all_match_results, all_matches, best_match, best_match_result

__all__ = [
    "DEFAULT_WEIGHT_CONFIG",
    "MatchDetails",
    "SearchOptions",
    "SearchResult",
    "WeightConfig",
    "all_match_results",
    "all_matches",
    "best_match",
    "best_match_result",
    "bounded_edit_distance",
    "edit_distance",
    "merge_weights",
    "resolve_options",
]
