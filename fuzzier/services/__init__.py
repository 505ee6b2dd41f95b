"""Services for Fuzzier."""

from fuzzier.services.config import CaseFold, ConfigManager, FuzzierConfig
from fuzzier.services.engine import PreferredMatchEngine
from fuzzier.services.partition import explode
from fuzzier.services.pattern import Matcher, build_matcher
from fuzzier.services.search import SearchPipeline, SearchResult
from fuzzier.services.selector import PreferredSelector
from fuzzier.services.snapshot import Snapshot, SnapshotCache
from fuzzier.services.standard import (
    PreferredMarker,
    case_fold_policy,
    default_matchers,
    standard_match,
)

__all__ = [
    "CaseFold",
    "ConfigManager",
    "FuzzierConfig",
    "PreferredMatchEngine",
    "explode",
    "Matcher",
    "build_matcher",
    "SearchPipeline",
    "SearchResult",
    "PreferredSelector",
    "Snapshot",
    "SnapshotCache",
    "PreferredMarker",
    "case_fold_policy",
    "default_matchers",
    "standard_match",
]
