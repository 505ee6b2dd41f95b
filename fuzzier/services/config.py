"""Configuration management for Fuzzier.

Single JSON file at ~/.config/fuzzier/config.json. Missing keys fall back to
defaults; an unreadable or invalid file falls back to defaults entirely.
"""

import json
import logging
import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from ..models.candidate import DEFAULT_CANDIDATE_LIMIT
from ..models.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


def _write_json(path: Path, data: dict) -> None:
    """Write JSON through a temp file and rename for atomicity."""
    content = json.dumps(data, indent=2)
    temp_path = path.with_suffix(".tmp")
    temp_path.write_text(content)
    os.replace(temp_path, path)


class CaseFold(Enum):
    """How query casing decides case sensitivity."""

    SMART = "smart"  # Lowercase query ignores case, any uppercase respects it
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"


DEFAULT_MAX_GROUP_LENGTH = 4
DEFAULT_WORD_BOUNDARY_CHARS = "- /:|_"
DEFAULT_MAX_CANDIDATES_TO_SCAN = 75000
DEFAULT_MIN_QUERY_LENGTH = 2
DEFAULT_MAX_QUERY_LENGTH = 5


@dataclass
class FuzzierConfig:
    """Settings for preferred-match selection."""

    max_group_length: int = DEFAULT_MAX_GROUP_LENGTH
    word_boundary_chars: str = DEFAULT_WORD_BOUNDARY_CHARS
    max_candidates_to_scan: int = DEFAULT_MAX_CANDIDATES_TO_SCAN
    # Queries outside this length range skip the preferred scan
    min_query_length: int = DEFAULT_MIN_QUERY_LENGTH
    max_query_length: int = DEFAULT_MAX_QUERY_LENGTH
    case_fold: CaseFold = CaseFold.SMART
    # Host result cap for sources that don't set their own
    candidate_limit: int = DEFAULT_CANDIDATE_LIMIT

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ConfigValidationError: On the first invalid value
        """
        if self.max_group_length < 1:
            raise ConfigValidationError(
                f"max_group_length must be >= 1, got {self.max_group_length}"
            )
        if not self.word_boundary_chars:
            raise ConfigValidationError(
                "word_boundary_chars is empty",
                suggestion=f"default is {DEFAULT_WORD_BOUNDARY_CHARS!r}",
            )
        if self.max_candidates_to_scan < 1:
            raise ConfigValidationError(
                f"max_candidates_to_scan must be >= 1, got {self.max_candidates_to_scan}"
            )
        if not 1 <= self.min_query_length <= self.max_query_length:
            raise ConfigValidationError(
                "query length range is empty: "
                f"{self.min_query_length}..{self.max_query_length}"
            )
        if self.candidate_limit < 0:
            raise ConfigValidationError(
                f"candidate_limit must be >= 0, got {self.candidate_limit}"
            )

    def to_dict(self) -> dict:
        """Serialize, omitting values equal to the defaults."""
        defaults = FuzzierConfig()
        result: dict = {}
        if self.max_group_length != defaults.max_group_length:
            result["max_group_length"] = self.max_group_length
        if self.word_boundary_chars != defaults.word_boundary_chars:
            result["word_boundary_chars"] = self.word_boundary_chars
        if self.max_candidates_to_scan != defaults.max_candidates_to_scan:
            result["max_candidates_to_scan"] = self.max_candidates_to_scan
        if self.min_query_length != defaults.min_query_length:
            result["min_query_length"] = self.min_query_length
        if self.max_query_length != defaults.max_query_length:
            result["max_query_length"] = self.max_query_length
        if self.case_fold != defaults.case_fold:
            result["case_fold"] = self.case_fold.value
        if self.candidate_limit != defaults.candidate_limit:
            result["candidate_limit"] = self.candidate_limit
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "FuzzierConfig":
        case_fold = CaseFold.SMART
        if data.get("case_fold"):
            try:
                case_fold = CaseFold(data["case_fold"])
            except ValueError:
                logger.warning(f"Unknown case_fold {data['case_fold']!r}, using smart")

        return cls(
            max_group_length=int(data.get("max_group_length", DEFAULT_MAX_GROUP_LENGTH)),
            word_boundary_chars=data.get("word_boundary_chars", DEFAULT_WORD_BOUNDARY_CHARS),
            max_candidates_to_scan=int(
                data.get("max_candidates_to_scan", DEFAULT_MAX_CANDIDATES_TO_SCAN)
            ),
            min_query_length=int(data.get("min_query_length", DEFAULT_MIN_QUERY_LENGTH)),
            max_query_length=int(data.get("max_query_length", DEFAULT_MAX_QUERY_LENGTH)),
            case_fold=case_fold,
            candidate_limit=int(data.get("candidate_limit", DEFAULT_CANDIDATE_LIMIT)),
        )


class ConfigManager:
    """Loads and saves FuzzierConfig."""

    def __init__(self, config_dir: Path | None = None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "fuzzier"
        self._config_dir = config_dir
        self._config_file = config_dir / "config.json"
        self._config: FuzzierConfig | None = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    @property
    def config(self) -> FuzzierConfig:
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> FuzzierConfig:
        """Load config from disk."""
        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                config = FuzzierConfig.from_dict(data)
                config.validate()
                return config
            except (
                json.JSONDecodeError,
                AttributeError,
                TypeError,
                ValueError,
                ConfigValidationError,
            ) as e:
                logger.warning(f"Invalid config at {self._config_file}, using defaults: {e}")
        return FuzzierConfig()

    def save_config(self, config: FuzzierConfig) -> None:
        """Validate and save config to disk."""
        config.validate()
        self._config_dir.mkdir(parents=True, exist_ok=True)
        _write_json(self._config_file, config.to_dict())
        self._config = config

    def update(self, **changes) -> FuzzierConfig:
        """Save a copy of the current config with some fields changed."""
        config = replace(self.config, **changes)
        self.save_config(config)
        return config

    def reload(self) -> FuzzierConfig:
        """Discard the in-memory config and read the file again."""
        self._config = None
        return self.config
