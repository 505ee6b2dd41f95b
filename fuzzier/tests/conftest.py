"""Shared test fixtures for Fuzzier."""

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from fuzzier.models.candidate import Candidate, EnumerationStrategy, Source
from fuzzier.services.config import ConfigManager, FuzzierConfig
from fuzzier.services.engine import PreferredMatchEngine
from fuzzier.services.enumeration import enumerate_all


COMMAND_NAMES = [
    "helm-candidate-number-limit",
    "helm-mode",
    "emacs-lisp-mode",
    "lisp-emacs-mode",
    "elephant",
    "describe-function",
    "describe-variable",
    "find-file",
    "find-file-other-window",
    "hack-local-variables",
]


@pytest.fixture
def commands() -> list[Candidate]:
    """Small candidate set with known initials matches."""
    return [Candidate.from_text(name) for name in COMMAND_NAMES]


@pytest.fixture
def make_source():
    """Factory for sources over plain strings."""

    def _make(names, name="commands", **kwargs) -> Source:
        candidates = [Candidate.from_text(n) for n in names]
        return Source(name=name, candidates=candidates, **kwargs)

    return _make


@pytest.fixture
def source(make_source) -> Source:
    return make_source(COMMAND_NAMES)


@pytest.fixture
def crowded_source() -> Source:
    """Many loose matches for "fb" ahead of the few initials matches."""
    noise = [Candidate.from_text(f"xfoobar{i}") for i in range(300)]
    good = [
        Candidate.from_text("foo-bar"),
        Candidate.from_text("find-buffer"),
    ]
    return Source(
        name="crowded",
        candidates=noise + good,
        candidate_limit=10,
        strategy=EnumerationStrategy.FULL_LIST,
    )


@pytest.fixture
def counting_enumerate() -> MagicMock:
    """enumerate_all wrapped in a call-counting mock."""
    return MagicMock(side_effect=enumerate_all)


@pytest.fixture
def config() -> FuzzierConfig:
    return FuzzierConfig()


@pytest.fixture
def engine(config: FuzzierConfig) -> PreferredMatchEngine:
    return PreferredMatchEngine(config=config)


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Create a ConfigManager with temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return ConfigManager(config_dir=config_dir)
