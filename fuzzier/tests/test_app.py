"""Smoke tests for app initialization."""

from pathlib import Path

import pytest

from fuzzier.models.candidate import EnumerationStrategy


@pytest.fixture
def lines_file(tmp_path: Path) -> Path:
    path = tmp_path / "commands.txt"
    path.write_text("find-file\nfoo-bar\nxfoobar\n")
    return path


def test_app_import():
    """App module imports without errors."""
    from fuzzier.app import FuzzierApp
    assert FuzzierApp is not None


def test_palette_import():
    from fuzzier.screens import SearchPalette
    assert SearchPalette is not None


def test_services_create(lines_file: Path, tmp_path: Path):
    """Services wire a file source and install the engine."""
    from fuzzier.app import Services

    services = Services.create([lines_file], config_dir=tmp_path / "config")
    assert services.engine is not None
    assert services.pipeline.preferred_enabled

    [source] = services.pipeline.sources
    assert source.name == "commands.txt"
    assert source.strategy == EnumerationStrategy.INDEXED_WITH_PREFILTER
    assert [c.display for c in source.visible_candidates()] == [
        "find-file",
        "foo-bar",
        "xfoobar",
    ]


def test_services_without_preferred(lines_file: Path, tmp_path: Path):
    from fuzzier.app import Services

    services = Services.create(
        [lines_file], preferred=False, config_dir=tmp_path / "config", candidate_limit=1
    )
    assert services.engine is None
    assert services.pipeline.sources[0].candidate_limit == 1


def test_app_instantiation(lines_file: Path, tmp_path: Path):
    """App can be instantiated without errors."""
    from fuzzier.app import FuzzierApp, Services

    app = FuzzierApp(Services.create([lines_file], config_dir=tmp_path / "config"))
    assert app.services.pipeline is not None


def test_main_rejects_missing_file(tmp_path: Path, capsys):
    from fuzzier.app import main

    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "missing.txt" in capsys.readouterr().out


def test_parser_flags():
    from fuzzier.app import build_parser

    args = build_parser().parse_args(["a.txt", "--no-preferred", "--limit", "5"])
    assert args.no_preferred
    assert args.limit == 5
    assert args.paths == [Path("a.txt")]


def test_same_basename_sources_stay_separate(tmp_path: Path):
    """Files sharing a basename get distinct sources and snapshots."""
    from fuzzier.app import Services

    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    first = tmp_path / "a" / "notes.txt"
    second = tmp_path / "b" / "notes.txt"
    first.write_text("foo-bar\n")
    second.write_text("find-buffer\n")

    services = Services.create([first, second], config_dir=tmp_path / "config")
    names = [s.name for s in services.pipeline.sources]
    assert names == [str(first), str(second)]

    results = services.pipeline.search("fb")
    assert [(r.source, r.candidate.display) for r in results] == [
        (str(first), "foo-bar"),
        (str(second), "find-buffer"),
    ]
    assert results[0].candidate.id != results[1].candidate.id


def test_source_names_keep_unique_basenames():
    from fuzzier.app import source_names

    paths = [Path("x/a.txt"), Path("y/b.txt"), Path("z/b.txt")]
    assert source_names(paths) == ["a.txt", str(Path("y/b.txt")), str(Path("z/b.txt"))]


def test_palette_keeps_spaces_in_query():
    from fuzzier.screens.search_palette import input_query

    assert input_query(" fb") == " fb"
    assert input_query("f b ") == "f b "
    assert input_query("   ") == ""
