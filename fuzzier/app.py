"""Fuzzier: incremental search with preferred-match selection.

Main Textual application. Searches the lines of one or more files.
"""

import argparse
import logging
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from fuzzier.models.candidate import EnumerationStrategy, Source
from fuzzier.screens.search_palette import SearchPalette
from fuzzier.services.config import ConfigManager
from fuzzier.services.engine import PreferredMatchEngine
from fuzzier.services.search import SearchPipeline, SearchResult
from fuzzier.styles import BASE_CSS

logger = logging.getLogger(__name__)


def source_names(paths: list[Path]) -> list[str]:
    """Name each file by its basename, or its full path when basenames collide."""
    counts = Counter(path.name for path in paths)
    return [path.name if counts[path.name] == 1 else str(path) for path in paths]


def load_file_source(path: Path, candidate_limit: int, name: str | None = None) -> Source:
    """One source per file, one candidate per line."""
    lines = path.read_text(errors="replace").splitlines()
    return Source.from_lines(
        name or path.name,
        lines,
        strategy=EnumerationStrategy.INDEXED_WITH_PREFILTER,
        candidate_limit=candidate_limit,
    )


@dataclass
class Services:
    """Application service container for dependency injection."""

    config: ConfigManager
    pipeline: SearchPipeline
    engine: PreferredMatchEngine | None

    @classmethod
    def create(
        cls,
        paths: list[Path],
        preferred: bool = True,
        config_dir: Path | None = None,
        candidate_limit: int | None = None,
    ) -> "Services":
        """Wire up config, sources, pipeline and (optionally) the engine.

        Args:
            paths: Files to search
            preferred: Install the preferred-match engine
            config_dir: Config directory override
            candidate_limit: Per-source result cap override
        """
        config = ConfigManager(config_dir=config_dir)
        settings = config.config
        limit = candidate_limit if candidate_limit is not None else settings.candidate_limit

        sources = [
            load_file_source(path, limit, name)
            for path, name in zip(paths, source_names(paths))
        ]
        pipeline = SearchPipeline(sources, case_fold=settings.case_fold)

        engine = None
        if preferred:
            engine = PreferredMatchEngine.from_config(settings)
            pipeline.install(engine)

        return cls(config=config, pipeline=pipeline, engine=engine)


class FuzzierApp(App):
    """Search palette as a standalone application."""

    TITLE = "Fuzzier"
    CSS = BASE_CSS + """
    Screen {
        background: $background;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False),
    ]

    def __init__(self, services: Services, **kwargs):
        """Initialize the app with injected services.

        Args:
            services: Service container
            **kwargs: Additional Textual app arguments
        """
        super().__init__(**kwargs)
        self.services = services

    def on_mount(self) -> None:
        """Open the search palette; its result ends the app."""
        title = ", ".join(s.name for s in self.services.pipeline.sources) or "search"
        self.push_screen(SearchPalette(self.services.pipeline, title=title), self._on_result)

    def _on_result(self, result: SearchResult | None) -> None:
        self.exit(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzier",
        description="Incremental search over file lines with preferred-match selection.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="files to search")
    parser.add_argument(
        "--no-preferred",
        action="store_true",
        help="use the standard matcher only",
    )
    parser.add_argument("--config-dir", type=Path, default=None, help="config directory")
    parser.add_argument("--limit", type=int, default=None, help="results per source")
    parser.add_argument("--debug", action="store_true", help="log to fuzzier.log")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the Fuzzier application."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(
            filename="fuzzier.log",
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    missing = [p for p in args.paths if not p.is_file()]
    if missing:
        print("Error: not a file:\n")
        for p in missing:
            print(f"  • {p}")
        return 1

    services = Services.create(
        args.paths,
        preferred=not args.no_preferred,
        config_dir=args.config_dir,
        candidate_limit=args.limit,
    )
    logger.debug(
        f"Searching {len(args.paths)} files, preferred={services.engine is not None}"
    )
    result = FuzzierApp(services).run()
    if isinstance(result, SearchResult):
        print(result.candidate.display)
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
