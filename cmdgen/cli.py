"""CLI entrypoint for cmdgen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import GenerationError
from .generator import Generator
from .logging import configure_logging, get_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdgen",
        description="Generate command runs, factory and definitions from annotated classes.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory holding the annotated command classes (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the changes to the generated files without writing them.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for cmdgen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        result = Generator().generate(args.path, dry_run=bool(args.dry_run))
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except (GenerationError, OSError) as exc:
        logger.debug("Generation failed", exc_info=True)
        parser.exit(1, f"cmdgen failed: {exc}\nRun with --verbose for more details.\n")

    if result.dry_run:
        if not result.changed:
            print("Generated files already up to date (dry-run)")
        for generated in result.changed:
            print(generated.diff, end="")
        return

    for generated in result.files:
        print(f"Wrote {_relativize(generated.path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
