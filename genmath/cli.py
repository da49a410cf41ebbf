"""CLI entrypoint for regenerating the generic math wrappers."""

from __future__ import annotations

import argparse
import sys

from .errors import GeneratorError
from .logging import configure_logging
from .pipeline import Generator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genmath",
        description=(
            "Scan Go's math package and write core_functions.go, core_consts.go, "
            "core_vars.go and core_types.go into the current directory. "
            "Generation takes no options; -v only changes log output."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint: one full regeneration, exit 1 on any fatal error."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    try:
        Generator().run()
    except GeneratorError as exc:
        parser.exit(1, f"genmath: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
