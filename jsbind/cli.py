"""CLI entrypoint for jsbind."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .engine import EngineError
from .extract import EXTRACTOR_NAMES
from .generator import Generator
from .logging import configure_logging
from .render import RenderError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsbind",
        description="Generate GopherJS bindings for a JavaScript library.",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        help="Javascript file to parse.",
    )
    parser.add_argument(
        "-O",
        "--object",
        help="Javascript object which contains Javascript library.",
    )
    parser.add_argument(
        "-n",
        "--name",
        dest="package",
        help="Name of resulting binding's package.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="Directory for the generated file (defaults to current directory).",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to a .jsbind.yml file or the directory containing one.",
    )
    parser.add_argument(
        "--prelude",
        action="append",
        type=Path,
        help="Extra script evaluated before the input; may be repeated.",
    )
    parser.add_argument(
        "--extractor",
        choices=EXTRACTOR_NAMES,
        help="Signature extractor to use (default: auto).",
    )
    parser.add_argument(
        "--no-cycle-guard",
        dest="guard_cycles",
        action="store_false",
        default=None,
        help="Descend into already visited objects (cyclic input never terminates).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write a DEBUG-level log of the run to this file.",
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
    """CLI entrypoint for jsbind."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(args.config).merged(
            input=args.input,
            object=args.object,
            package=args.package,
            output_dir=args.output_dir,
            prelude=args.prelude,
            extractor=args.extractor,
            guard_cycles=args.guard_cycles,
        )
        config.validate()
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    logger.debug("Generating package %s from %s", config.package, config.input)
    try:
        output_path = Generator(config).run()
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except (EngineError, RenderError) as exc:
        parser.exit(1, f"jsbind failed: {exc}\nRun with --verbose for more details.\n")
    except OSError as exc:
        parser.exit(1, f"jsbind could not write the binding: {exc}\n")
    print(f"Binding written to {_relativize(output_path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
