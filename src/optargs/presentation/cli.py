"""Command-line interface.

    optargs expand FILE [-o OUT] [--standalone] [--shuffle] [--report FORMAT]
    optargs rewrite FILE --with DECLARATIONS [-o OUT]
    optargs explain FILE

Exit codes: 0 success, 1 optargs error, 2 usage error.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from optargs import __version__
from optargs.application.reporters.console import ConsoleConfig, ConsoleReporter
from optargs.application.reporters.json_reporter import JSONReporter
from optargs.application.reporters.plain_text import PlainTextReporter
from optargs.domain.exceptions.base import OptArgsError
from optargs.domain.model.enums import OrderingMode
from optargs.infrastructure.config import load_config
from optargs.presentation.api.facade import OptArgs, read_source

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from optargs.domain.model.expansion import Expansion
    from optargs.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger("optargs")

EXIT_OK = 0
EXIT_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="optargs",
        description="Generate dispatchers for functions and classes with optional arguments",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every pipeline stage (-vv)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="pyproject.toml with a [tool.optargs] table (default: ./pyproject.toml)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    expand = commands.add_parser("expand", help="Write FILE with dispatchers generated")
    expand.add_argument("file", type=Path)
    expand.add_argument(
        "-o", "--output", type=Path, default=None, help="Output file (default: stdout)"
    )
    expand.add_argument(
        "--standalone",
        action="store_true",
        help="Emit only declarations and dispatchers instead of the whole module",
    )
    expand.add_argument(
        "--shuffle",
        action="store_true",
        help="Accept named arguments in any order unless a directive says otherwise",
    )
    expand.add_argument(
        "--report",
        choices=("plain", "json", "console"),
        default=None,
        help="Also report expansions on stderr",
    )

    rewrite = commands.add_parser(
        "rewrite", help="Resolve dispatcher calls in FILE at expansion time"
    )
    rewrite.add_argument("file", type=Path)
    rewrite.add_argument(
        "--with",
        dest="declarations",
        type=Path,
        action="append",
        required=True,
        help="Module with annotated declarations (repeatable)",
    )
    rewrite.add_argument(
        "-o", "--output", type=Path, default=None, help="Output file (default: stdout)"
    )

    explain = commands.add_parser("explain", help="Show every call form FILE's dispatchers accept")
    explain.add_argument("file", type=Path)
    explain.add_argument(
        "--max-branches",
        type=int,
        default=None,
        help="Rows shown per dispatcher (default: all)",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        defaults = load_config(config_path=args.config)
        match args.command:
            case "expand":
                if args.shuffle:
                    defaults = dataclasses.replace(defaults, ordering=OrderingMode.SHUFFLED)
                reporter = _stream_reporter(args.report, sys.stderr)
                _expand(OptArgs(defaults, reporter=reporter), args)
            case "rewrite":
                _rewrite(OptArgs(defaults), args)
            case "explain":
                _explain(OptArgs(defaults), args)
    except OptArgsError as e:
        logger.debug("aborted", exc_info=True)
        print(f"optargs: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


def _configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _expand(optargs: OptArgs, args: argparse.Namespace) -> None:
    source = read_source(args.file)
    expansions = optargs.expand_source(source, args.file)
    module = optargs.render(source, expansions, in_place=not args.standalone)
    _write_output(module, args.output)
    logger.info("%s: %d dispatcher(s) generated", args.file, len(expansions))

    if args.report == "console":
        sys.stderr.write(ConsoleReporter().report(expansions))


def _rewrite(optargs: OptArgs, args: argparse.Namespace) -> None:
    expansions: list[Expansion] = []
    for path in args.declarations:
        expansions.extend(optargs.expand_file(path))

    caller = read_source(args.file)
    _write_output(optargs.rewrite(caller, expansions, args.file), args.output)


def _explain(optargs: OptArgs, args: argparse.Namespace) -> None:
    expansions = optargs.expand_file(args.file)
    reporter = ConsoleReporter(ConsoleConfig(max_branches=args.max_branches))
    sys.stdout.write(reporter.report(expansions))


def _stream_reporter(kind: str | None, stream: TextIO) -> ReporterProtocol | None:
    """Reporter writing to stream; console output is rendered separately."""
    match kind:
        case "plain":
            return PlainTextReporter(stream)
        case "json":
            return JSONReporter(stream)
    return None


def _write_output(text: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(text)
        return
    output.write_text(text, encoding="utf-8")
    logger.info("wrote %s", output)


if __name__ == "__main__":
    sys.exit(main())
