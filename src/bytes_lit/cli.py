"""Command line interface for the bytes-lit encoder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape

from .config import Settings
from .encoder import EncodingPolicy, encode, encode_many
from .exceptions import BytesLitError, ConfigurationError, EncodeError
from .render import FORMATS, render
from .utils import configure_logging

console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _print_error(exc: BaseException, locator: Optional[Any] = None) -> None:
    where = f"{escape(str(locator))}: " if locator is not None else ""
    console.print(f"[red]Error:[/red] {where}{escape(str(exc))}", soft_wrap=True)


def _read_text(path: str | None, *, encoding: str = "utf-8") -> str:
    if not path or path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding=encoding)
    except OSError as exc:
        raise ConfigurationError(f"cannot read '{path}': {exc.strerror or exc}") from exc


def _write_text(path: str | None, data: str, *, encoding: str = "utf-8") -> None:
    if not path or path == "-":
        sys.stdout.write(data)
        return
    try:
        Path(path).write_text(data, encoding=encoding)
    except OSError as exc:
        raise ConfigurationError(f"cannot write '{path}': {exc.strerror or exc}") from exc


def _write_json(path: str | None, payload: Any) -> None:
    serialised = json.dumps(payload, ensure_ascii=False, indent=2)
    _write_text(path, serialised + "\n")


def _iter_literal_lines(source: str, name: str) -> Iterable[Tuple[str, str]]:
    for lineno, line in enumerate(source.splitlines(), start=1):
        candidate = line.strip()
        if not candidate or candidate.startswith("#"):
            continue
        yield candidate, f"{name}:{lineno}"


def _add_common_args(parser: argparse.ArgumentParser, settings: Settings) -> None:
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in EncodingPolicy],
        default=settings.policy.value,
        help="Padding policy for leading zero digits (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        type=str.upper,
        default=settings.log_level,
        help="Set the log level for the CLI session.",
    )


def _handle_encode(argv: Sequence[str], settings: Settings) -> int:
    parser = argparse.ArgumentParser(
        prog="bytes-lit encode",
        description="Encode integer literals into big-endian byte arrays.",
    )
    parser.add_argument("literals", nargs="+", metavar="LITERAL", help="Integer literal, e.g. 0x0001")
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        choices=list(FORMATS),
        default=settings.output_format,
        help="Output format (default: %(default)s)",
    )
    parser.add_argument("-o", "--out", dest="output_path", help="Output file path (default: stdout)")
    _add_common_args(parser, settings)
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    lines: List[str] = []
    for index, text in enumerate(args.literals):
        try:
            data = encode(text, args.policy, locator=f"argv[{index}]")
        except EncodeError as exc:
            _print_error(exc, exc.locator)
            return 1
        lines.append(render(data, args.output_format))

    _write_text(args.output_path, "\n".join(lines) + "\n")
    return 0


def _handle_batch(argv: Sequence[str], settings: Settings) -> int:
    parser = argparse.ArgumentParser(
        prog="bytes-lit batch",
        description="Encode a file of integer literals, one per line, into a JSON report.",
    )
    parser.add_argument("--in", dest="input_path", default="-", help="Input file path (default: stdin)")
    parser.add_argument("--out", dest="output_path", default="-", help="Output JSON path (default: stdout)")
    _add_common_args(parser, settings)
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    name = "<stdin>" if args.input_path in (None, "-") else args.input_path
    source = _read_text(args.input_path)
    outcomes = encode_many(_iter_literal_lines(source, name), args.policy)
    _write_json(args.output_path, [outcome.to_dict() for outcome in outcomes])

    failures = [outcome for outcome in outcomes if not outcome.ok]
    for outcome in failures:
        _print_error(outcome.error, outcome.locator)
    logger.info("encoded %d literal(s), %d failed", len(outcomes), len(failures))
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytes-lit",
        description="Convert integer literals into big-endian byte arrays.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("encode", help="Encode literals given on the command line")
    subparsers.add_parser("batch", help="Encode a file of literals into a JSON report")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    if not args or args[0] in {"-h", "--help"}:
        build_parser().print_help()
        return 0

    command, rest = args[0], args[1:]

    try:
        settings = Settings.from_env()
        if command == "encode":
            return _handle_encode(rest, settings)
        if command == "batch":
            return _handle_batch(rest, settings)
    except BytesLitError as exc:
        _print_error(exc)
        return 1

    console.print(f"[red]Error:[/red] unknown command '{escape(command)}'")
    build_parser().print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
