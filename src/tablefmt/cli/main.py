"""Cyclopts CLI entry point for tablefmt."""

from __future__ import annotations

import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import structlog
from cyclopts import App, Parameter

from tablefmt import __version__
from tablefmt.cli.output import OutputConfig, emit, normalize_output_format
from tablefmt.lib.settings import load_options, resolve_config_path, unescape
from tablefmt.lib.table import safe_table_grid
from tablefmt.lib.types import RawString

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)

_VERBOSE_FLAGS = frozenset({"-v", "--verbose"})
_LOG_JSON_FLAG = "--log-json"

app = App(
    name="tablefmt",
    help="Reflow text, JSON or raw strings into a text table.",
    version=__version__,
    help_formatter="plain",
)


def _read_input(path: Path | None) -> str:
    if path is None or str(path) == "-":
        logger.debug("Reading table input from stdin.")
        return sys.stdin.read()
    logger.debug("Reading table input.", path=str(path))
    return path.read_text(encoding="utf-8")


def _decode_input(text: str, *, json_input: bool, raw: bool) -> object:
    if json_input and raw:
        raise ValueError("--json and --raw cannot be combined")
    if json_input:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid JSON input: {exc}") from exc
    if raw:
        return RawString(text.strip())
    return text


def _option_changes(
    *,
    plain: bool,
    column_separator: str | None,
    row_separator: str | None,
    placeholder: str | None,
    discard_overflow: bool,
    transpose: bool,
) -> dict[str, object]:
    changes: dict[str, object] = {}
    if plain:
        changes["use_border"] = False
    if column_separator is not None:
        changes["column_separator"] = unescape(column_separator)
    if row_separator is not None:
        changes["row_separator"] = unescape(row_separator)
    if placeholder is not None:
        changes["placeholder"] = placeholder
    if discard_overflow:
        changes["discard_overflow"] = True
    if transpose:
        changes["transpose_record"] = True
    return changes


@app.default
def render_table(
    path: Annotated[
        Path | None,
        Parameter(help="Input file; stdin when omitted or '-'."),
    ] = None,
    *,
    json_input: Annotated[
        bool,
        Parameter(name="--json", help="Parse the input as JSON and tabulate the value."),
    ] = False,
    raw: Annotated[
        bool,
        Parameter(name="--raw", help="Show the input as one literal cell."),
    ] = False,
    plain: Annotated[
        bool,
        Parameter(name="--plain", help="Render without border glyphs."),
    ] = False,
    column_separator: Annotated[
        str | None,
        Parameter(name="--column-separator", help="Field separator; empty means whitespace."),
    ] = None,
    row_separator: Annotated[
        str | None,
        Parameter(name="--row-separator", help="Row separator; empty means whitespace."),
    ] = None,
    placeholder: Annotated[
        str | None,
        Parameter(name="--placeholder", help="Token marking an intentionally empty field."),
    ] = None,
    discard_overflow: Annotated[
        bool,
        Parameter(name="--discard-overflow", help="Drop fields beyond the header width."),
    ] = False,
    transpose: Annotated[
        bool,
        Parameter(name="--transpose", help="Show a single record as key/value rows."),
    ] = False,
    config: Annotated[
        Path | None,
        Parameter(name="--config", help="TOML options file."),
    ] = None,
    output: Annotated[
        str | None,
        Parameter(name="--output", help="Output mode: text or grid (JSON)."),
    ] = None,
) -> None:
    """Render the input as a table on stdout."""

    output_config = OutputConfig(format=normalize_output_format(output))
    config_path = resolve_config_path(config)
    base = load_options(config_path)
    if config_path is not None:
        logger.info("Loaded table options.", path=str(config_path))

    changes = _option_changes(
        plain=plain,
        column_separator=column_separator,
        row_separator=row_separator,
        placeholder=placeholder,
        discard_overflow=discard_overflow,
        transpose=transpose,
    )
    value = _decode_input(_read_input(path), json_input=json_input, raw=raw)

    options = replace(base, **changes)
    grid = safe_table_grid(value, options)
    logger.debug("Built grid.", rows=grid.row_count, columns=grid.column_count)
    emit(grid, options, output_config)


def _extract_logging_flags(argv: Sequence[str]) -> tuple[list[str], int, bool]:
    verbosity = 0
    json_logs = False
    cleaned: list[str] = []
    for arg in argv:
        if arg in _VERBOSE_FLAGS:
            verbosity += 1
            continue
        if arg == _LOG_JSON_FLAG:
            json_logs = True
            continue
        cleaned.append(arg)
    return cleaned, verbosity, json_logs


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `tablefmt` and `python -m tablefmt`."""

    from tablefmt.lib.logging import configure_logging

    raw_args = list(sys.argv[1:] if argv is None else argv)
    args, verbosity, json_logs = _extract_logging_flags(raw_args)
    # Configure logging early so warnings go to stderr, not into the table.
    configure_logging(json_mode=json_logs, verbosity=verbosity)

    try:
        app(args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from None
