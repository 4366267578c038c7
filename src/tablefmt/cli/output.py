"""CLI output formatting utilities."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Literal, cast

from tablefmt.lib.render import render

if TYPE_CHECKING:
    from typing import TextIO

    from tablefmt.lib.layout import Grid
    from tablefmt.lib.options import TableOptions

OutputFormat = Literal["text", "grid"]


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat


def normalize_output_format(requested: str | None) -> OutputFormat:
    """Resolve the ``--output`` flag; the default is the rendered table."""

    if requested is None or requested == "":
        return "text"
    normalized = requested.strip().lower()
    if normalized in {"text", "grid"}:
        return cast("OutputFormat", normalized)
    raise ValueError("--output must be one of: text, grid")


def emit(
    grid: Grid,
    options: TableOptions,
    config: OutputConfig,
    *,
    file: TextIO | None = None,
) -> None:
    """Write one grid according to the configured output mode."""

    stream = file or sys.stdout
    if config.format == "grid":
        print(json.dumps(asdict(grid), ensure_ascii=False), file=stream)
        return
    stream.write(render(grid, options))
