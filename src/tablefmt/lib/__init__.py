"""Core tablefmt library exports."""

from tablefmt.lib.encoder import encode, encode_plain, try_encode
from tablefmt.lib.layout import Grid, build_grid
from tablefmt.lib.options import TableOptions, configure, get_options, override, reset
from tablefmt.lib.render import render
from tablefmt.lib.settings import load_options
from tablefmt.lib.table import build_table_grid, format_table, print_table, safe_table_grid
from tablefmt.lib.tags import TagSpec, parse_tag
from tablefmt.lib.types import Convertible, RawString, ValueShape, shape_of
from tablefmt.lib.width import display_width

__all__ = [
    "Convertible",
    "Grid",
    "RawString",
    "TableOptions",
    "TagSpec",
    "ValueShape",
    "build_grid",
    "build_table_grid",
    "configure",
    "display_width",
    "encode",
    "encode_plain",
    "format_table",
    "get_options",
    "load_options",
    "override",
    "parse_tag",
    "print_table",
    "render",
    "reset",
    "safe_table_grid",
    "shape_of",
    "try_encode",
]
