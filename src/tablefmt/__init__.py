"""tablefmt: render any Python value as a text table."""

from tablefmt.lib import (
    Convertible,
    Grid,
    RawString,
    TableOptions,
    TagSpec,
    ValueShape,
    build_grid,
    build_table_grid,
    configure,
    display_width,
    encode,
    encode_plain,
    format_table,
    get_options,
    load_options,
    override,
    parse_tag,
    print_table,
    render,
    reset,
    safe_table_grid,
    shape_of,
    try_encode,
)

__version__ = "0.3.0"

__all__ = [
    "Convertible",
    "Grid",
    "RawString",
    "TableOptions",
    "TagSpec",
    "ValueShape",
    "__version__",
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
