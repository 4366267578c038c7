"""Per-field table directives.

A dataclass field opts into custom rendering through its metadata::

    name: str = field(metadata={"table": "Name"})
    created: int = field(metadata={"table": "Created,time"})
    secret: str = field(metadata={"table": "-"})
    history: list[int] = field(metadata={"table": ",,nolist"})

The directive grammar is ``name[,kind][,nolist]``. A name of ``-`` hides the
field everywhere, an empty name keeps the declared one, ``kind`` is handed to
``Convertible.convert`` and ``nolist`` keeps the field out of list and
mapping rows.
"""

from __future__ import annotations

from dataclasses import dataclass

TAG_KEY = "table"
EXCLUDED_NAME = "-"
NOLIST = "nolist"


@dataclass(frozen=True, slots=True)
class TagSpec:
    name: str = ""
    kind: str = ""
    inclusion: str = ""

    @property
    def excluded(self) -> bool:
        return self.name == EXCLUDED_NAME

    @property
    def listed(self) -> bool:
        return self.inclusion != NOLIST

    def display_name(self, declared: str) -> str:
        return self.name or declared


def parse_tag(directive: str | None) -> TagSpec:
    """Parse ``name[,kind][,inclusion]``; missing parts default to ``""``.

    >>> parse_tag("Created,time")
    TagSpec(name='Created', kind='time', inclusion='')
    """

    if not directive:
        return TagSpec()
    tokens = directive.split(",")
    padded = (tokens + ["", ""])[:3]
    name, kind, inclusion = (token.strip() for token in padded)
    return TagSpec(name=name, kind=kind, inclusion=inclusion)
