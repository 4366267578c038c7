"""Table options loader: TOML file plus environment overrides."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from tablefmt.lib.options import TableOptions, get_options

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "tablefmt.toml"
CONFIG_ENV_VAR = "TABLEFMT_CONFIG"
ENV_PREFIX = "TABLEFMT_"

_BOOL_FIELDS = frozenset(
    field.name for field in fields(TableOptions) if field.type in {"bool", bool}
)
_OPTION_FIELDS = frozenset(field.name for field in fields(TableOptions))
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\t", "\t"),
    ("\\n", "\n"),
    ("\\v", "\v"),
    ("\\r", "\r"),
    ("\\f", "\f"),
)


def unescape(value: str) -> str:
    r"""Expand the ``\t \n \v \r \f`` escapes typed on a command line."""

    for escaped, char in _ESCAPES:
        value = value.replace(escaped, char)
    return value


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    if field_name in _BOOL_FIELDS:
        if not isinstance(raw_value, bool):
            raise ValueError(
                f"Invalid value for '{source}': expected bool, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    return raw_value


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    if field_name in _BOOL_FIELDS:
        normalized = raw_value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ValueError(
            f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
        )
    return unescape(raw_value)


def _table_payload(payload: dict[str, object], path: Path) -> dict[str, object]:
    if path.name == "pyproject.toml":
        tool = payload.get("tool", {})
        section: object = {}
        if isinstance(tool, dict):
            section = cast("dict[str, object]", tool).get("tablefmt", {})
        source = "tool.tablefmt"
    else:
        section = payload.get("table", {})
        source = "table"
        for key in payload:
            if key != "table":
                logger.warning("Ignoring unknown tablefmt config section '%s'.", key)
    if not isinstance(section, dict):
        raise ValueError(f"Invalid value for '{source}' in '{path}': expected table.")
    return cast("dict[str, object]", section)


def _apply_toml_payload(*, values: dict[str, object], payload: dict[str, object]) -> None:
    for key, raw_value in payload.items():
        if key not in _OPTION_FIELDS:
            logger.warning("Ignoring unknown tablefmt config key '%s'.", key)
            continue
        values[key] = _coerce_file_value(field_name=key, raw_value=raw_value, source=key)


def _apply_env_overrides(values: dict[str, object], environ: Mapping[str, str]) -> None:
    for field_name in sorted(_OPTION_FIELDS):
        env_name = f"{ENV_PREFIX}{field_name.upper()}"
        raw_value = environ.get(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def resolve_config_path(
    explicit: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> Path | None:
    """Pick the options file: explicit path, then $TABLEFMT_CONFIG, then ./tablefmt.toml."""

    if explicit is not None:
        return explicit
    env = os.environ if environ is None else environ
    from_env = env.get(CONFIG_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env).expanduser()
    candidate = (cwd or Path.cwd()) / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


def load_options(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    base: TableOptions | None = None,
) -> TableOptions:
    """Build options from ``base`` (current options), a TOML file and the environment."""

    start = get_options() if base is None else base
    values: dict[str, object] = {name: getattr(start, name) for name in _OPTION_FIELDS}
    if path is not None:
        payload = cast("dict[str, object]", tomllib.loads(path.read_text(encoding="utf-8")))
        _apply_toml_payload(values=values, payload=_table_payload(payload, path))

    _apply_env_overrides(values, os.environ if environ is None else environ)
    return TableOptions(**cast("dict[str, Any]", values))
