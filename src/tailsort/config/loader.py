"""JSON config file loading.

Expected shape (both keys optional)::

    {
        "sortOrder": ["flex", "p-4", ...],
        "customRegex": ["container(.*)", ["outer(.*)", "inner(.*)"]]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tailsort.errors import ConfigError

__all__ = ["ConfigFile", "load_config", "parse_config"]

RegexSpec = str | tuple[str, str]


@dataclass(frozen=True)
class ConfigFile:
    """Parsed config file contents."""

    sort_order: tuple[str, ...] | None = None
    custom_regex: tuple[RegexSpec, ...] | None = None


def _shape_error(path: str, message: str) -> ConfigError:
    return ConfigError(
        path,
        message,
        f"Make sure the config file {path} is valid json with the expected format",
    )


def _parse_sort_order(raw: Any, path: str) -> tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise _shape_error(path, "sortOrder must be a list of class names")
    return tuple(raw)


def _parse_custom_regex(raw: Any, path: str) -> tuple[RegexSpec, ...]:
    if not isinstance(raw, list):
        raise _shape_error(path, "customRegex must be a list")
    specs: list[RegexSpec] = []
    for item in raw:
        if isinstance(item, str):
            specs.append(item)
        elif (
            isinstance(item, list)
            and len(item) == 2
            and all(isinstance(part, str) for part in item)
        ):
            specs.append((item[0], item[1]))
        else:
            raise _shape_error(
                path,
                f"customRegex entries must be a string or a [container, class] pair, got {item!r}",
            )
    return tuple(specs)


def parse_config(text: str, path: str = "<config>") -> ConfigFile:
    """Parse config file *text*; *path* is only used in error messages."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise _shape_error(path, f"Error while parsing the config file: {exc}") from exc
    if not isinstance(data, dict):
        raise _shape_error(path, "Config file must contain a JSON object")

    sort_order = data.get("sortOrder")
    custom_regex = data.get("customRegex")
    return ConfigFile(
        sort_order=None if sort_order is None else _parse_sort_order(sort_order, path),
        custom_regex=None if custom_regex is None else _parse_custom_regex(custom_regex, path),
    )


def load_config(path: str | Path) -> ConfigFile:
    """Read and parse the config file at *path*."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(
            str(path),
            f"Error reading the config file: {exc}",
            f"Make sure the file {path} exists",
        ) from exc
    return parse_config(text, str(path))
