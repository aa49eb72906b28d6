"""
Portfolio Data Sync
===================
Flattens the portfolio content module into public/portfolioData.json.

Icon values (callables, or objects carrying a display name) become their
display name; unnamed callables become "Icon".

Usage:
    python -m folio.sync
    python -m folio.sync --source mysite.content --output public/portfolioData.json
"""

from __future__ import annotations

import dataclasses
import importlib
import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from folio.config import DEFAULT_CONTENT_MODULE, FALLBACK_ICON_LABEL, SYNC_KEYS, SYNC_OUTPUT
from folio.io import save_json

logger = logging.getLogger("folio.sync")

_ANONYMOUS_NAMES = {"", "<lambda>"}


class SyncError(Exception):
    """Content could not be loaded, serialized or written."""


def display_name(value: Any) -> str | None:
    """displayName / display_name attribute (or displayName key), if the value carries one."""
    if isinstance(value, Mapping):
        name = value.get("displayName")
        return name if isinstance(name, str) and name else None
    for attr in ("displayName", "display_name"):
        name = getattr(value, attr, None)
        if isinstance(name, str) and name:
            return name
    return None


def icon_label(fn: Any) -> str:
    """Name for a callable leaf: display name, else __name__, else the fallback label."""
    name = display_name(fn)
    if name:
        return name
    name = getattr(fn, "__name__", "")
    if isinstance(name, str) and name not in _ANONYMOUS_NAMES:
        return name
    return FALLBACK_ICON_LABEL


def to_jsonable(value: Any) -> Any:
    """Deep copy of value with only JSON types left. Raises TypeError otherwise."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if callable(value):
        return icon_label(value)
    name = display_name(value)
    if name:
        return name
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if dataclasses.is_dataclass(value):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _source_value(raw: Any, key: str, attr: str) -> Any:
    if isinstance(raw, Mapping):
        return raw.get(key, raw.get(attr))
    return getattr(raw, attr, getattr(raw, key, None))


def process_data(raw: Any) -> dict[str, Any]:
    """Pick the published keys from a content module or mapping and flatten them."""
    result: dict[str, Any] = {}
    for key, attr in SYNC_KEYS.items():
        value = _source_value(raw, key, attr)
        if value is None:
            continue
        result[key] = to_jsonable(value)
    return result


def load_content(module_name: str = DEFAULT_CONTENT_MODULE) -> Any:
    return importlib.import_module(module_name)


def sync_portfolio(source: Any, output_path: Path = SYNC_OUTPUT) -> dict[str, Any]:
    """Process and write. Returns what was written.

    Raises:
        SyncError: on import, serialization or write failure (nothing written)
    """
    try:
        if isinstance(source, str):
            source = load_content(source)
        data = process_data(source)
        save_json(Path(output_path), data)
    except (ImportError, TypeError, ValueError, OSError) as e:
        raise SyncError(str(e)) from e
    return data


def main():
    """CLI entry point."""
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Folio Sync — export portfolio content to JSON")
    parser.add_argument("--source", type=str, default=DEFAULT_CONTENT_MODULE,
                        help="Importable content module (default: %(default)s)")
    parser.add_argument("--output", type=str, default=str(SYNC_OUTPUT),
                        help="Output JSON path")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    logger.info("Syncing portfolio data from %s...", args.source)
    try:
        data = sync_portfolio(args.source, Path(args.output))
    except SyncError as e:
        logger.error("Error syncing portfolio data: %s", e)
        sys.exit(1)

    logger.info("Synced %d sections to: %s", len(data), args.output)


if __name__ == "__main__":
    main()
