"""Defaults and option-dict loading for LineRecordStream."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "\t"
DEFAULT_ENCODING = "utf-8"


def default_config() -> Dict[str, Any]:
    """Options understood by LineRecordStream.from_config()."""
    return {
        "read_separator": DEFAULT_SEPARATOR,
        "write_separator": DEFAULT_SEPARATOR,
        "encoding": DEFAULT_ENCODING,
    }


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay override keys on base. Mutates base; returns base."""
    base.update(override)
    return base


def load_config(path: Optional[Path | str] = None) -> Dict[str, Any]:
    """
    Load options from a JSON file over the defaults.
    A missing or unreadable file yields the defaults.
    """
    cfg = default_config()
    if path is None:
        return cfg
    p = Path(path)
    if not p.is_file():
        return cfg
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("ignoring unreadable config %s: %s", p, exc)
        return cfg
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", p)
        return cfg
    return merge_config(cfg, data)
