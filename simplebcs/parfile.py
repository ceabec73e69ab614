# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/parfile.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose:
--------
Read host parameter files (`Thorn::key = value` lines) and return the settings that belong
to one thorn as a plain mapping for `config.build_settings`.

Accepted forms:
---------------
    # comment
    SimpleBCs::bc_string    = "flat: ADMBase::lapse ADMBase::shift"
    SimpleBCs::verbose      = yes
    SimpleBCs::bc_name[0]   = "horizon"
    SimpleBCs::bc_groups[0] = "ADMBase::lapse
                               ADMBase::shift"

Notes:
------
- Double-quoted values may span lines; unquoted values end at whitespace.
- Thorn names match case-insensitively; keys are lowercased.
- Array entries are collected by index; gaps are filled with "".
- An index at or above the largest allowed capacity is rejected before any list is built.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict

from .errors import SchemaError
from .schema import RANGES

logger = logging.getLogger(__name__)

DEFAULT_THORN = "SimpleBCs"
MAX_INDEX = RANGES["max_entries"][1] - 1

_ASSIGN = re.compile(
    r'^[ \t]*(?P<thorn>\w+)::(?P<key>\w+)(?:\[(?P<idx>\d+)\])?[ \t]*=[ \t]*'
    r'(?P<value>"[^"]*"|[^\s#]+)',
    re.MULTILINE,
)


def _unquote(raw: str) -> str:
    if len(raw) >= 2 and raw[0] == '"' and raw[-1] == '"':
        return raw[1:-1]
    return raw


def parse_par_text(text: str, thorn: str = DEFAULT_THORN) -> Dict[str, Any]:
    """
    Extract `thorn`'s parameters from parameter-file text.

    Returns
    -------
    dict
        key → str for scalars, key → List[str] for indexed parameters.
        Later assignments win.

    Raises
    ------
    SchemaError
        If an array index is above MAX_INDEX.
    """
    scalars = {}  # type: Dict[str, str]
    arrays = {}  # type: Dict[str, Dict[int, str]]
    for m in _ASSIGN.finditer(text):
        if m.group("thorn").lower() != thorn.lower():
            continue
        key = m.group("key").lower()
        value = _unquote(m.group("value"))
        if m.group("idx") is None:
            scalars[key] = value
        else:
            idx = int(m.group("idx"))
            if idx > MAX_INDEX:
                raise SchemaError(
                    "Array index {} for '{}' exceeds the largest allowed index {}".format(idx, key, MAX_INDEX),
                    {"key": key, "index": idx},
                )
            arrays.setdefault(key, {})[idx] = value

    out = dict(scalars)  # type: Dict[str, Any]
    for key, slots in arrays.items():
        n = max(slots) + 1
        out[key] = [slots.get(i, "") for i in range(n)]
    return out


def read_par(path: str, thorn: str = DEFAULT_THORN) -> Dict[str, Any]:
    """
    Read a parameter file from disk and return `thorn`'s parameters.

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError("[read_par] File not found: {}".format(path))
    params = parse_par_text(p.read_text(encoding="utf-8"), thorn)
    logger.info("[read_par] %d %s parameters read from %s", len(params), thorn, path)
    return params
