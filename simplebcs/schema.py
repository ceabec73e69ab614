# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/schema.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Lightweight schema layer for SimpleBCs settings. Canonicalizes user-friendly keys to the
parameter names, validates categorical options against enumerations, numeric scalars
against ranges, and booleans/arrays against their accepted forms, raising `SchemaError`
with actionable messages on violations.

Main Tasks
----------
    1. Canonicalize params via `normalize_keys` using curated `ALIASES`.
    2. Enforce categorical constraints using `ENUMS` (case-insensitive matching).
    3. Enforce integer constraints using `RANGES` (inclusive bounds).
    4. Accept booleans in host spelling (yes/no, true/false, 1/0) via `to_bool`.
    5. Require array settings to be sequences of strings.

Notes
-----
- Unknown keys pass through untouched; only listed keys are validated.
- Keys are matched case-insensitively (host parameter names are case-insensitive).
"""

from typing import Any, Dict, Mapping

from .errors import SchemaError

__all__ = ["normalize_keys", "validate", "to_bool", "ALIASES", "ENUMS", "RANGES", "BOOLEANS", "ARRAYS"]

# --------------------------
# Canonicalization (aliases)
# --------------------------
ALIASES = {
    "string": "bc_string",
    "bcs": "bc_string",
    "bc_names": "bc_name",
    "names": "bc_name",
    "bc_group": "bc_groups",
    "groups": "bc_groups",
    "capacity": "max_entries",
    "failure_policy": "on_failure",
}

# --------------------------
# Enumerations (exact sets)
# --------------------------
ENUMS = {
    "mode": {"LOCAL", "LEVEL"},
    "on_failure": {"AGGREGATE", "PER_GROUP", "FAIL_FAST"},
}

# --------------------------
# Integer ranges (inclusive)
# --------------------------
RANGES = {
    "max_entries": (1, 1000),
}

BOOLEANS = {"verbose"}
ARRAYS = {"bc_name", "bc_groups"}
STRINGS = {"bc_string"}

_TRUE = {"yes", "true", "1", "on"}
_FALSE = {"no", "false", "0", "off"}


def normalize_keys(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map user-friendly keys to canonical setting names (no value coercion).

    Keys are lowercased first; only keys present in `ALIASES` are rewritten.
    """
    out = {}  # type: Dict[str, Any]
    for k, v in params.items():
        lk = str(k).lower()
        out[ALIASES.get(lk, lk)] = v
    return out


def to_bool(key: str, val: Any) -> bool:
    """
    Interpret a host-style boolean.

    Raises
    ------
    SchemaError
        If `val` is not one of yes/no, true/false, on/off, 1/0 (any case) or a bool.
    """
    if isinstance(val, bool):
        return val
    sval = str(val).strip().lower()
    if sval in _TRUE:
        return True
    if sval in _FALSE:
        return False
    raise SchemaError("Invalid boolean for {k}: {v!r}".format(k=key, v=val), {"key": key})


def _check_enum(key: str, val: Any) -> None:
    if key in ENUMS:
        sval = str(val).upper()
        if sval not in ENUMS[key]:
            raise SchemaError(
                "Invalid value for {k}: {v!r}. Allowed: {opts}".format(
                    k=key, v=val, opts=sorted(o.lower() for o in ENUMS[key])
                )
            )


def _check_range(key: str, val: Any) -> None:
    if key not in RANGES:
        return
    lo, hi = RANGES[key]
    if isinstance(val, bool):
        raise SchemaError("Non-integer value for {k}: {v!r}".format(k=key, v=val))
    try:
        ival = int(str(val).strip())
    except ValueError:
        raise SchemaError("Non-integer value for {k}: {v!r}".format(k=key, v=val))
    if not (lo <= ival <= hi):
        raise SchemaError(
            "Out-of-range {k}: {v} (expected {lo} ≤ ... ≤ {hi})".format(k=key, v=ival, lo=lo, hi=hi)
        )


def _check_array(key: str, val: Any) -> None:
    if key not in ARRAYS:
        return
    if isinstance(val, (str, bytes)) or not hasattr(val, "__iter__"):
        raise SchemaError("Expected a list of strings for {k}, got {t}".format(k=key, t=type(val).__name__))
    for i, item in enumerate(val):
        if item is not None and not isinstance(item, str):
            raise SchemaError(
                "Expected a string at {k}[{i}], got {t}".format(k=key, i=i, t=type(item).__name__),
                {"key": key, "index": i},
            )


def _check_string(key: str, val: Any) -> None:
    if key in STRINGS and val is not None and not isinstance(val, str):
        raise SchemaError("Expected a string for {k}, got {t}".format(k=key, t=type(val).__name__))


def validate(params: Mapping[str, Any]) -> None:
    """
    Validate a settings dict *after* canonicalization via `normalize_keys`.

    Raises
    ------
    SchemaError
        On any violation (bad enum, bad boolean, non-integer or out-of-range, bad array).
    """
    for k, v in params.items():
        _check_enum(k, v)
        _check_range(k, v)
        _check_array(k, v)
        _check_string(k, v)
        if k in BOOLEANS:
            to_bool(k, v)
