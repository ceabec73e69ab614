# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/config.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Assemble SimpleBCs settings from sectioned defaults and user overrides, enforce schema
validation and cross-key consistency, and expose the array-mode entries.

Main Tasks
----------
    1. Flatten curated defaults and merge normalized, schema-checked user params.
    2. Coerce booleans, integers, enums and arrays to their canonical forms.
    3. Cross-check array settings against the configured capacity.
    4. entries_from_settings: pair bc_name[i] with bc_groups[i] (missing side → "").
    5. string_mode: decide which front end the settings select.

Notes
-----
- A non-blank bc_string selects string mode; otherwise array mode.
- Unknown keys are kept (e.g. host parameters of other thorns) and ignored downstream.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import SchemaError
from .schema import normalize_keys, to_bool, validate

logger = logging.getLogger(__name__)

# -----------------------------
_DEFAULTS_SECTIONS = [
    ("PARSER", {
        "bc_string": "",
        "verbose": False,
    }),
    ("TABLE", {
        "bc_name": [],
        "bc_groups": [],
        "max_entries": 10,
    }),
    ("REGISTRATION", {
        "mode": "local",
        "on_failure": "aggregate",
    }),
]


def _flatten_defaults(sections):
    """
    Turn sectioned defaults into a single flat dict (stable order preserved).
    """
    flat = {}  # type: Dict[str, Any]
    for _name, block in sections:
        flat.update(block)
    return flat


DEFAULTS = _flatten_defaults(_DEFAULTS_SECTIONS)


def _coerce(cfg):
    # type: (Dict[str, Any]) -> Dict[str, Any]
    cfg["verbose"] = to_bool("verbose", cfg["verbose"])
    cfg["max_entries"] = int(str(cfg["max_entries"]).strip())
    cfg["mode"] = str(cfg["mode"]).lower()
    cfg["on_failure"] = str(cfg["on_failure"]).lower()
    cfg["bc_string"] = cfg["bc_string"] or ""
    cfg["bc_name"] = [s or "" for s in cfg["bc_name"]]
    cfg["bc_groups"] = [s or "" for s in cfg["bc_groups"]]
    return cfg


def _cross_check(cfg):
    # type: (Mapping[str, Any]) -> None
    cap = cfg["max_entries"]
    for key in ("bc_name", "bc_groups"):
        if len(cfg[key]) > cap:
            raise SchemaError(
                "{} has {} entries but max_entries is {}".format(key, len(cfg[key]), cap),
                {"key": key, "max_entries": cap},
            )


# ---------- Public API ----------
def build_settings(params=None):
    # type: (Optional[Mapping[str, Any]]) -> Dict[str, Any]
    """
    Merge user params over sectioned defaults and return a flat, coerced settings dict.

    Raises
    ------
    SchemaError
        On any per-key violation or if an array setting exceeds max_entries.
    """
    cfg = dict(DEFAULTS)
    cfg["bc_name"] = []
    cfg["bc_groups"] = []
    if params:
        # Canonicalize and validate *before* merging
        params = normalize_keys(params)
        validate(params)  # may raise SchemaError
        cfg.update(params)
    cfg = _coerce(cfg)
    _cross_check(cfg)
    logger.debug("[build_settings] %s", {k: cfg[k] for k in DEFAULTS})
    return cfg


def string_mode(settings):
    # type: (Mapping[str, Any]) -> bool
    """True when the settings carry a non-blank bc_string."""
    return bool((settings.get("bc_string") or "").strip())


def entries_from_settings(settings):
    # type: (Mapping[str, Any]) -> List[Tuple[str, str]]
    """
    Pair bc_name[i] with bc_groups[i]. The shorter array is padded with "".
    """
    names = list(settings.get("bc_name") or [])
    groups = list(settings.get("bc_groups") or [])
    n = max(len(names), len(groups))
    names += [""] * (n - len(names))
    groups += [""] * (n - len(groups))
    return list(zip(names, groups))
