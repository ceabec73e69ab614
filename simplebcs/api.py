# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/api.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
High-level SimpleBCs API. Given settings (from a mapping or a parameter file), build the
boundary-condition table with the front end the settings select, report it, and hand it
to the host's select/sync operations.

Main Tasks
----------
    1. parse_bc_string: tokenize + reduce a string; warn about skipped tokens.
    2. build_from_entries: array-mode build; log each collected problem.
    3. load_table: pick the front end from settings and return (table, problems).
    4. register_boundaries: build once through a TableCache, then select (local) or
       sync (level) according to settings["mode"] and settings["on_failure"].

Notes
-----
- `config.build_settings` is the single source of truth for settings validation.
- Verbose table listings use the scoped info stream (one log record per listing).
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .config import build_settings, entries_from_settings, string_mode
from .driver import BoundarySelector, GroupSync, TableCache, register_table, sync_table
from .errors import ConfigError, ValidationError
from .grammar import scan
from .logstream import info_stream
from .model import BoundaryTable
from .parfile import DEFAULT_THORN, read_par
from .report import format_table
from .resolve import NameToId
from .table import DEFAULT_MAX_ENTRIES, Entry, build_table
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def _list_table(table, title, verbose):
    if not verbose:
        return
    with info_stream(logger) as sout:
        sout.write(format_table(table, title))


def parse_bc_string(text: str, verbose: bool = False) -> BoundaryTable:
    """
    String mode: tokenize `text` and fold it into a BoundaryTable.

    Skipped tokens (lenient grammar) are logged at WARNING level with their input offset.

    Raises
    ------
    IllegalCharacterError
        If `text` contains a character outside identifiers, colons and separators.
    """
    table, skipped = scan(tokenize(text))
    for s in skipped:
        logger.warning("[parse_bc_string] Skipped token %r at position %d", s.text, s.offset)
    _list_table(table, "BCs to be applied by SimpleBCs:", verbose)
    return table


def build_from_entries(entries: Sequence[Entry],
                       resolver: Optional[NameToId] = None,
                       *,
                       max_entries: int = DEFAULT_MAX_ENTRIES,
                       verbose: bool = False) -> Tuple[BoundaryTable, List[ValidationError]]:
    """
    Array mode: build from (name, group_list) entries, logging every collected problem.
    """
    table, problems = build_table(entries, resolver, max_entries)
    for p in problems:
        logger.error("[build_from_entries] %s", p)
    _list_table(table, "BCs to be applied by SimpleBCs:", verbose)
    return table, problems


def load_table(settings: Mapping[str, Any],
               resolver: Optional[NameToId] = None) -> Tuple[BoundaryTable, List[ValidationError]]:
    """
    Build the table the settings describe (string mode when bc_string is non-blank).

    Args
    ----
    settings : Mapping[str, Any]
        Output of `config.build_settings`.
    resolver : callable, optional
        Name → group id lookup; used by array mode.

    Returns
    -------
    (BoundaryTable, List[ValidationError])
        Problems are always empty in string mode.
    """
    verbose = bool(settings.get("verbose"))
    if string_mode(settings):
        return parse_bc_string(settings["bc_string"], verbose=verbose), []
    return build_from_entries(
        entries_from_settings(settings),
        resolver,
        max_entries=int(settings.get("max_entries", DEFAULT_MAX_ENTRIES)),
        verbose=verbose,
    )


def load_settings(path: Optional[str] = None,
                  params: Optional[Mapping[str, Any]] = None,
                  thorn: str = DEFAULT_THORN) -> dict:
    """
    Settings from a parameter file (if given) with `params` applied on top.
    """
    merged = {}  # type: dict
    if path is not None:
        merged.update(read_par(path, thorn))
    if params:
        merged.update(params)
    return build_settings(merged)


def register_boundaries(settings: Mapping[str, Any],
                        *,
                        selector: Optional[BoundarySelector] = None,
                        sync: Optional[GroupSync] = None,
                        resolver: Optional[NameToId] = None,
                        cache: Optional[TableCache] = None) -> List[ConfigError]:
    """
    Build the table once (through `cache`) and apply it in the configured mode.

    Args
    ----
    settings : Mapping[str, Any]
        Output of `config.build_settings`.
    selector : callable, keyword-only
        (variable_full_name, bc_name) → rc; required in "local" mode.
    sync : callable, keyword-only
        (group_id) → rc; required in "level" mode.
    resolver : callable, keyword-only
        Name → group id lookup (array-mode resolution and level-mode sync).
    cache : TableCache, keyword-only
        Reused across calls; a fresh cache builds every time.

    Returns
    -------
    List[ConfigError]
        Host-call failures (and, in level mode, unresolved variables). Array-mode
        build problems are logged by `build_from_entries` and not repeated here.

    Raises
    ------
    ValueError
        If the callable the mode requires is missing.
    """
    cache = cache if cache is not None else TableCache()
    table = cache.get(lambda: load_table(settings, resolver)[0])
    mode = settings.get("mode", "local")
    policy = settings.get("on_failure", "aggregate")
    verbose = bool(settings.get("verbose"))

    if mode == "local":
        if selector is None:
            raise ValueError("mode 'local' requires a selector callable.")
        failures = register_table(table, selector, policy=policy, verbose=verbose)
    elif mode == "level":
        if sync is None:
            raise ValueError("mode 'level' requires a sync callable.")
        failures = sync_table(table, sync, resolver, policy=policy, verbose=verbose)
    else:
        raise ValueError("Unsupported mode: {!r}".format(mode))

    if failures:
        logger.warning("[register_boundaries] %d of %d host calls failed",
                       len(failures), sum(1 for _ in table.refs()))
    return list(failures)
