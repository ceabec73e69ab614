# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/table.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Array-mode table builder: turn a bounded list of (bc_name, group_list) entries into a
BoundaryTable plus a list of per-entry problems, without stopping at the first problem.

Main Tasks
----------
    1. split_group_list(text): whitespace split, blank → [].
    2. resolve_refs(index, names, resolver): one VariableRef per name; misses are recorded
       as UnknownVariableError and the reference is kept unresolved.
    3. build_table(entries, resolver, max_entries): commit named, non-empty entries;
       report MissingNameError for unnamed, non-empty ones; drop named, empty ones.

Notes
-----
- No implicit "none" group in this mode.
- Split and resolve are separate stages so resolvers can be swapped in tests.
"""

from typing import List, Optional, Sequence, Tuple

from .errors import MissingNameError, SchemaError, UnknownVariableError, ValidationError
from .model import BoundaryGroup, BoundaryTable, VariableRef
from .resolve import NameToId, resolve_names

DEFAULT_MAX_ENTRIES = 10

Entry = Tuple[str, str]


def split_group_list(text: Optional[str]) -> List[str]:
    """Split a group list on runs of whitespace; None or blank → []."""
    if not text:
        return []
    return text.split()


def resolve_refs(index: int,
                 names: Sequence[str],
                 resolver: Optional[NameToId]
                 ) -> Tuple[List[VariableRef], List[UnknownVariableError]]:
    """
    Build references for `names` (entry `index`) and resolve their group ids.

    With no resolver every reference stays unresolved and no errors are reported.
    """
    if resolver is None:
        return [VariableRef.from_full_name(n) for n in names], []
    ids, missing = resolve_names(names, resolver)
    refs = [VariableRef.from_full_name(n, gid) for n, gid in zip(names, ids)]
    errors = [UnknownVariableError(index, n) for n in missing]
    return refs, errors


def build_table(entries: Sequence[Entry],
                resolver: Optional[NameToId] = None,
                max_entries: int = DEFAULT_MAX_ENTRIES
                ) -> Tuple[BoundaryTable, List[ValidationError]]:
    """
    Build a BoundaryTable from (name, group_list) entries.

    Parameters
    ----------
    entries : Sequence[Tuple[str, str]]
        Boundary condition slots in configuration order.
    resolver : callable, optional
        name → Optional[int]; misses are reported as UnknownVariableError.
    max_entries : int
        Capacity of the slot array.

    Returns
    -------
    (BoundaryTable, List[ValidationError])

    Raises
    ------
    SchemaError
        If more than `max_entries` entries are supplied.
    """
    if len(entries) > max_entries:
        raise SchemaError(
            "Too many boundary condition entries: {} (capacity {})".format(len(entries), max_entries),
            {"entries": len(entries), "max_entries": max_entries},
        )

    table = BoundaryTable()
    errors = []  # type: List[ValidationError]
    for index, (name, group_list) in enumerate(entries):
        name = (name or "").strip()
        names = split_group_list(group_list)
        refs, unknown = resolve_refs(index, names, resolver)
        errors.extend(unknown)
        if not refs:
            continue
        if not name:
            errors.append(MissingNameError(index, names))
            continue
        table.append(BoundaryGroup(name, refs))
    return table, errors
