# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/validate.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Post-parse checks over a built BoundaryTable. The parsers accept duplicates and empty
groups; these checks point out table shapes that are legal but probably unintended.

Main Tasks
----------
    1. Report variables selected for more than one boundary condition (ConflictError).
    2. List named groups that ended up without references.
    3. cross_validate(table, strict): collect the problems, or raise the first one.

Notes
-----
- The implicit "none" group of string mode is never reported as empty.
- A variable listed twice under the same boundary condition is not a conflict.
"""

from typing import Dict, List

from .errors import ConflictError, ValidationError
from .grammar import IMPLICIT_GROUP
from .model import BoundaryTable


def find_conflicts(table):
    # type: (BoundaryTable) -> List[ConflictError]
    """
    Variables claimed by several distinct boundary conditions, in first-seen order.
    """
    claims = {}  # type: Dict[str, List[str]]
    for group, ref in table.refs():
        bcs = claims.setdefault(ref.full_name, [])
        if group.name not in bcs:
            bcs.append(group.name)
    return [ConflictError(var, bcs) for var, bcs in claims.items() if len(bcs) > 1]


def empty_groups(table):
    # type: (BoundaryTable) -> List[str]
    """Names of groups with no references, excluding the implicit group at position 0."""
    out = []
    for i, group in enumerate(table):
        if group.refs:
            continue
        if i == 0 and group.name == IMPLICIT_GROUP:
            continue
        out.append(group.name)
    return out


def cross_validate(table, strict=False):
    # type: (BoundaryTable, bool) -> List[ValidationError]
    """
    Cross-group validation of a finished table.

    Raises
    ------
    ValidationError
        Only when `strict` is True and a problem was found (the first one).
    """
    problems = []  # type: List[ValidationError]
    problems.extend(find_conflicts(table))
    for name in empty_groups(table):
        problems.append(ValidationError(
            "Boundary condition {} has no variables".format(name),
            {"bc": name},
        ))
    if strict and problems:
        raise problems[0]
    return problems
