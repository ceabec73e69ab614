# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/driver.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Hand a built BoundaryTable to the host: select each variable for its boundary condition
("local" mode) or synchronize each variable's group ("level" mode), under an explicit
failure policy. Also owns the build-once table cache.

Main Tasks
----------
    1. TableCache: lock-guarded build-once cache with explicit invalidation.
    2. register_table: selector(full_name, bc_name) once per (group, variable).
    3. sync_table: sync(gid) once per variable, resolving missing ids first.
    4. Failure policies: aggregate | per_group | fail_fast.

Notes
-----
- A host call fails if it raises or returns a negative integer; None/0/positive succeed.
- "aggregate" attempts every reference and returns all failures (default).
- "per_group" abandons the rest of a group after its first failure.
- "fail_fast" logs through the error stream and raises the first failure.
"""

import logging
import threading
from typing import Callable, List, Optional

from .errors import ConfigError, ExternalOperationError, SchemaError, UnknownVariableError
from .logstream import error_stream
from .model import BoundaryTable
from .resolve import NameToId

logger = logging.getLogger(__name__)

POLICIES = ("aggregate", "per_group", "fail_fast")

BoundarySelector = Callable[[str, str], Optional[int]]
GroupSync = Callable[[int], Optional[int]]


class TableCache:
    """
    Build-once holder for a BoundaryTable.

    The first `get(builder)` calls `builder()` and keeps the result; later calls return
    it without calling `builder`. `invalidate()` forgets the table (reconfiguration).
    Check-and-set is guarded by a lock, so concurrent first calls build exactly once.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._table = None  # type: Optional[BoundaryTable]

    @property
    def built(self) -> bool:
        return self._table is not None

    def get(self, builder: Callable[[], BoundaryTable]) -> BoundaryTable:
        with self._lock:
            if self._table is None:
                self._table = builder()
                logger.debug("[TableCache] Table built (%d groups)", len(self._table))
            return self._table

    def invalidate(self) -> None:
        with self._lock:
            self._table = None


def _check_policy(policy):
    if policy not in POLICIES:
        raise SchemaError(
            "Invalid failure policy: {!r}. Allowed: {}".format(policy, list(POLICIES)),
            {"policy": policy},
        )


def _call(operation, fn, args, variable, bc=None):
    # type: (str, Callable, tuple, str, Optional[str]) -> Optional[ExternalOperationError]
    """Run one host call; return the failure (or None on success)."""
    try:
        rc = fn(*args)
    except Exception as e:
        return ExternalOperationError(operation, variable, bc, cause=e)
    if isinstance(rc, int) and not isinstance(rc, bool) and rc < 0:
        return ExternalOperationError(operation, variable, bc, code=rc)
    return None


def _fail(err, policy):
    # type: (ConfigError, str) -> None
    if policy == "fail_fast":
        with error_stream(logger, lambda: err) as sout:
            sout.write(str(err))
    logger.error("%s", err)


def register_table(table: BoundaryTable,
                   selector: BoundarySelector,
                   *,
                   policy: str = "aggregate",
                   verbose: bool = False) -> List[ExternalOperationError]:
    """
    Select every variable of every group for that group's boundary condition.

    Returns
    -------
    List[ExternalOperationError]
        Failures in call order (empty on full success).

    Raises
    ------
    ExternalOperationError
        First failure, when policy is "fail_fast".
    """
    _check_policy(policy)
    failures = []  # type: List[ExternalOperationError]
    for group in table:
        for ref in group.refs:
            err = _call("select", selector, (ref.full_name, group.name), ref.full_name, group.name)
            if verbose:
                logger.info("select for bc: %s -> %s", group.name, ref.full_name)
            if err is None:
                continue
            _fail(err, policy)
            failures.append(err)
            if policy == "per_group":
                break
    return failures


def sync_table(table: BoundaryTable,
               sync: GroupSync,
               resolver: Optional[NameToId] = None,
               *,
               policy: str = "aggregate",
               verbose: bool = False) -> List[ConfigError]:
    """
    Synchronize the group of every referenced variable.

    References without a group id are resolved through `resolver`; a reference that
    still has no id yields an UnknownVariableError (entry = group position).
    """
    _check_policy(policy)
    failures = []  # type: List[ConfigError]
    for index, group in enumerate(table):
        for ref in group.refs:
            gid = ref.gid
            if gid is None and resolver is not None:
                gid = resolver(ref.full_name)
            if gid is None:
                err = UnknownVariableError(index, ref.full_name)  # type: Optional[ConfigError]
            else:
                err = _call("sync", sync, (gid,), ref.full_name, group.name)
                if verbose:
                    logger.info("sync for bc: %s -> %s (gid %d)", group.name, ref.full_name, gid)
            if err is None:
                continue
            _fail(err, policy)
            failures.append(err)
            if policy == "per_group":
                break
    return failures
