import logging
import threading
import time

import pytest

from simplebcs.driver import TableCache, register_table, sync_table
from simplebcs.errors import ExternalOperationError, SchemaError, UnknownVariableError
from simplebcs.grammar import reduce
from simplebcs.model import BoundaryGroup, BoundaryTable, VariableRef
from simplebcs.resolve import MappingResolver
from simplebcs.tokenizer import tokenize


def _table():
    return reduce(tokenize("flat: a::x a::y, rad: b::z"))


class Recorder:
    def __init__(self, fail=(), raise_on=()):
        self.calls = []
        self.fail = set(fail)
        self.raise_on = set(raise_on)

    def __call__(self, *args):
        self.calls.append(args)
        if args[0] in self.raise_on:
            raise RuntimeError("host exploded")
        return -1 if args[0] in self.fail else 0


# ---- TableCache ----

def test_cache_builds_once():
    count = []
    cache = TableCache()

    def builder():
        count.append(1)
        return _table()

    assert not cache.built
    first = cache.get(builder)
    second = cache.get(builder)
    assert first is second
    assert len(count) == 1
    assert cache.built


def test_cache_invalidate_rebuilds():
    cache = TableCache()
    first = cache.get(_table)
    cache.invalidate()
    assert not cache.built
    second = cache.get(_table)
    assert first is not second
    assert first == second


def test_cache_concurrent_first_calls_build_once():
    count = []
    cache = TableCache()

    def builder():
        count.append(1)
        time.sleep(0.01)
        return _table()

    results = []
    threads = [threading.Thread(target=lambda: results.append(cache.get(builder))) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(count) == 1
    assert all(r is results[0] for r in results)


# ---- register_table ----

def test_select_called_once_per_reference_in_order():
    sel = Recorder()
    failures = register_table(_table(), sel)
    assert failures == []
    assert sel.calls == [("a::x", "flat"), ("a::y", "flat"), ("b::z", "rad")]


def test_aggregate_attempts_everything():
    sel = Recorder(fail={"a::x"}, raise_on={"b::z"})
    failures = register_table(_table(), sel)
    assert len(sel.calls) == 3
    assert [f.variable for f in failures] == ["a::x", "b::z"]
    assert failures[0].code == -1
    assert isinstance(failures[1].cause, RuntimeError)
    assert failures[1].bc == "rad"


def test_per_group_stops_within_group_only():
    sel = Recorder(fail={"a::x"})
    failures = register_table(_table(), sel, policy="per_group")
    assert sel.calls == [("a::x", "flat"), ("b::z", "rad")]
    assert len(failures) == 1


def test_fail_fast_raises_first_failure(caplog):
    caplog.set_level(logging.ERROR)
    sel = Recorder(fail={"a::y"})
    with pytest.raises(ExternalOperationError) as exc:
        register_table(_table(), sel, policy="fail_fast")
    assert exc.value.variable == "a::y"
    assert len(sel.calls) == 2
    assert any("select failed for a::y" in r.getMessage() for r in caplog.records)


def test_positive_and_none_returns_succeed():
    failures = register_table(_table(), lambda var, bc: None)
    assert failures == []
    failures = register_table(_table(), lambda var, bc: 5)
    assert failures == []


def test_unknown_policy_rejected():
    with pytest.raises(SchemaError):
        register_table(_table(), Recorder(), policy="retry")


def test_verbose_logs_each_selection(caplog):
    caplog.set_level(logging.INFO)
    register_table(_table(), Recorder(), verbose=True)
    messages = [r.getMessage() for r in caplog.records]
    assert "select for bc: flat -> a::x" in messages
    assert "select for bc: rad -> b::z" in messages


def test_empty_table_makes_no_calls():
    sel = Recorder()
    assert register_table(BoundaryTable(), sel) == []
    assert sel.calls == []


# ---- sync_table ----

def test_sync_uses_stored_ids():
    table = BoundaryTable([BoundaryGroup("flat", [VariableRef("a", "x", 1), VariableRef("a", "y", 2)])])
    sync = Recorder()
    assert sync_table(table, sync) == []
    assert sync.calls == [(1,), (2,)]


def test_sync_resolves_missing_ids():
    sync = Recorder()
    resolver = MappingResolver({"a::x": 10, "a::y": 11, "b::z": 12})
    assert sync_table(_table(), sync, resolver) == []
    assert sync.calls == [(10,), (11,), (12,)]


def test_sync_reports_unresolvable_references():
    sync = Recorder()
    resolver = MappingResolver({"a::x": 10})
    failures = sync_table(_table(), sync, resolver)
    assert sync.calls == [(10,)]
    assert [type(f) for f in failures] == [UnknownVariableError, UnknownVariableError]
    assert [f.name for f in failures] == ["a::y", "b::z"]


def test_sync_failure_code():
    table = BoundaryTable([BoundaryGroup("flat", [VariableRef("a", "x", 1)])])
    failures = sync_table(table, lambda gid: -3)
    assert failures[0].operation == "sync"
    assert failures[0].code == -3
