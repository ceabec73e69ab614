import pytest

from simplebcs.config import DEFAULTS, build_settings, entries_from_settings, string_mode
from simplebcs.errors import SchemaError
from simplebcs.parfile import parse_par_text, read_par
from simplebcs.schema import normalize_keys, to_bool

PAR = '''
ActiveThorns = "ADMBase SimpleBCs"
# SimpleBCs::bc_string = "commented: out::line"
SimpleBCs::verbose      = yes   # trailing comment
simplebcs::max_entries  = 4
SimpleBCs::bc_name[0]   = "flat"
SimpleBCs::bc_groups[0] = "ADMBase::lapse ADMBase::shift"
SimpleBCs::bc_name[2]   = "radiative"
SimpleBCs::bc_groups[2] = "ADMBase::metric
                           ADMBase::curv"
ADMBase::initial_data   = "Cartesian Minkowski"
'''


def test_defaults():
    cfg = build_settings()
    assert cfg["bc_string"] == ""
    assert cfg["verbose"] is False
    assert cfg["bc_name"] == [] and cfg["bc_groups"] == []
    assert cfg["max_entries"] == 10
    assert cfg["mode"] == "local"
    assert cfg["on_failure"] == "aggregate"


def test_defaults_not_shared_between_calls():
    cfg = build_settings()
    cfg["bc_name"].append("x")
    assert build_settings()["bc_name"] == []
    assert DEFAULTS["bc_name"] == []


def test_aliases_and_case():
    cfg = build_settings({"Names": ["flat"], "groups": ["a::b"], "Verbose": "YES", "capacity": "3"})
    assert cfg["bc_name"] == ["flat"]
    assert cfg["bc_groups"] == ["a::b"]
    assert cfg["verbose"] is True
    assert cfg["max_entries"] == 3


def test_normalize_keys_passes_unknown_keys_through():
    assert normalize_keys({"string": "x", "other": 1}) == {"bc_string": "x", "other": 1}


@pytest.mark.parametrize("raw, expected", [
    ("yes", True), ("No", False), ("true", True), ("0", False), (True, True), ("on", True),
])
def test_to_bool(raw, expected):
    assert to_bool("verbose", raw) is expected


def test_enum_is_case_insensitive_and_canonicalized():
    cfg = build_settings({"mode": "LEVEL", "on_failure": "Fail_Fast"})
    assert cfg["mode"] == "level"
    assert cfg["on_failure"] == "fail_fast"


@pytest.mark.parametrize("params", [
    {"verbose": "maybe"},
    {"mode": "global"},
    {"on_failure": "retry"},
    {"max_entries": 0},
    {"max_entries": "ten"},
    {"max_entries": True},
    {"bc_name": "flat"},
    {"bc_groups": ["a::b", 3]},
    {"bc_string": 42},
])
def test_schema_errors(params):
    with pytest.raises(SchemaError):
        build_settings(params)


def test_arrays_longer_than_capacity_rejected():
    with pytest.raises(SchemaError) as exc:
        build_settings({"bc_name": ["a", "b", "c"], "max_entries": 2})
    assert "max_entries" in str(exc.value)


def test_entries_pad_shorter_array():
    cfg = build_settings({"bc_name": ["flat", "rad", ""], "bc_groups": ["a::b"]})
    assert entries_from_settings(cfg) == [("flat", "a::b"), ("rad", ""), ("", "")]


def test_string_mode_selection():
    assert string_mode(build_settings({"bc_string": "flat: a::b"}))
    assert not string_mode(build_settings({"bc_string": "   "}))
    assert not string_mode(build_settings())


# ---- parameter files ----

def test_parse_par_text():
    params = parse_par_text(PAR)
    assert params["verbose"] == "yes"
    assert params["max_entries"] == "4"
    assert params["bc_name"] == ["flat", "", "radiative"]
    assert params["bc_groups"][0] == "ADMBase::lapse ADMBase::shift"
    assert params["bc_groups"][2].split() == ["ADMBase::metric", "ADMBase::curv"]
    assert "bc_string" not in params
    assert "initial_data" not in params


def test_parse_par_text_other_thorn():
    assert parse_par_text(PAR, thorn="ADMBase") == {"initial_data": "Cartesian Minkowski"}


def test_later_assignment_wins():
    params = parse_par_text('SimpleBCs::bc_string = "a: x::y"\nSimpleBCs::bc_string = "b: x::y"\n')
    assert params["bc_string"] == "b: x::y"


def test_par_index_above_ceiling_rejected_while_reading():
    with pytest.raises(SchemaError) as exc:
        parse_par_text('SimpleBCs::bc_name[5000000] = "flat"\n')
    assert exc.value.context == {"key": "bc_name", "index": 5000000}


def test_par_index_at_ceiling_accepted():
    params = parse_par_text('SimpleBCs::bc_name[999] = "flat"\n')
    assert len(params["bc_name"]) == 1000
    assert params["bc_name"][-1] == "flat"


def test_par_index_of_other_thorn_ignored():
    assert parse_par_text('ADMBase::bc_name[5000000] = "flat"\n') == {}


def test_par_settings_feed_build_settings():
    cfg = build_settings(parse_par_text(PAR))
    assert cfg["verbose"] is True
    assert entries_from_settings(cfg)[2][0] == "radiative"


def test_read_par(tmp_path):
    path = tmp_path / "run.par"
    path.write_text(PAR, encoding="utf-8")
    assert read_par(str(path))["bc_name"][0] == "flat"


def test_read_par_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_par(str(tmp_path / "missing.par"))
