"""Tests for Denial."""

from permission_engine import Denial, PermissionEngineError


def test_well_known_reasons():
    assert Denial.unspecified().reason == "Unspecified"
    assert Denial.no_results().reason == "No Result"
    assert Denial.no_checklist().reason == "No Checklist"


def test_factories_return_fresh_instances():
    assert Denial.unspecified() is not Denial.unspecified()


def test_equality_by_reason():
    assert Denial("a") == Denial("a")
    assert Denial("a") != Denial("b")
    assert hash(Denial("a")) == hash(Denial("a"))
    assert Denial("a") != ValueError("a")


def test_is_engine_error():
    err = Denial("x")
    assert isinstance(err, PermissionEngineError)
    assert str(err) == "x"
