"""Tests for the registry of systems and observables

Example:
--------
    python -m pytest -s test_systems.py
"""

# Third party imports
import pytest

# RinexData imports
from rinexdata import systems
from rinexdata.lib import exceptions
from rinexdata.lib.enums import RinexVersion


def test_code_translation():
    assert systems.to_v3("P2") == "C2P"
    assert systems.to_v2("C1P") == "P1"
    assert systems.to_v2("C5X") is None
    assert systems.to_v3("C5") is None
    assert [systems.to_v2(systems.to_v3(code)) for code in systems.V2_OBS_TYPES] == list(systems.V2_OBS_TYPES)


@pytest.mark.parametrize("text, expected", [("G05", ("G", 5)), ("R12", ("R", 12)), (" 7", ("G", 7)), ("G 3", ("G", 3))])
def test_parse_satellite(text, expected):
    assert systems.parse_satellite(text) == expected


@pytest.mark.parametrize("text", ["X01", "G00", "Gxx", "G100"])
def test_parse_invalid_satellite(text):
    with pytest.raises(exceptions.RinexException):
        systems.parse_satellite(text)


def test_declared_order_kept():
    registry = systems.SystemRegistry(RinexVersion.v304)
    registry.declare("E", ["L1X", "C1X"])

    galileo = registry.get("E")
    assert galileo.output_codes() == ["L1X", "C1X"]
    assert registry.index("E") == 0
    assert registry.index("G") == -1


def test_duplicate_declaration_rejected():
    registry = systems.SystemRegistry(RinexVersion.v304)

    with pytest.raises(exceptions.ShapeError):
        registry.declare("G", ["C1C", "C1C"])


def test_rejected_declaration_does_not_register_system():
    registry = systems.SystemRegistry(RinexVersion.v304)

    with pytest.raises(exceptions.ShapeError):
        registry.declare("E", ["C1X", "C1X"])
    with pytest.raises(exceptions.ShapeError):
        registry.declare("E", [None])
    assert registry.index("E") == -1


def test_unknown_system_not_created():
    registry = systems.SystemRegistry(RinexVersion.v304)

    with pytest.raises(exceptions.RangeError):
        registry.get("G")
    with pytest.raises(exceptions.RangeError):
        registry.get("X", create=True)


def test_v2_printable_codes():
    """Only observables with a RINEX 2 code are printed in RINEX 2 files"""
    registry = systems.SystemRegistry(RinexVersion.v210)
    registry.declare("G", ["C1C", "C5X", "L2P"])

    assert registry.get("G").output_codes() == ["C1C", "L2P"]
    assert registry.get("G").output_codes(printable_only=False) == ["C1C", "C5X", "L2P"]
    assert registry.v2_obs_types() == ["C1", "L2"]


def test_v2_declaration_translated():
    registry = systems.SystemRegistry(RinexVersion.v210)
    registry.declare_v2("R", ["P1", "L1"])

    assert registry.get("R").output_codes() == ["C1P", "L1C"]
    with pytest.raises(exceptions.ShapeError):
        registry.declare_v2("G", ["C1", "C5"])


def test_common_v2_obs_types():
    registry = systems.SystemRegistry(RinexVersion.v210)
    registry.declare("G", ["C1C", "L1C"])
    registry.declare("R", ["L1C", "C1P"])

    assert registry.v2_obs_types() == ["C1", "L1", "P1"]
    assert [s.letter for s in registry.printed_systems()] == ["G", "R"]


def test_satellite_filter():
    registry = systems.SystemRegistry(RinexVersion.v304)
    registry.declare("G", ["C1C"])
    registry.declare("R", ["C1C"])
    registry.set_filter(["G05", "G07"], [])

    gps, glonass = registry.get("G"), registry.get("R")
    assert gps.selected and not glonass.selected
    assert gps.accepts(5) and not gps.accepts(6)


def test_invalid_filter_leaves_registry():
    registry = systems.SystemRegistry(RinexVersion.v304)
    registry.declare("G", ["C1C", "L1C"])

    with pytest.raises(exceptions.RangeError):
        registry.set_filter(["G05"], ["C1C", "C9"])
    assert registry.get("G").sats == []
    assert registry.get("G").output_codes() == ["C1C", "L1C"]


def test_clear_selection_keeps_catalog():
    registry = systems.SystemRegistry(RinexVersion.v304)
    registry.declare("G", ["C1C", "L5Q"])
    registry.clear_selection()

    assert registry.printed_systems() == []
    assert registry.get("G").index("L5Q") == len(systems.V3_OBS_TYPES)
