"""Tests for filtering observation and navigation data

Example:
--------
    python -m pytest -s test_filters.py
"""

# Standard library imports
from datetime import datetime

# Third party imports
import pytest

# RinexData imports
from rinexdata.data import RinexData
from rinexdata.lib import gnss

from conftest import TOW, WEEK
from test_nav_codec import GLONASS_ORBIT, GPS_ORBIT


@pytest.fixture
def rinex():
    """A RINEX 3.04 container with observations of three satellites"""
    rinex = RinexData(3.04, logger=None)
    rinex.set_epoch_time(WEEK, TOW)
    for system, prn in (("G", 3), ("G", 5), ("R", 7)):
        rinex.save_obs_data(system, prn, "C1C", 22000000.0 + prn)
        rinex.save_obs_data(system, prn, "L1C", 115000000.0 + prn)
    return rinex


def _satellites(rinex):
    observations = list()
    idx = 0
    while rinex.get_obs_data(idx) is not None:
        observations.append(rinex.get_obs_data(idx))
        idx += 1
    return sorted({(o[0], o[1]) for o in observations}), len(observations)


def test_no_selection_keeps_everything(rinex):
    assert rinex.filter_obs_data()
    assert _satellites(rinex) == ([("G", 3), ("G", 5), ("R", 7)], 6)


def test_satellite_selection(rinex):
    assert rinex.set_filter(["G05"], [])
    assert rinex.filter_obs_data()

    assert _satellites(rinex) == ([("G", 5)], 2)


def test_filter_is_idempotent(rinex):
    rinex.set_filter(["G05"], [])
    rinex.filter_obs_data()
    after_first = [rinex.get_obs_data(idx) for idx in range(2)]

    assert rinex.filter_obs_data()
    assert [rinex.get_obs_data(idx) for idx in range(2)] == after_first
    assert rinex.get_obs_data(2) is None


def test_system_selection(rinex):
    rinex.set_filter(["R"], [])
    rinex.filter_obs_data()

    assert _satellites(rinex) == ([("R", 7)], 2)


def test_observable_selection(rinex):
    rinex.set_filter([], ["L1C"])
    rinex.filter_obs_data()

    assert _satellites(rinex) == ([("G", 3), ("G", 5), ("R", 7)], 3)
    assert rinex.get_obs_data(0)[2] == "L1C"


def test_observable_selection_of_one_system(rinex):
    """Selecting observables of a system also selects the system"""
    rinex.set_filter([], ["GC1C"])
    rinex.filter_obs_data()

    assert _satellites(rinex) == ([("G", 3), ("G", 5)], 2)
    assert rinex.get_obs_data(0)[2] == "C1C"


def test_rinex2_observable_selector(rinex):
    rinex.set_filter([], ["L1"])
    rinex.filter_obs_data()

    assert {rinex.get_obs_data(idx)[2] for idx in range(3)} == {"L1C"}


def test_all_removed(rinex):
    rinex.set_filter(["E"], [])

    assert not rinex.filter_obs_data()
    assert rinex.get_obs_data(0) is None


@pytest.mark.parametrize("sel_sat, sel_obs", [(["X01"], []), (["G123"], []), ([], ["C1C1C"]), ([], ["X9"])])
def test_invalid_selection_changes_nothing(rinex, sel_sat, sel_obs):
    assert not rinex.set_filter(sel_sat, sel_obs)
    rinex.filter_obs_data()

    assert _satellites(rinex) == ([("G", 3), ("G", 5), ("R", 7)], 6)


@pytest.mark.parametrize(
    "sel_sat, sel_obs, start", [([5], [], None), ("G05", [], None), (None, [], None), ([], [None], None), (["G"], [], "x")]
)
def test_wrong_type_of_selection_rejected(rinex, sel_sat, sel_obs, start):
    assert not rinex.set_filter(sel_sat, sel_obs, start=start)
    rinex.filter_obs_data()

    assert _satellites(rinex) == ([("G", 3), ("G", 5), ("R", 7)], 6)


def test_not_printable_mode_keeps_unselected_observables(rinex):
    """Without an observable selection, all observables of a selected system are kept"""
    rinex.set_filter(["G"], [])

    assert rinex.filter_obs_data(remove_not_printable=True)
    assert _satellites(rinex) == ([("G", 3), ("G", 5)], 4)


def test_selected_observables_not_printable_removed():
    rinex = RinexData(2.10, logger=None)
    rinex.set_filter([], ["GC1C", "GC5X"])
    rinex.set_epoch_time(WEEK, TOW)
    rinex.save_obs_data("G", 5, "C1C", 22000000.0)
    rinex.save_obs_data("G", 5, "C5X", 22000001.0)

    assert rinex.filter_obs_data(remove_not_printable=True)
    assert rinex.get_obs_data(0)[2] == "C1C"
    assert rinex.get_obs_data(1) is None


def test_time_window(rinex):
    epoch_tag = rinex.get_epoch_time()[0]
    rinex.set_filter(start=epoch_tag + 1)

    assert not rinex.filter_obs_data()


def test_navigation_selection():
    rinex = RinexData(3.04, logger=None)
    epoch = datetime(2018, 5, 7)
    rinex.save_nav_data("G", 5, GPS_ORBIT, gnss.nav_time_tag("G", epoch))
    rinex.save_nav_data("G", 7, GPS_ORBIT, gnss.nav_time_tag("G", epoch))
    rinex.save_nav_data("R", 3, GLONASS_ORBIT, gnss.nav_time_tag("R", epoch))

    rinex.set_filter(["G07", "R"], [])
    assert rinex.filter_nav_data()

    assert [rinex.get_nav_data(idx)[:2] for idx in range(2)] == [("G", 7), ("R", 3)]
    assert rinex.get_nav_data(2) is None
