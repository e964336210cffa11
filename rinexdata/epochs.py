"""Buffers of the current observation epoch and of navigation records

Description:
------------

Observation samples of the current epoch are kept sorted on (system index, satellite, observable index), navigation
records on (time tag, system, satellite). Both buffers reject a sample or record whose key is already present, the
stored data are never overwritten.

The broadcast orbit of a navigation record is a numpy array of fixed shape 8x4. Row 0 holds the time of clock
(seconds of week) followed by the clock bias, drift and drift rate, rows 1-7 the BROADCAST ORBIT lines. Positions not
used by a system are NaN.

"""

# Standard library imports
import bisect
from collections import namedtuple
import itertools
import numbers

# External library imports
import numpy as np

# RinexData imports
from rinexdata.lib import exceptions
from rinexdata.lib import gnss
from rinexdata.lib.enums import EpochFlag

# Range of values that can be written in the F14.3 fields of observation records
MAX_OBS_VALUE = 9999999999.999
MIN_OBS_VALUE = -999999999.999

ORBIT_LINES = 8
ORBIT_FIELDS = 4

# Positions of the broadcast orbit that are spare for a system, in addition to the time of clock
SPARE_FIELDS = {
    "G": {(7, 2), (7, 3)},
    "E": {(5, 3), (7, 1), (7, 2), (7, 3)},
    "C": {(5, 1), (5, 3), (7, 2), (7, 3)},
    "I": {(5, 1), (5, 3), (6, 3), (7, 1), (7, 2), (7, 3)},
}

ObservationSample = namedtuple("ObservationSample", ["system_index", "prn", "obs_index", "value", "lol", "strength"])
NavigationRecord = namedtuple("NavigationRecord", ["time_tag", "system", "prn", "orbit"])


class EpochContext:
    """Time and flags of the current observation epoch"""

    def __init__(self):
        self.week = 0
        self.tow = 0.0
        self.bias = 0.0
        self.flag = EpochFlag.ok
        self.num_records = 0
        self.time_tag = 0.0

    def set(self, week, tow, bias=0.0, flag=EpochFlag.ok):
        """Start a new epoch

        Returns:
            Float: Continuous time tag of the epoch, seconds since the GPS epoch.
        """
        if isinstance(week, bool) or not isinstance(week, numbers.Integral):
            raise exceptions.ShapeError(f"GPS week {week!r} is not an integer")
        check_number(tow, "Time of week")
        check_number(bias, "Clock offset")
        try:
            flag = EpochFlag(flag)
        except ValueError:
            raise exceptions.RangeError(f"Invalid epoch flag {flag!r}") from None
        if tow < 0 or tow >= gnss.SECONDS_PER_WEEK:
            week, tow = gnss.tag_to_gps(gnss.time_tag(week, tow))
        self.week, self.tow, self.bias, self.flag = int(week), float(tow), float(bias), flag
        self.num_records = 0
        self.time_tag = gnss.time_tag(self.week, self.tow)
        return self.time_tag

    @property
    def datetime(self):
        return gnss.gps_to_datetime(self.week, self.tow)

    def as_tuple(self):
        return self.time_tag, self.week, self.tow, self.bias, int(self.flag)


def check_number(value, name):
    """Real numbers are accepted, booleans and other types are not"""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise exceptions.ShapeError(f"{name} {value!r} is not a number")
    return value


def check_obs_value(value):
    if isinstance(value, bool) or not isinstance(value, (int, float, np.number)) or np.isnan(value):
        raise exceptions.ShapeError(f"Observation value {value!r} is not a number")
    if not MIN_OBS_VALUE <= value <= MAX_OBS_VALUE:
        raise exceptions.RangeError(f"Observation value {value} is outside [{MIN_OBS_VALUE}, {MAX_OBS_VALUE}]")


def check_indicator(value, name):
    """Loss of lock and signal strength indicators are single digits, None meaning unknown"""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or not 0 <= value <= 9:
        raise exceptions.RangeError(f"{name} indicator {value!r} is not a single digit")
    return int(value)


def make_orbit(letter, orbit):
    """Validate a broadcast orbit block against the shape of a system

    Args:
        letter (str):        System identifier.
        orbit (array_like):  Block with 4 columns and at least as many rows as the navigation record of the system.

    Returns:
        Numpy array: The block as a fixed 8x4 array.
    """
    num_lines = gnss.system(letter).nav_lines
    try:
        block = np.array(orbit, dtype=float)
    except (TypeError, ValueError):
        raise exceptions.ShapeError(f"Broadcast orbit for system {letter!r} is not a numeric block") from None
    if block.ndim != 2 or block.shape[1] != ORBIT_FIELDS or not num_lines <= block.shape[0] <= ORBIT_LINES:
        raise exceptions.ShapeError(
            f"Broadcast orbit for system {letter!r} must have {num_lines} to {ORBIT_LINES} lines of {ORBIT_FIELDS} "
            f"values, got shape {block.shape}"
        )

    spare = SPARE_FIELDS.get(letter, set()) | {(0, 0)}
    missing = [
        (line, field)
        for line, field in itertools.product(range(num_lines), range(ORBIT_FIELDS))
        if (line, field) not in spare and not np.isfinite(block[line, field])
    ]
    if missing:
        raise exceptions.ShapeError(f"Broadcast orbit for system {letter!r} is missing values at {missing}")

    fixed = np.full((ORBIT_LINES, ORBIT_FIELDS), np.nan)
    fixed[:num_lines] = block[:num_lines]
    return fixed


class _SortedBuffer:
    """List of named tuples kept sorted on a key, rejecting duplicate keys"""

    key_size = 0

    def __init__(self):
        self._items = list()
        self._keys = list()

    def add(self, item):
        key = tuple(item[: self.key_size])
        idx = bisect.bisect_left(self._keys, key)
        if idx < len(self._keys) and self._keys[idx] == key:
            raise exceptions.DuplicateError(f"Data for {self._describe(item)} already exist, not saved")
        self._keys.insert(idx, key)
        self._items.insert(idx, item)

    def remove_if(self, predicate):
        """Remove, in place, all items for which the predicate is true

        Returns:
            Int: Number of removed items.
        """
        keep = [idx for idx, item in enumerate(self._items) if not predicate(item)]
        num_removed = len(self._items) - len(keep)
        self._items = [self._items[idx] for idx in keep]
        self._keys = [self._keys[idx] for idx in keep]
        return num_removed

    def clear(self):
        self._items.clear()
        self._keys.clear()

    def __len__(self):
        return len(self._items)

    def __getitem__(self, idx):
        return self._items[idx]

    def __iter__(self):
        return iter(self._items)

    def _describe(self, item):
        return str(item[: self.key_size])


class ObservationBuffer(_SortedBuffer):
    """Observation samples of the current epoch"""

    key_size = 3

    def by_satellite(self):
        """Iterate over (system index, prn) and the samples of that satellite"""
        return itertools.groupby(self._items, key=lambda s: (s.system_index, s.prn))

    def _describe(self, item):
        return f"system index {item.system_index}, satellite {item.prn}, observable index {item.obs_index}"


class NavigationBuffer(_SortedBuffer):
    """Navigation records, each one satellite and epoch"""

    key_size = 3

    def systems(self):
        return sorted({r.system for r in self._items})

    def _describe(self, item):
        return f"satellite {item.system}{item.prn:02d} at time tag {item.time_tag}"
