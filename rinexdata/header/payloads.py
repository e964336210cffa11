"""Payload shapes of RINEX header records

Description:
------------

Each label family in the catalog has one payload shape: a tuple of members, each with a validator converting the
given value to the stored type. Validation happens here, at the boundary, so that stored payloads always have the
declared shape. Trailing members listed in `DEFAULTS` are optional.

Validators raise :class:`~rinexdata.lib.exceptions.ShapeError` for values of the wrong type or arity.

"""

# Standard library imports
import numbers

# RinexData imports
from rinexdata.header import labels
from rinexdata.lib import exceptions


def _char(value):
    if not isinstance(value, str) or len(value) != 1:
        raise exceptions.ShapeError(f"Expected a single character, got {value!r}")
    return value


def _text(value):
    if not isinstance(value, str):
        raise exceptions.ShapeError(f"Expected a string, got {value!r}")
    return value


def _integer(value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise exceptions.ShapeError(f"Expected an integer, got {value!r}")
    return int(value)


def _number(value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise exceptions.ShapeError(f"Expected a number, got {value!r}")
    return float(value)


def _sequence(value):
    if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
        raise exceptions.ShapeError(f"Expected a list, got {value!r}")
    return list(value)


def _texts(value):
    return [_text(v) for v in _sequence(value)]


def _integers(value):
    return [_integer(v) for v in _sequence(value)]


def _four_numbers(value):
    values = [_number(v) for v in _sequence(value)]
    if len(values) != 4:
        raise exceptions.ShapeError(f"Expected 4 numbers, got {len(values)}")
    return values


def _correction_type(value):
    if not labels.is_correction_type(value):
        raise exceptions.ShapeError(f"Expected a correction type, got {value!r}")
    return labels.Label(value)


SHAPES = {
    "version": (_number, _char, _char),
    "text": (_text,),
    "text_pair": (_text, _text),
    "text_triple": (_text, _text, _text),
    "xyz": (_number, _number, _number),
    "number": (_number,),
    "integer": (_integer,),
    "epoch": (_integer, _number, _char),
    "phase_center": (_char, _text, _number, _number, _number),
    "wavelength": (_integer, _integer, _texts),
    "obs_codes": (_char, _texts),
    "sys_applied": (_char, _text, _text),
    "scale_factor": (_char, _integer, _texts),
    "phase_shift": (_char, _text, _number, _texts),
    "slot_frequency": (_integer, _integer),
    "code_bias": (_text, _number),
    "prn_obs": (_char, _integer, _integers),
    "iono_params": (_four_numbers,),
    "correction": (_correction_type, _four_numbers, _integer, _integer),
    "delta_utc": (_number, _number, _integer, _integer),
    "glonass_corr": (_integer, _integer, _integer, _number),
    "geo_utc": (_number, _number, _integer, _integer, _text, _integer),
    "leap_seconds": (_integer, _integer, _integer, _integer, _char),
}

# Default values of optional trailing members
DEFAULTS = {
    "text_pair": ("",),
    "text_triple": ("", ""),
    "wavelength": ([],),
    "scale_factor": ([],),
    "phase_shift": ([],),
    "leap_seconds": (0, 0, 0, " "),
}


def validate(shape, values):
    """Check values against a payload shape

    Args:
        shape (str):     Name of the shape, from the label catalog.
        values (tuple):  Values given for the payload.

    Returns:
        Tuple: The validated payload, with defaults added for omitted optional members.
    """
    members = SHAPES[shape]
    defaults = DEFAULTS.get(shape, ())
    num_missing = len(members) - len(values)
    if num_missing < 0 or num_missing > len(defaults):
        raise exceptions.ShapeError(
            f"Expected {len(members) - len(defaults)} to {len(members)} values for shape {shape!r}, got {len(values)}"
        )
    if num_missing:
        values = tuple(values) + tuple(defaults[len(defaults) - num_missing :])
    return tuple(member(value) for member, value in zip(members, values))
