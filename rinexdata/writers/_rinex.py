"""Formatting of fields shared by the RINEX writers

Description:
------------

Numbers in navigation records and RINEX 2 headers are written as Fortran D-format (0.1234D+05), those of RINEX 3 as
E-format (1.2340E+04). Observation fields are F14.3 values followed by the loss of lock and signal strength
indicators, where 0 is written as blank.

"""

# Standard library imports
import math


def format_d(value, width, decimals):
    """Format a number in Fortran Dw.d notation, with the mantissa in [0.1, 1)

    Args:
        value (float):   Number to format.
        width (int):     Width of the field.
        decimals (int):  Number of decimals of the mantissa.

    Returns:
        String: The formatted number, right aligned in the field.
    """
    if math.isnan(value):
        return " " * width
    exponent = 0 if value == 0 else math.floor(math.log10(abs(value))) + 1
    mantissa = round(value / 10 ** exponent, decimals)
    if abs(mantissa) >= 1:
        mantissa /= 10
        exponent += 1
    return "{:{}.{}f}D{:+03d}".format(mantissa, decimals + 3, decimals, exponent).rjust(width)


def format_e(value, width, decimals):
    """Format a number in Ew.d notation, NaN values are written as blank"""
    if math.isnan(value):
        return " " * width
    return "{:{}.{}E}".format(value, width, decimals)


def format_orbit(value, v2_format):
    """Format a field of a navigation record, NaN values are written as blank"""
    if math.isnan(value):
        return " " * 19
    return format_d(value, 19, 12) if v2_format else format_e(value, 19, 12)


def indicator(value):
    """Loss of lock or signal strength indicator, 0 and None are written as blank"""
    return str(value) if value else " "


def obs_field(sample):
    """Observation field of a (value, loss of lock, signal strength) tuple, blank if the sample is None"""
    if sample is None:
        return " " * 16
    value, lol, strength = sample
    return "{:14.3f}{}{}".format(value, indicator(lol), indicator(strength))


def chunks(items, size):
    """Split a list into lists of at most the given size, always giving at least one list"""
    return [items[idx : idx + size] for idx in range(0, len(items), size)] or [[]]
