"""
formatting.py

Pure formatting helpers for look angles, positions and UTM coordinates.

Every function takes its width or precision as an explicit argument and
returns a new string; nothing here keeps formatter state between calls.
"""

import numpy as np

SYM_DEGREE = "°"


def format_integer(value, min_digits):
    """
    Format a length in meters as a whole number, left-padded with zeros.

    Parameters:
        value : float
            The value to format. The fractional part is truncated toward zero.
        min_digits : int
            Minimum number of integer digits.

    Returns:
        str : e.g. format_integer(14385.7, 7) -> "0014385"
    """
    whole = int(value)
    if whole < 0:
        return "-" + str(-whole).zfill(min_digits)
    return str(whole).zfill(min_digits)


def format_utm(zone, band, easting, northing):
    """Build the "ZZ B EEEEEE NNNNNNN" representation of a UTM coordinate."""
    return "{} {} {} {}".format(
        format_integer(zone, 2),
        band,
        format_integer(easting, 6),
        format_integer(northing, 7),
    )


def format_decimal_degrees(value, fraction_digits=2):
    """Format an angle as decimal degrees with a degree sign, e.g. "137.25°"."""
    return "{:.{prec}f}{}".format(value, SYM_DEGREE, prec=fraction_digits)


def format_dms(value, second_digits=5):
    """
    Format an angle as degrees, minutes and seconds: "D:M:S.sssss".

    The sign is kept on the degrees field; seconds are written with at most
    `second_digits` decimals and trailing zeros dropped.
    """
    sign = "-" if value < 0 else ""
    value = abs(value)
    degrees = int(np.floor(value))
    remainder = (value - degrees) * 60.0
    minutes = int(np.floor(remainder))
    seconds = (remainder - minutes) * 60.0

    sec_text = "{:.{prec}f}".format(seconds, prec=second_digits)
    if "." in sec_text:
        sec_text = sec_text.rstrip("0").rstrip(".")
    # rounding can carry seconds up to 60
    if float(sec_text) >= 60.0:
        sec_text = "0"
        minutes += 1
        if minutes == 60:
            minutes = 0
            degrees += 1
    return "{}{}:{}:{}".format(sign, degrees, minutes, sec_text)


def format_latitude(latitude, dms=False, fraction_digits=2):
    """Absolute latitude with an N/S ordinal, e.g. "33.87°S" or "33:52:12.6S"."""
    ordinal = "N" if latitude >= 0 else "S"
    return _with_ordinal(abs(latitude), ordinal, dms, fraction_digits)


def format_longitude(longitude, dms=False, fraction_digits=2):
    """Absolute longitude with an E/W ordinal, e.g. "151.21°E"."""
    ordinal = "E" if longitude >= 0 else "W"
    return _with_ordinal(abs(longitude), ordinal, dms, fraction_digits)


def _with_ordinal(value, ordinal, dms, fraction_digits):
    if dms:
        return format_dms(value) + ordinal
    return format_decimal_degrees(value, fraction_digits) + ordinal
