"""
tempus.vector
-------------
NumPy versions of the rata die conversions, for whole columns of dates.

Same closed-form algorithm as tempus.core.rata_die, with uint32 storage and
uint64 intermediates. Inputs are validated as a whole; the first offending
element is named in the error.

Requires the optional extra:  pip install "tempus[vector]"
"""

from __future__ import annotations

from typing import Tuple

from .core.errors import DateRangeError, InvalidDateError, MonthOutOfRangeError
from .core.rules import RD_MAX
from .core.types import _MAX_YMD


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "tempus[vector]"') from e


def _first_bad(np, mask) -> int:
    return int(np.flatnonzero(mask)[0])


def _int_array(np, values, name: str):
    """Integer array view of ``values``; floats, bools and objects are a TypeError."""
    arr = np.asarray(values)
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"{name} must be integers, got dtype {arr.dtype}")
    return arr


def _check_months(np, m) -> None:
    bad = (m < 1) | (m > 12)
    if bad.any():
        raise MonthOutOfRangeError(int(m.ravel()[_first_bad(np, bad.ravel())]))


def _check_years(np, y) -> None:
    bad = y < 0
    if bad.any():
        raise DateRangeError(f"year must be non-negative, got {y.ravel()[_first_bad(np, bad.ravel())]}")


def _check_rd(np, r) -> None:
    bad = (r < 0) | (r > RD_MAX)
    if bad.any():
        raise DateRangeError(f"rd must be in [0, {RD_MAX}], got {r.ravel()[_first_bad(np, bad.ravel())]}")


def is_leap_year_array(years):
    np = _need_numpy()
    y = _int_array(np, years, "years")
    _check_years(np, y)
    y = y.astype(np.uint64)
    mask = np.where(y % 100 == 0, np.uint64(15), np.uint64(3))
    return (y & mask) == 0


def last_day_of_month_array(years, months):
    np = _need_numpy()
    y = _int_array(np, years, "years")
    m = _int_array(np, months, "months")
    _check_years(np, y)
    _check_months(np, m)
    y = y.astype(np.uint64)
    m = m.astype(np.uint64)
    feb = np.where(is_leap_year_array(y), np.uint64(29), np.uint64(28))
    return np.where(m == 2, feb, (m ^ (m >> np.uint64(3))) | np.uint64(30)).astype(np.uint8)


def to_rd_array(years, months, days):
    """Elementwise (year, month, day) -> rd, as uint32."""
    np = _need_numpy()
    y_in, m_in, d_in = np.broadcast_arrays(
        _int_array(np, years, "years").astype(np.int64),
        _int_array(np, months, "months").astype(np.int64),
        _int_array(np, days, "days").astype(np.int64),
    )

    _check_years(np, y_in)
    _check_months(np, m_in)
    ldm = last_day_of_month_array(y_in, m_in)
    bad = (d_in < 1) | (d_in > ldm)
    if bad.any():
        i = _first_bad(np, bad.ravel())
        y, m, d = int(y_in.ravel()[i]), int(m_in.ravel()[i]), int(d_in.ravel()[i])
        raise InvalidDateError(f"{y}-{m} has {int(ldm.ravel()[i])} days, got {d}")
    bad = (y_in == 0) & (m_in < 3)
    max_y, max_m, max_d = _MAX_YMD
    bad |= (y_in > max_y) | ((y_in == max_y) & ((m_in > max_m) | ((m_in == max_m) & (d_in > max_d))))
    if bad.any():
        i = _first_bad(np, bad.ravel())
        raise DateRangeError(
            f"{y_in.ravel()[i]}-{m_in.ravel()[i]}-{d_in.ravel()[i]} is outside the serial range"
        )

    y1 = y_in.astype(np.uint64)
    m1 = m_in.astype(np.uint64)
    d1 = d_in.astype(np.uint64)

    j = (m1 <= 2).astype(np.uint64)
    y0 = y1 - j
    m0 = m1 + np.uint64(12) * j
    d0 = d1 - np.uint64(1)

    q1 = y0 // np.uint64(100)
    yc = np.uint64(1461) * y0 // np.uint64(4) - q1 + q1 // np.uint64(4)
    mc = (np.uint64(979) * m0 - np.uint64(2919)) // np.uint64(32)

    return (yc + mc + d0).astype(np.uint32)


def from_rd_array(rd) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Elementwise rd -> (years uint32, months uint8, days uint8)."""
    np = _need_numpy()
    raw = _int_array(np, rd, "rd")
    _check_rd(np, raw)
    r = raw.astype(np.uint64)

    p32 = np.uint64(1 << 32)
    p16 = np.uint64(1 << 16)
    c2 = np.uint64(2939745)
    c3 = np.uint64(2141)

    n1 = np.uint64(4) * r + np.uint64(3)
    q1 = n1 // np.uint64(146097)
    r1 = n1 % np.uint64(146097) // np.uint64(4)

    n2 = np.uint64(4) * r1 + np.uint64(3)
    u2 = c2 * n2
    q2 = u2 // p32
    r2 = u2 % p32 // c2 // np.uint64(4)

    n3 = c3 * r2 + np.uint64(197913)
    q3 = n3 // p16
    r3 = n3 % p16 // c3

    y0 = np.uint64(100) * q1 + q2
    j = (r2 > 305).astype(np.uint64)

    years = (y0 + j).astype(np.uint32)
    months = (q3 - np.uint64(12) * j).astype(np.uint8)
    days = (r3 + np.uint64(1)).astype(np.uint8)
    return years, months, days


def weekday_array(rd):
    """Weekday ordinals (Sunday=0) for an array of rd values."""
    np = _need_numpy()
    raw = _int_array(np, rd, "rd")
    _check_rd(np, raw)
    r = raw.astype(np.uint64)
    return ((r + np.uint64(3)) % np.uint64(7)).astype(np.uint8)
