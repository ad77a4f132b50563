"""
tempus.core.rata_die
--------------------
Closed-form conversion between Gregorian (year, month, day) and the day
count rd since 0000-03-01.

The computational year starts in March so that February, the only
irregular month, is the last one. Month offsets inside that year are the
affine approximation (979*m - 2919) / 32; the inverse uses the fixed-point
reciprocals 2939745 / 2**32 (years in a century) and 2141 / 2**16 (months
in a year).

Both directions use integer arithmetic only, on non-negative operands, so
// matches truncating division. The constants and the order of operations
are part of the algorithm; do not simplify.
"""

from __future__ import annotations

from typing import Tuple

_P32 = 1 << 32
_P16 = 1 << 16


def to_rd(year: int, month: int, day: int) -> int:
    """(year, month, day) -> rd. Assumes a valid date on or after 0000-03-01."""
    j = 1 if month <= 2 else 0

    y0 = year - j
    m0 = month + 12 * j
    d0 = day - 1

    q1 = y0 // 100
    yc = 1461 * y0 // 4 - q1 + q1 // 4
    mc = (979 * m0 - 2919) // 32
    dc = d0

    return yc + mc + dc


def from_rd(rd: int) -> Tuple[int, int, int]:
    """rd -> (year, month, day). Assumes rd >= 0."""
    # 400-year cycle and day within it
    n1 = 4 * rd + 3
    q1 = n1 // 146097
    r1 = n1 % 146097 // 4

    # year within the cycle and day within the (March-based) year
    n2 = 4 * r1 + 3
    u2 = 2939745 * n2
    q2 = u2 // _P32
    r2 = u2 % _P32 // 2939745 // 4

    # month and day within the month
    n3 = 2141 * r2 + 197913
    q3 = n3 // _P16
    r3 = n3 % _P16 // 2141

    y0 = 100 * q1 + q2
    m0 = q3
    d0 = r3

    j = 1 if r2 > 305 else 0

    return y0 + j, m0 - 12 * j, d0 + 1
