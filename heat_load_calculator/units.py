"""Heat rate conversions between Btu/h, kilowatts and refrigeration tons.

The functions here are total over the reals: negative values (heat loss) and zero
convert the same way as positive loads, and nothing is clamped.
"""

from .constants import BTUH_PER_KW, BTUH_PER_TON


def btuhr_to_kw(btuhr: float) -> float:
    """Convert a heat rate from Btu/h to kilowatts.

    Parameters
    ----------
    btuhr: float
        Heat rate in Btu per hour.

    Returns
    -------
    float
        Heat rate in kW, using 1 kW = 3412 Btu/h.
    """

    return btuhr / BTUH_PER_KW


def kw_to_btuhr(kw: float) -> float:
    """Convert a heat rate from kilowatts to Btu/h.

    Parameters
    ----------
    kw: float
        Heat rate in kilowatts.

    Returns
    -------
    float
        Heat rate in Btu per hour.
    """

    return kw * BTUH_PER_KW


def btuhr_to_ton(btuhr: float) -> float:
    """Convert Btu/h to refrigeration tons using 1 ton = 12,000 Btu/h."""

    return btuhr / BTUH_PER_TON


def ton_to_btuhr(tons: float) -> float:
    """Convert refrigeration tons to Btu/h.

    Assumes the industry standard 1 ton = 12,000 Btu/h.
    """

    return tons * BTUH_PER_TON
