"""Closed-form heat load calculators built on standard imperial HVAC factors.

Every calculator returns a heat rate in Btu/h. A negative temperature difference
yields a negative load, which represents heat flowing the other way (loss rather
than gain); this is accepted rather than rejected.
"""

from .constants import AIR_SENSIBLE_FACTOR, HYDRONIC_FACTOR, MINUTES_PER_HOUR


def air_sensible_btuhr(cfm: float, delta_t_f: float) -> float:
    """Sensible heat carried by an airstream, ``Qs = 1.08 * CFM * ΔT``.

    Parameters
    ----------
    cfm: float
        Volumetric airflow in cubic feet per minute.
    delta_t_f: float
        Air temperature difference in °F.

    Returns
    -------
    float
        Sensible load in Btu/h.
    """

    return AIR_SENSIBLE_FACTOR * cfm * delta_t_f


def hydronic_btuhr(gpm: float, delta_t_f: float) -> float:
    """Heat carried by a water loop, ``Q = 500 * GPM * ΔT``.

    Parameters
    ----------
    gpm: float
        Water flow in gallons per minute.
    delta_t_f: float
        Supply/return temperature difference in °F.

    Returns
    -------
    float
        Load in Btu/h.
    """

    return HYDRONIC_FACTOR * gpm * delta_t_f


def conduction_btuhr(u_value: float, area_ft2: float, delta_t_f: float) -> float:
    """Conductive heat through an envelope element, ``Q = U * A * ΔT``.

    Parameters
    ----------
    u_value: float
        Overall heat-transfer coefficient in Btu/h·ft²·°F.
    area_ft2: float
        Element area in square feet.
    delta_t_f: float
        Indoor/outdoor temperature difference in °F.

    Returns
    -------
    float
        Load in Btu/h.
    """

    return u_value * area_ft2 * delta_t_f


def u_from_r(r_value: float) -> float:
    """Convert a thermal resistance (h·ft²·°F/Btu) to a U-value, ``U = 1 / R``.

    Raises
    ------
    ValueError
        If ``r_value`` is not positive.
    """

    if r_value <= 0:
        raise ValueError("R-value must be greater than zero.")

    return 1.0 / r_value


def conduction_from_r_btuhr(r_value: float, area_ft2: float, delta_t_f: float) -> float:
    """Conductive load where the element is described by its R-value.

    Equivalent to :func:`conduction_btuhr` with ``U = 1 / R``.

    Raises
    ------
    ValueError
        If ``r_value`` is not positive.
    """

    return conduction_btuhr(u_from_r(r_value), area_ft2, delta_t_f)


def cfm_from_ach(ach: float, volume_ft3: float) -> float:
    """Airflow equivalent to a number of air changes per hour, ``CFM = ACH * V / 60``."""

    return ach * volume_ft3 / MINUTES_PER_HOUR


def ach_air_btuhr(ach: float, volume_ft3: float, delta_t_f: float) -> float:
    """Sensible load of infiltration or ventilation given in air changes per hour.

    The air change rate is first turned into an airflow with :func:`cfm_from_ach`,
    and that airflow is then passed through :func:`air_sensible_btuhr`.

    Parameters
    ----------
    ach: float
        Air changes per hour.
    volume_ft3: float
        Zone volume in cubic feet.
    delta_t_f: float
        Indoor/outdoor temperature difference in °F.

    Returns
    -------
    float
        Sensible load in Btu/h.
    """

    cfm = cfm_from_ach(ach, volume_ft3)
    return air_sensible_btuhr(cfm, delta_t_f)
