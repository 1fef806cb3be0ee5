"""HeatLoadCalculator: quick HVAC heat loads, project totals and unit conversions."""

from .constants import AIR_SENSIBLE_FACTOR, BTUH_PER_KW, BTUH_PER_TON, HYDRONIC_FACTOR
from .loads import (
    ach_air_btuhr,
    air_sensible_btuhr,
    cfm_from_ach,
    conduction_btuhr,
    conduction_from_r_btuhr,
    hydronic_btuhr,
    u_from_r,
)
from .project import LoadItem, LoadMethod, LoadProject
from .report import ExportError, export_csv, render_csv
from .units import btuhr_to_kw, btuhr_to_ton, kw_to_btuhr, ton_to_btuhr

__all__ = [
    "AIR_SENSIBLE_FACTOR",
    "BTUH_PER_KW",
    "BTUH_PER_TON",
    "HYDRONIC_FACTOR",
    "btuhr_to_kw",
    "kw_to_btuhr",
    "btuhr_to_ton",
    "ton_to_btuhr",
    "air_sensible_btuhr",
    "hydronic_btuhr",
    "conduction_btuhr",
    "conduction_from_r_btuhr",
    "u_from_r",
    "cfm_from_ach",
    "ach_air_btuhr",
    "LoadItem",
    "LoadMethod",
    "LoadProject",
    "ExportError",
    "export_csv",
    "render_csv",
]
