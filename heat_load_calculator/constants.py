"""Shared engineering constants and console input bounds for heat load calculations."""

BTUH_PER_KW: float = 3_412.0
"""Btu per hour equivalent for one kilowatt (1 kW = 3412.142 Btu/h, rounded)."""

BTUH_PER_TON: float = 12_000.0
"""Btu per hour equivalent for one ton of refrigeration."""

AIR_SENSIBLE_FACTOR: float = 1.08
"""Standard-air factor for sensible heat in Btu/h per CFM per °F.

Derived from 0.075 lb/ft³ × 0.24 Btu/lb·°F × 60 min/h.
"""

HYDRONIC_FACTOR: float = 500.0
"""Water factor for hydronic heat in Btu/h per GPM per °F.

Derived from 8.33 lb/gal × 1.0 Btu/lb·°F × 60 min/h.
"""

MINUTES_PER_HOUR: float = 60.0

DEFAULT_EXPORT_PATH: str = "heat_load.csv"

# Prompt bounds (inclusive). These are calibration constants carried over from the
# original console tool rather than physical limits.
MENU_MIN: int = 0

FLOW_MIN: float = 0.0
FLOW_MAX: float = 1e9
"""Bounds for CFM and GPM entries."""

AREA_MIN: float = 0.0
AREA_MAX: float = 1e12

VOLUME_MIN: float = 0.0
VOLUME_MAX: float = 1e18

ACH_MIN: float = 0.0
ACH_MAX: float = 1e6

DELTA_T_MIN: float = -200.0
DELTA_T_MAX: float = 200.0

U_VALUE_MIN: float = 0.0
U_VALUE_MAX: float = 1e6

R_VALUE_MIN: float = 0.000001
R_VALUE_MAX: float = 1e12

CONVERSION_MIN: float = -1e18
CONVERSION_MAX: float = 1e18
