"""Prompt sequences that turn console input into load items.

Each builder asks for a name and the method's inputs, computes the load, echoes
the working and returns a :class:`BuildResult`. A builder never raises for a bad
calculation; the caller inspects ``result.failure`` and decides what to do.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from . import constants as c
from .loads import (
    air_sensible_btuhr,
    cfm_from_ach,
    conduction_btuhr,
    hydronic_btuhr,
    u_from_r,
)
from .project import LoadItem, LoadMethod
from .prompts import Console

logger = logging.getLogger(__name__)


class BuildFailure(Enum):
    INVALID_INPUT = "invalid_input"
    NON_FINITE = "non_finite"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class BuildResult:
    item: LoadItem | None = None
    failure: BuildFailure | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.item is not None


def _compute(method: LoadMethod, name: str, calculate: Callable[[], float]) -> BuildResult:
    try:
        btu_per_hr = calculate()
    except ValueError as exc:
        logger.warning("%s inputs rejected: %s", method.label, exc)
        return BuildResult(failure=BuildFailure.INVALID_INPUT, message=str(exc))
    except ArithmeticError as exc:
        logger.warning("%s calculation failed: %s", method.label, exc)
        return BuildResult(failure=BuildFailure.NON_FINITE, message=str(exc))
    except Exception as exc:
        logger.exception("Unexpected error while building %s item", method.label)
        return BuildResult(failure=BuildFailure.UNEXPECTED, message=str(exc))

    if not math.isfinite(btu_per_hr):
        logger.warning("%s calculation produced %s", method.label, btu_per_hr)
        return BuildResult(failure=BuildFailure.NON_FINITE, message=f"result is {btu_per_hr}")

    return BuildResult(item=LoadItem(name=name, method=method, btu_per_hr=btu_per_hr))


def _read_name(console: Console, prompt: str, method: LoadMethod) -> str:
    return console.read_line(prompt) or method.default_name


def _read_delta_t(console: Console) -> float:
    return console.read_float("Delta-T (F): ", c.DELTA_T_MIN, c.DELTA_T_MAX)


def build_air_sensible_item(console: Console) -> BuildResult:
    method = LoadMethod.AIR_SENSIBLE
    name = _read_name(console, "Name (e.g., Supply air, Zone vent): ", method)
    cfm = console.read_float("CFM: ", c.FLOW_MIN, c.FLOW_MAX)
    delta_t = _read_delta_t(console)

    result = _compute(method, name, lambda: air_sensible_btuhr(cfm, delta_t))
    if result.ok:
        console.echo(f"Result: Qs = 1.08 * {cfm:g} * {delta_t:g} = {result.item.btu_per_hr:.1f} BTU/hr")
    return result


def build_hydronic_item(console: Console) -> BuildResult:
    method = LoadMethod.HYDRONIC
    name = _read_name(console, "Name (e.g., HW coil, baseboard loop): ", method)
    gpm = console.read_float("GPM: ", c.FLOW_MIN, c.FLOW_MAX)
    delta_t = _read_delta_t(console)

    result = _compute(method, name, lambda: hydronic_btuhr(gpm, delta_t))
    if result.ok:
        console.echo(f"Result: Q = 500 * {gpm:g} * {delta_t:g} = {result.item.btu_per_hr:.1f} BTU/hr")
    return result


def build_conduction_item(console: Console) -> BuildResult:
    """Conduction through an element given either its U-value or its R-value.

    The R-value prompt is bounded below by a small positive number, so zero and
    negative resistances are re-prompted before ``1 / R`` is ever evaluated.
    """

    method = LoadMethod.CONDUCTION
    name = _read_name(console, "Name (e.g., Exterior wall, Roof, Glass): ", method)

    console.echo("\nChoose input form:")
    console.echo("  1) U-value directly (BTU/hr·ft^2·F)")
    console.echo("  2) R-value (hr·ft^2·F/BTU)  -> U = 1/R")
    mode = console.read_int("Select: ", 1, 2)

    area = console.read_float("Area (ft^2): ", c.AREA_MIN, c.AREA_MAX)
    delta_t = _read_delta_t(console)

    if mode == 1:
        u_value = console.read_float("U-value: ", c.U_VALUE_MIN, c.U_VALUE_MAX)
    else:
        r_value = console.read_float("R-value: ", c.R_VALUE_MIN, c.R_VALUE_MAX)
        try:
            u_value = u_from_r(r_value)
        except ValueError as exc:
            logger.warning("R-value rejected: %s", exc)
            return BuildResult(failure=BuildFailure.INVALID_INPUT, message=str(exc))
        console.echo(f"Computed U = 1/R = {u_value:.6f}")

    result = _compute(method, name, lambda: conduction_btuhr(u_value, area, delta_t))
    if result.ok:
        console.echo(
            f"Result: Q = U * A * dT = {u_value:.6f} * {area:.1f} * {delta_t:.1f}"
            f" = {result.item.btu_per_hr:.1f} BTU/hr"
        )
    return result


def build_ach_item(console: Console) -> BuildResult:
    """Infiltration/ventilation load from air changes per hour.

    Shows the intermediate airflow before the sensible load.
    """

    method = LoadMethod.ACH_AIR
    name = _read_name(console, "Name (e.g., Infiltration, Ventilation): ", method)
    volume = console.read_float("Zone volume (ft^3): ", c.VOLUME_MIN, c.VOLUME_MAX)
    ach = console.read_float("ACH (air changes per hour): ", c.ACH_MIN, c.ACH_MAX)
    delta_t = _read_delta_t(console)

    cfm = cfm_from_ach(ach, volume)
    result = _compute(method, name, lambda: air_sensible_btuhr(cfm, delta_t))
    if result.ok:
        console.echo(f"CFM = ACH * Volume / 60 = {ach:.2f} * {volume:.2f} / 60 = {cfm:.2f}")
        console.echo(
            f"Qs  = 1.08 * CFM * dT   = 1.08 * {cfm:.2f} * {delta_t:.2f}"
            f" = {result.item.btu_per_hr:.1f} BTU/hr"
        )
    return result


BUILDERS: dict[LoadMethod, Callable[[Console], BuildResult]] = {
    LoadMethod.AIR_SENSIBLE: build_air_sensible_item,
    LoadMethod.HYDRONIC: build_hydronic_item,
    LoadMethod.CONDUCTION: build_conduction_item,
    LoadMethod.ACH_AIR: build_ach_item,
}
