"""Command line entry point: interactive shell plus one-shot load and unit commands."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from . import constants as c
from .loads import (
    ach_air_btuhr,
    air_sensible_btuhr,
    cfm_from_ach,
    conduction_btuhr,
    conduction_from_r_btuhr,
    hydronic_btuhr,
)
from .project import LoadItem, LoadMethod
from .prompts import Console, format_bound, parse_float
from .report import format_quick_output
from .shell import Shell, ShellConfig
from .units import btuhr_to_kw, btuhr_to_ton, kw_to_btuhr, ton_to_btuhr


def _bounded(lo: float, hi: float) -> Callable[[str], float]:
    """argparse ``type`` that accepts a finite number within ``[lo, hi]``."""

    def convert(text: str) -> float:
        value = parse_float(text, lo, hi)
        if value is None:
            raise argparse.ArgumentTypeError(
                f"expected a number from {format_bound(lo)} to {format_bound(hi)}, got {text!r}"
            )
        return value

    return convert


def _add_delta_t(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--dt",
        type=_bounded(c.DELTA_T_MIN, c.DELTA_T_MAX),
        required=True,
        help="Temperature difference in °F",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Heat load calculator (imperial units)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    shell = subparsers.add_parser("shell", help="Run the interactive menu (default)")
    shell.add_argument(
        "--export-path",
        default=c.DEFAULT_EXPORT_PATH,
        help=f"Default CSV path offered by Export CSV (default: {c.DEFAULT_EXPORT_PATH})",
    )
    shell.add_argument("--no-pause", action="store_true", help="Do not wait for Enter after results")

    air = subparsers.add_parser("air-sensible", help="Sensible air load, Qs = 1.08 * CFM * dT")
    air.add_argument("--cfm", type=_bounded(c.FLOW_MIN, c.FLOW_MAX), required=True, help="Airflow in CFM")
    _add_delta_t(air)

    hydronic = subparsers.add_parser("hydronic", help="Hydronic load, Q = 500 * GPM * dT")
    hydronic.add_argument("--gpm", type=_bounded(c.FLOW_MIN, c.FLOW_MAX), required=True, help="Water flow in GPM")
    _add_delta_t(hydronic)

    conduction = subparsers.add_parser("conduction", help="Conduction load, Q = U * A * dT")
    conduction.add_argument(
        "--area", type=_bounded(c.AREA_MIN, c.AREA_MAX), required=True, help="Area in ft^2"
    )
    _add_delta_t(conduction)
    coefficient = conduction.add_mutually_exclusive_group(required=True)
    coefficient.add_argument("--u", type=_bounded(c.U_VALUE_MIN, c.U_VALUE_MAX), help="U-value")
    coefficient.add_argument("--r", type=_bounded(c.R_VALUE_MIN, c.R_VALUE_MAX), help="R-value (U = 1/R)")

    ach = subparsers.add_parser("ach", help="Air change load, CFM = ACH * V / 60 then Qs")
    ach.add_argument(
        "--volume", type=_bounded(c.VOLUME_MIN, c.VOLUME_MAX), required=True, help="Zone volume in ft^3"
    )
    ach.add_argument("--ach", type=_bounded(c.ACH_MIN, c.ACH_MAX), required=True, help="Air changes per hour")
    _add_delta_t(ach)

    conversions: dict[str, tuple[str, Callable[[float], float]]] = {
        "btuhr-to-kw": ("Convert Btu/h to kW", btuhr_to_kw),
        "kw-to-btuhr": ("Convert kW to Btu/h", kw_to_btuhr),
        "btuhr-to-ton": ("Convert Btu/h to tons", btuhr_to_ton),
        "ton-to-btuhr": ("Convert tons to Btu/h", ton_to_btuhr),
    }

    for name, (help_text, func) in conversions.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "value",
            type=_bounded(c.CONVERSION_MIN, c.CONVERSION_MAX),
            help="Input value for the conversion",
        )
        sub.set_defaults(func=func)

    return parser


def _load_item(args: argparse.Namespace) -> LoadItem:
    if args.command == "air-sensible":
        return LoadItem("Air Sensible Load", LoadMethod.AIR_SENSIBLE, air_sensible_btuhr(args.cfm, args.dt))
    if args.command == "hydronic":
        return LoadItem("Hydronic Load", LoadMethod.HYDRONIC, hydronic_btuhr(args.gpm, args.dt))
    if args.command == "conduction":
        if args.u is not None:
            btuhr = conduction_btuhr(args.u, args.area, args.dt)
        else:
            btuhr = conduction_from_r_btuhr(args.r, args.area, args.dt)
        return LoadItem("Conduction Load", LoadMethod.CONDUCTION, btuhr)
    return LoadItem("ACH Air Load", LoadMethod.ACH_AIR, ach_air_btuhr(args.ach, args.volume, args.dt))


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command in (None, "shell"):
        config = ShellConfig(
            export_path=getattr(args, "export_path", c.DEFAULT_EXPORT_PATH),
            pause=not getattr(args, "no_pause", False),
        )
        return Shell(console=Console(pause_enabled=config.pause), config=config).run()

    if args.command in ("air-sensible", "hydronic", "conduction", "ach"):
        if args.command == "ach":
            print(f"CFM:    {cfm_from_ach(args.ach, args.volume):.3f}")
        print(format_quick_output(_load_item(args)).lstrip("\n"))
        return 0

    conversion = getattr(args, "func")
    print(conversion(args.value))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
