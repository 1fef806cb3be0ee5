"""Interactive menu shell: quick calculations, project mode and conversions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from . import constants as c
from .builders import BUILDERS, BuildResult
from .project import LoadMethod, LoadProject
from .prompts import Console
from .report import ExportError, export_csv, format_quick_output, format_summary
from .units import btuhr_to_kw, btuhr_to_ton, kw_to_btuhr, ton_to_btuhr

logger = logging.getLogger(__name__)

BANNER = """\
=============================================
 HEAT LOAD CALCULATOR (Console) - Imperial
 Methods: Air Sensible | Hydronic | Conduction | ACH
---------------------------------------------
 Notes:
  - Quick-calcs intended for preliminary sizing.
  - Verify assumptions, code requirements, and design standards.
=============================================
"""

# Menu positions 1-4 in both calculator menus.
METHOD_CHOICES: dict[int, LoadMethod] = {
    1: LoadMethod.AIR_SENSIBLE,
    2: LoadMethod.HYDRONIC,
    3: LoadMethod.CONDUCTION,
    4: LoadMethod.ACH_AIR,
}


@dataclass
class ShellConfig:
    export_path: str = c.DEFAULT_EXPORT_PATH
    pause: bool = True


def _title(text: str) -> str:
    rule = "=" * 29
    return f"\n{rule}\n {text}\n{rule}"


class Shell:
    """Menu state machine for one interactive session.

    The session owns its :class:`LoadProject`; nothing is shared between
    sessions or kept after :meth:`run` returns.
    """

    def __init__(
        self,
        console: Console | None = None,
        config: ShellConfig | None = None,
        project: LoadProject | None = None,
    ) -> None:
        self.config = config or ShellConfig()
        self.console = console or Console(pause_enabled=self.config.pause)
        self.project = project if project is not None else LoadProject()

    # ------------------------------------------------------------------
    # Main menu
    # ------------------------------------------------------------------
    def run(self) -> int:
        """Run until the user exits; returns the process exit status."""

        self.console.echo(BANNER)
        try:
            self._main_menu()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed; ending session")
        self.console.echo("\nGoodbye.")
        return 0

    def _main_menu(self) -> None:
        menus = {
            1: self.quick_calc_menu,
            2: self.project_menu,
            3: self.conversions_menu,
        }
        while True:
            self.console.echo(_title("MAIN MENU"))
            self.console.echo("1) Quick Calcs")
            self.console.echo("2) Project Mode (Add + Sum)")
            self.console.echo("3) Conversions")
            self.console.echo("0) Exit")

            choice = self.console.read_int("Select: ", c.MENU_MIN, 3)
            if choice == 0:
                return
            menus[choice]()

    # ------------------------------------------------------------------
    # Quick calcs
    # ------------------------------------------------------------------
    def quick_calc_menu(self) -> None:
        while True:
            self.console.echo(_title("QUICK CALCS"))
            self.console.echo("1) Air Sensible (CFM, dT)")
            self.console.echo("2) Hydronic (GPM, dT)")
            self.console.echo("3) Conduction (U/R, A, dT)")
            self.console.echo("4) ACH Air Load (Vol, ACH, dT)")
            self.console.echo("0) Back")

            choice = self.console.read_int("Select: ", c.MENU_MIN, 4)
            if choice == 0:
                return

            result = BUILDERS[METHOD_CHOICES[choice]](self.console)
            if result.ok:
                self.console.echo(format_quick_output(result.item))
            else:
                self._report_failure(result)
            self.console.pause()

    # ------------------------------------------------------------------
    # Project mode
    # ------------------------------------------------------------------
    def project_menu(self) -> None:
        while True:
            self.console.echo(_title("PROJECT MODE (Build & Sum)"))
            self.console.echo("1) Add Air Sensible (CFM, dT)")
            self.console.echo("2) Add Hydronic (GPM, dT)")
            self.console.echo("3) Add Conduction (U/R, A, dT)")
            self.console.echo("4) Add ACH Air Load (Vol, ACH, dT)")
            self.console.echo("5) View Summary")
            self.console.echo("6) Remove Item")
            self.console.echo("7) Export CSV")
            self.console.echo("8) Clear Project")
            self.console.echo("0) Back")

            choice = self.console.read_int("Select: ", c.MENU_MIN, 8)
            if choice == 0:
                return

            try:
                if choice in METHOD_CHOICES:
                    self._add_item(METHOD_CHOICES[choice])
                elif choice == 5:
                    self._view_summary()
                elif choice == 6:
                    self._remove_item()
                elif choice == 7:
                    self._export()
                elif choice == 8:
                    self._clear()
            except EOFError:
                raise
            except Exception:
                # Actions mutate the project only as their last step.
                logger.exception("Project menu action %s failed", choice)
                self.console.echo("  [Error] Unexpected issue. Inputs were not applied.")
                self.console.pause()

    def _add_item(self, method: LoadMethod) -> None:
        result = BUILDERS[method](self.console)
        if result.ok:
            self.project.add(result.item)
        else:
            self._report_failure(result)
            self.console.pause()

    def _view_summary(self) -> None:
        if self.project.is_empty:
            self.console.echo("\n(No items yet.)")
        else:
            self.console.echo(format_summary(self.project))
        self.console.pause()

    def _remove_item(self) -> None:
        if self.project.is_empty:
            self.console.echo("\n(No items to remove.)")
            self.console.pause()
            return

        self.console.echo(format_summary(self.project))
        position = self.console.read_int("Remove which item #? ", 1, len(self.project))
        self.project.remove(position)
        self.console.echo("Removed.")
        self.console.pause()

    def _export(self) -> None:
        if self.project.is_empty:
            self.console.echo("\n(Project is empty; only the TOTAL row will be written.)")

        path = self.console.read_line(f"CSV file path (e.g., {self.config.export_path}): ")
        path = path or self.config.export_path
        try:
            export_csv(self.project, path)
        except ExportError as exc:
            self.console.echo(f"  ***Error*** {exc}")
        else:
            self.console.echo(f"  Saved: {path}")
        self.console.pause()

    def _clear(self) -> None:
        if self.console.yes_no("Clear all items?"):
            self.project.clear()
            self.console.echo("Cleared.")
        self.console.pause()

    def _report_failure(self, result: BuildResult) -> None:
        logger.warning("Item not applied (%s): %s", result.failure.value, result.message)
        self.console.echo("  [Error] Unexpected issue. Inputs were not applied.")

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def conversions_menu(self) -> None:
        while True:
            self.console.echo(_title("CONVERSIONS"))
            self.console.echo("1) BTU/hr -> kW & Tons")
            self.console.echo("2) kW -> BTU/hr")
            self.console.echo("3) Tons -> BTU/hr")
            self.console.echo("0) Back")

            choice = self.console.read_int("Select: ", c.MENU_MIN, 3)
            if choice == 0:
                return

            if choice == 1:
                btuhr = self.console.read_float("BTU/hr: ", c.CONVERSION_MIN, c.CONVERSION_MAX)
                self.console.echo(f"kW   = {btuhr_to_kw(btuhr):.3f}")
                self.console.echo(f"Tons = {btuhr_to_ton(btuhr):.3f}")
            elif choice == 2:
                kw = self.console.read_float("kW: ", c.CONVERSION_MIN, c.CONVERSION_MAX)
                self.console.echo(f"BTU/hr = {kw_to_btuhr(kw):.1f}")
            else:
                tons = self.console.read_float("Tons: ", c.CONVERSION_MIN, c.CONVERSION_MAX)
                self.console.echo(f"BTU/hr = {ton_to_btuhr(tons):.1f}")
            self.console.pause()
