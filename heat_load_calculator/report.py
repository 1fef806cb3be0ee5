"""Text rendering of load results and CSV export of a project."""

from __future__ import annotations

import csv
import io
import logging
from decimal import Decimal
from pathlib import Path

from .project import FRAME_COLUMNS as CSV_HEADER, LoadItem, LoadProject
from .units import btuhr_to_kw, btuhr_to_ton

logger = logging.getLogger(__name__)

TABLE_WIDTH = 82


class ExportError(Exception):
    """Raised when a project cannot be written to the requested path."""


def _fixed(value: float, places: int) -> Decimal:
    # Decimal keeps the fixed precision through the csv writer and, not being a
    # str, is left unquoted under QUOTE_STRINGS.
    return Decimal(f"{value:.{places}f}")


def _numeric_fields(btu_per_hr: float) -> list[Decimal]:
    return [
        _fixed(btu_per_hr, 1),
        _fixed(btuhr_to_kw(btu_per_hr), 3),
        _fixed(btuhr_to_ton(btu_per_hr), 3),
    ]


def render_csv(project: LoadProject) -> str:
    """Render ``project`` as CSV text, one row per item plus a trailing TOTAL row.

    Text fields are double quoted, Btu/h has one decimal place and kW/tons have
    three. The TOTAL row leaves ``Index`` empty and ``Method`` as an empty quoted
    string. An empty project still yields the header and an all-zero TOTAL row.
    """

    buffer = io.StringIO()
    # The header is bare; only data rows quote their text fields.
    buffer.write(",".join(CSV_HEADER) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_STRINGS, lineterminator="\n")

    for position, item in enumerate(project, start=1):
        writer.writerow([position, item.name, item.method.label, *_numeric_fields(item.btu_per_hr)])

    writer.writerow([None, "TOTAL", "", *_numeric_fields(project.total_btu_per_hr)])
    return buffer.getvalue()


def export_csv(project: LoadProject, path: str | Path) -> Path:
    """Write ``project`` to ``path`` as CSV and return the path written.

    The whole document is rendered before the file is opened, so a failure to
    open the target leaves nothing behind.

    Raises
    ------
    ExportError
        If the file cannot be opened or written.
    """

    target = Path(path)
    text = render_csv(project)
    try:
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except (OSError, ValueError) as exc:
        logger.warning("Could not write %s: %s", target, exc)
        raise ExportError(f"Could not write file: {path}") from exc

    logger.info("Exported %s item(s) to %s", len(project), target)
    return target


# ----------------------------------------------------------------------
# Console rendering
# ----------------------------------------------------------------------
def format_summary(project: LoadProject) -> str:
    """Fixed-width project summary table with a TOTAL line."""

    frame = project.to_frame()
    rule = "-" * TABLE_WIDTH
    lines = [
        "",
        "------------------ PROJECT LOAD SUMMARY ------------------",
        f"{'#':<4}{'Name':<28}{'Method':<14}{'BTU/hr':>14}{'kW':>12}{'Tons':>10}",
        rule,
    ]
    for row in frame.itertuples(index=False):
        lines.append(
            f"{str(row.Index) + ')':<4}{row.Name[:27]:<28}{row.Method[:13]:<14}"
            f"{row.BTU_per_hr:>14.1f}{row.kW:>12.3f}{row.Tons:>10.3f}"
        )

    total = project.total_btu_per_hr
    lines.append(rule)
    lines.append(f"{'TOTAL:':>46}{total:>14.1f}{btuhr_to_kw(total):>12.3f}{btuhr_to_ton(total):>10.3f}")
    lines.append("----------------------------------------------------------")
    lines.append("")
    return "\n".join(lines)


def format_quick_output(item: LoadItem) -> str:
    """Quick-calc result block: Btu/h, kW and tons for a single item."""

    return "\n".join(
        [
            "",
            "--- Output (Quick) ---",
            f"BTU/hr: {item.btu_per_hr:.1f}",
            f"kW:     {item.kw:.3f}",
            f"Tons:   {item.tons:.3f}",
        ]
    )
