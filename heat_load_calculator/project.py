"""Load items and the in-memory project that sums them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

import pandas as pd

from .units import btuhr_to_kw, btuhr_to_ton

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["Index", "Name", "Method", "BTU_per_hr", "kW", "Tons"]


class LoadMethod(Enum):
    """Calculator that produced a load item."""

    AIR_SENSIBLE = ("AirSens", "Air Sensible Load")
    HYDRONIC = ("Hydronic", "Hydronic Load")
    CONDUCTION = ("Cond(UA)", "Conduction Load")
    ACH_AIR = ("ACH->Air", "ACH Air Load")

    def __init__(self, label: str, default_name: str) -> None:
        self.label = label
        self.default_name = default_name

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class LoadItem:
    """One computed contribution to a project's heat load.

    Only the result is kept; the inputs that produced it are not stored.
    """

    name: str
    method: LoadMethod
    btu_per_hr: float

    @property
    def kw(self) -> float:
        return btuhr_to_kw(self.btu_per_hr)

    @property
    def tons(self) -> float:
        return btuhr_to_ton(self.btu_per_hr)


@dataclass
class LoadProject:
    """Ordered collection of load items owned by a single session.

    Items have no identity beyond their 1-based position, so removing one
    renumbers everything after it.
    """

    items: list[LoadItem] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add(self, item: LoadItem) -> None:
        self.items.append(item)
        logger.debug("Added item %s (%s, %.1f Btu/h)", item.name, item.method.label, item.btu_per_hr)

    def remove(self, position: int) -> LoadItem:
        """Remove and return the item at a 1-based ``position``.

        Raises
        ------
        IndexError
            If ``position`` is outside ``[1, len(self)]``.
        """

        if not 1 <= position <= len(self.items):
            raise IndexError(f"position {position} out of range 1..{len(self.items)}")
        item = self.items.pop(position - 1)
        logger.debug("Removed item %s at position %s", item.name, position)
        return item

    def clear(self) -> None:
        count = len(self.items)
        self.items.clear()
        logger.debug("Cleared %s item(s)", count)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def total_btu_per_hr(self) -> float:
        return sum((item.btu_per_hr for item in self.items), 0.0)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_frame(self) -> pd.DataFrame:
        """Return the items as a DataFrame with one row per item.

        Columns are ``Index`` (1-based), ``Name``, ``Method`` (display label),
        ``BTU_per_hr``, ``kW`` and ``Tons``. The total is not included.
        """

        records = [
            {
                "Index": position,
                "Name": item.name,
                "Method": item.method.label,
                "BTU_per_hr": item.btu_per_hr,
                "kW": item.kw,
                "Tons": item.tons,
            }
            for position, item in enumerate(self.items, start=1)
        ]
        return pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LoadItem]:
        return iter(self.items)
