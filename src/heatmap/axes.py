import calendar
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

TICK_EVERY_YEARS = 10
MONTHS = 12


class LayoutError(ValueError):
    """Requested geometry cannot be drawn (e.g. canvas too short for 12 rows)."""


@dataclass(frozen=True)
class Tick:
    value: int
    position: float
    label: str


def row_height(height: float, gutter: float) -> float:
    """Height of one month row; only depends on canvas height, never on year count."""
    rh = height / MONTHS - gutter
    if rh <= 0:
        raise LayoutError(
            f"Canvas height {height} leaves no room for 12 rows with a {gutter}px gutter"
        )
    return rh


def year_position(year: int, min_year: int, max_year: int, width: float) -> float:
    """Time scale: 1 January of min_year -> 0, 1 January of max_year -> width."""
    t0 = pd.Timestamp(year=min_year, month=1, day=1)
    t1 = pd.Timestamp(year=max_year, month=1, day=1)
    span = (t1 - t0).total_seconds()
    if span == 0:
        return width / 2
    return (pd.Timestamp(year=year, month=1, day=1) - t0).total_seconds() / span * width


def x_ticks(min_year: Optional[int], max_year: Optional[int], width: float) -> List[Tick]:
    if min_year is None or max_year is None:
        return []
    first = -(-min_year // TICK_EVERY_YEARS) * TICK_EVERY_YEARS
    return [
        Tick(year, year_position(year, min_year, max_year, width), str(year))
        for year in range(first, max_year + 1, TICK_EVERY_YEARS)
    ]


def month_label(index: int) -> str:
    name = calendar.month_name[index + 1]
    return name[:1].upper() + name[1:]


def y_ticks(rh: float) -> List[Tick]:
    # Linear scale [0, 11] -> [0, 11 * rh]; the axis group is shifted by
    # rh / 2 (see y_axis_offset) so labels land on row centres.
    return [Tick(i, i * rh, month_label(i)) for i in range(MONTHS)]


def y_axis_offset(rh: float) -> float:
    return rh / 2


def x_axis_baseline(rh: float) -> float:
    return MONTHS * rh
