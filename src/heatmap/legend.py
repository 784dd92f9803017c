from dataclasses import dataclass
from typing import List, Optional

from .bands import BANDS, Band

DEGREE = "℃"


@dataclass(frozen=True)
class LegendEntry:
    color: str
    label: str
    y: float
    height: float


def band_label(band: Band, lower: Optional[float] = None) -> str:
    if band.upper is None:
        return f"> {lower:.1f}{DEGREE}"
    return f"≤ {band.upper:.1f}{DEGREE}"


def legend_entries(height: float) -> List[LegendEntry]:
    """Ten blocks, hottest band at the top."""
    block = height / len(BANDS)
    labels = []
    previous = None
    for band in BANDS:
        labels.append(band_label(band, previous))
        previous = band.upper
    ordered = list(zip(BANDS, labels))[::-1]
    return [
        LegendEntry(color=band.color, label=label, y=i * block, height=block)
        for i, (band, label) in enumerate(ordered)
    ]
