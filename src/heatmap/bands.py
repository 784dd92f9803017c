import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

# Temperature bands (degC), ascending. Each band covers (previous upper, upper];
# the last band is open-ended above. Grid cells and the legend both read this
# table, so the two can never disagree.


@dataclass(frozen=True)
class Band:
    upper: Optional[float]
    rgb: Tuple[int, int, int]

    @property
    def color(self) -> str:
        r, g, b = self.rgb
        return f"rgb({r}, {g}, {b})"


BANDS: List[Band] = [
    Band(3.9, (69, 117, 180)),
    Band(5.0, (116, 173, 209)),
    Band(6.1, (171, 217, 233)),
    Band(7.2, (224, 243, 248)),
    Band(8.3, (255, 255, 191)),
    Band(9.5, (254, 224, 144)),
    Band(10.6, (253, 174, 97)),
    Band(11.7, (244, 109, 67)),
    Band(12.8, (215, 48, 39)),
    Band(None, (165, 0, 38)),
]


def thresholds() -> List[float]:
    return [b.upper for b in BANDS if b.upper is not None]


def band_index(temperature: float) -> int:
    t = float(temperature)
    if math.isnan(t):
        raise ValueError("Cannot classify NaN temperature")
    for idx, band in enumerate(BANDS):
        if band.upper is None or t <= band.upper:
            return idx
    return len(BANDS) - 1


def classify(temperature: float) -> Band:
    """Band for a temperature, using inclusive upper bounds."""
    return BANDS[band_index(temperature)]


def classify_series(temperatures: pd.Series) -> pd.Series:
    """Vectorised classify(): one color string per temperature."""
    temps = pd.Series(temperatures, dtype=float)
    if temps.isna().any():
        raise ValueError("Cannot classify NaN temperature")
    if temps.empty:
        return pd.Series([], index=temps.index, dtype=object)
    bins = [-np.inf] + thresholds() + [np.inf]
    colors = pd.cut(
        temps,
        bins=bins,
        labels=[b.color for b in BANDS],
        right=True,
        include_lowest=True,
    )
    return colors.astype(str)
