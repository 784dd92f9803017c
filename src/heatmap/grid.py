from dataclasses import dataclass
from typing import List

import pandas as pd

from ..data.dataset import Dataset
from .bands import classify_series


@dataclass(frozen=True)
class Cell:
    year: int
    month: int
    variance: float
    temperature: float
    x: float
    y: float
    width: float
    height: float
    color: str


def grid_width(dataset: Dataset, cell_width: float) -> float:
    return len(dataset.years()) * cell_width


def cell_frame(dataset: Dataset, rh: float, cell_width: float) -> pd.DataFrame:
    """One row per (year, month) entry with its rectangle and fill color.

    Columns are indexed against the sorted distinct years, so an unsorted or
    shuffled feed lands in the same place as a sorted one.
    """
    df = dataset.to_frame()
    columns = {year: idx for idx, year in enumerate(dataset.years())}
    df["temperature"] = dataset.base_temperature + df["variance"].astype(float)
    df["x"] = df["year"].map(columns).astype(float) * cell_width
    df["y"] = (df["month"].astype(float) - 1) * rh
    df["width"] = float(cell_width)
    df["height"] = float(rh)
    df["color"] = classify_series(df["temperature"])
    return df


def layout_cells(dataset: Dataset, rh: float, cell_width: float) -> List[Cell]:
    df = cell_frame(dataset, rh, cell_width)
    return [
        Cell(
            year=int(row.year),
            month=int(row.month),
            variance=float(row.variance),
            temperature=float(row.temperature),
            x=float(row.x),
            y=float(row.y),
            width=float(row.width),
            height=float(row.height),
            color=str(row.color),
        )
        for row in df.itertuples(index=False)
    ]
