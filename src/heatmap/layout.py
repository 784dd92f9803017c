from dataclasses import asdict, dataclass, field
from typing import List, Optional

from ..config import CELL_WIDTH, ROW_GUTTER
from ..data.dataset import Dataset
from .axes import LayoutError, Tick, row_height, x_axis_baseline, x_ticks, y_axis_offset, y_ticks
from .grid import Cell, grid_width, layout_cells
from .legend import LegendEntry, legend_entries


@dataclass
class HeatmapLayout:
    width: float
    height: float
    row_height: float
    cell_width: float
    x_axis_y: float
    y_axis_offset: float
    base_temperature: float
    min_year: Optional[int]
    max_year: Optional[int]
    cells: List[Cell] = field(default_factory=list)
    x_ticks: List[Tick] = field(default_factory=list)
    y_ticks: List[Tick] = field(default_factory=list)
    legend: List[LegendEntry] = field(default_factory=list)

    @property
    def columns(self) -> int:
        return int(round(self.width / self.cell_width)) if self.cell_width else 0

    def heading(self) -> str:
        if self.min_year is None:
            return f"No data: base temperature {self.base_temperature:g}℃"
        return f"{self.min_year} - {self.max_year}: base temperature {self.base_temperature:g}℃"

    def to_dict(self) -> dict:
        out = asdict(self)
        out["columns"] = self.columns
        out["heading"] = self.heading()
        return out


def compute_layout(
    dataset: Dataset,
    height: float,
    cell_width: float = CELL_WIDTH,
    gutter: float = ROW_GUTTER,
) -> HeatmapLayout:
    """
    Geometry and fill color for every cell, both axes and the legend.
    Pure: nothing is drawn here, see render.figures.HeatmapView for that.
    """
    if not isinstance(dataset, Dataset):
        raise TypeError(f"compute_layout expects a Dataset, got {type(dataset).__name__}")
    if height <= 0 or cell_width <= 0:
        raise LayoutError("Canvas height and cell width must be positive")
    rh = row_height(height, gutter)
    width = grid_width(dataset, cell_width)
    return HeatmapLayout(
        width=width,
        height=height,
        row_height=rh,
        cell_width=cell_width,
        x_axis_y=x_axis_baseline(rh),
        y_axis_offset=y_axis_offset(rh),
        base_temperature=dataset.base_temperature,
        min_year=dataset.min_year,
        max_year=dataset.max_year,
        cells=layout_cells(dataset, rh, cell_width),
        x_ticks=x_ticks(dataset.min_year, dataset.max_year, width),
        y_ticks=y_ticks(rh),
        legend=legend_entries(height),
    )
