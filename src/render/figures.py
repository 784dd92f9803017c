import logging
from typing import Dict, List, Optional, Sequence

import plotly.graph_objects as go

from ..config import LABEL_WIDTH
from ..heatmap.layout import HeatmapLayout

LOGGER = logging.getLogger(__name__)

FONT_SIZE = 16
LEGEND_WIDTH = 120
LEGEND_SWATCH = 30
MIN_FIGURE_PX = 10  # plotly rejects smaller layout sizes


def _blank_axis() -> dict:
    return dict(visible=False, showgrid=False, zeroline=False, fixedrange=True)


def _px(value: float) -> Optional[int]:
    return int(round(value)) if value >= MIN_FIGURE_PX else None


class DrawingSurface:
    """One plotly figure whose plot area is drawn in pixel coordinates
    (origin top-left, y down). Labels live in the margins.

    Everything drawn goes into the layout's shapes and axis tick labels, so
    clear() leaves an empty canvas.
    """

    def __init__(self, name: str, width: float, height: float, margin: Optional[dict] = None):
        self.name = name
        margin = dict(dict(l=0, r=0, t=0, b=0), **(margin or {}))
        self.figure = go.Figure()
        self.figure.update_layout(
            width=_px(width + margin["l"] + margin["r"]) if width else None,
            height=_px(height + margin["t"] + margin["b"]),
            margin=margin,
            plot_bgcolor="rgba(0,0,0,0)",
            paper_bgcolor="rgba(0,0,0,0)",
            showlegend=False,
            xaxis=dict(_blank_axis(), range=[0, width or 1]),
            yaxis=dict(_blank_axis(), range=[height, 0]),
        )

    def __len__(self) -> int:
        lay = self.figure.layout
        ticks = len(lay.xaxis.tickvals or ()) + len(lay.yaxis.tickvals or ())
        return len(lay.shapes) + ticks

    def add_rects(self, rects: Sequence[dict]) -> None:
        shapes = [
            dict(
                type="rect",
                xref="x",
                yref="y",
                x0=r["x"],
                y0=r["y"],
                x1=r["x"] + r["width"],
                y1=r["y"] + r["height"],
                fillcolor=r["color"],
                line=dict(width=0),
                layer="below",
            )
            for r in rects
        ]
        self.figure.update_layout(shapes=list(self.figure.layout.shapes) + shapes)

    def set_ticks(self, axis: str, positions: List[float], labels: List[str], **style) -> None:
        getattr(self.figure.layout, axis).update(
            visible=True,
            tickmode="array",
            tickvals=positions,
            ticktext=labels,
            tickfont=dict(size=FONT_SIZE),
            **style,
        )

    def clear(self) -> None:
        lay = self.figure.layout
        lay.shapes = ()
        for axis in (lay.xaxis, lay.yaxis):
            axis.tickvals = None
            axis.ticktext = None
            axis.visible = False

    def to_json(self) -> str:
        return self.figure.to_json()


class HeatmapView:
    """Draws a HeatmapLayout onto three surfaces: grid (cells + year axis),
    axis (month labels) and legend."""

    def __init__(self, layout: HeatmapLayout):
        self.layout = layout
        below = layout.height - layout.x_axis_y
        self.grid = DrawingSurface("grid", layout.width, layout.x_axis_y, dict(b=below))
        self.axis = DrawingSurface("axis", 1, layout.x_axis_y, dict(l=LABEL_WIDTH - 1, b=below))
        self.legend = DrawingSurface(
            "legend", LEGEND_SWATCH, layout.height, dict(r=LEGEND_WIDTH - LEGEND_SWATCH)
        )
        self.mounted = False

    @property
    def surfaces(self) -> List[DrawingSurface]:
        return [self.grid, self.axis, self.legend]

    def mount(self) -> None:
        if self.mounted:
            raise RuntimeError("HeatmapView is already mounted; unmount it first")
        try:
            self._draw_grid()
            self._draw_month_axis()
            self._draw_legend()
        except Exception:
            self.unmount()
            raise
        self.mounted = True
        LOGGER.debug(
            "Mounted heat map: %d cells, %d year ticks",
            len(self.layout.cells),
            len(self.layout.x_ticks),
        )

    def unmount(self) -> None:
        for surface in self.surfaces:
            surface.clear()
        self.mounted = False

    def _draw_grid(self) -> None:
        lay = self.layout
        self.grid.add_rects([vars(cell) for cell in lay.cells])
        if lay.x_ticks:
            self.grid.set_ticks(
                "xaxis",
                [t.position for t in lay.x_ticks],
                [t.label for t in lay.x_ticks],
                ticks="outside",
                showline=True,
                linecolor="black",
            )

    def _draw_month_axis(self) -> None:
        # Tick size 0 and no axis line: labels only.
        lay = self.layout
        self.axis.set_ticks(
            "yaxis",
            [t.position + lay.y_axis_offset for t in lay.y_ticks],
            [t.label for t in lay.y_ticks],
            ticks="",
            showline=False,
        )

    def _draw_legend(self) -> None:
        entries = self.layout.legend
        self.legend.add_rects(
            [dict(x=0, y=e.y, width=LEGEND_SWATCH, height=e.height, color=e.color) for e in entries]
        )
        self.legend.set_ticks(
            "yaxis",
            [e.y + e.height / 2 for e in entries],
            [e.label for e in entries],
            ticks="",
            showline=False,
            side="right",
        )

    def to_json(self) -> Dict[str, str]:
        return {surface.name: surface.to_json() for surface in self.surfaces}


def render_page_figures(layout: HeatmapLayout) -> Dict[str, str]:
    """Mount, serialise each surface to plotly JSON and tear down."""
    view = HeatmapView(layout)
    view.mount()
    try:
        return view.to_json()
    finally:
        view.unmount()
