import json
import pytest
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from src.data.dataset import Dataset
from src.heatmap.layout import compute_layout
from src.render.figures import HeatmapView, render_page_figures


def _layout(entries, **kwargs):
    ds = Dataset.model_validate(
        {
            "baseTemperature": 8.66,
            "monthlyVariance": [{"year": y, "month": m, "variance": v} for y, m, v in entries],
        }
    )
    return compute_layout(ds, height=600, **kwargs)


def test_mount_draws_all_surfaces_and_unmount_clears_them():
    layout = _layout([(2000, 1, -0.5), (2000, 2, 1.0), (2001, 3, 4.0), (2010, 12, -5.0)])
    view = HeatmapView(layout)
    view.mount()
    assert len(view.grid.figure.layout.shapes) == 4
    assert list(view.grid.figure.layout.xaxis.ticktext) == ["2000", "2010"]
    assert len(view.axis) == 12
    assert len(view.legend) == 20
    assert view.mounted

    view.unmount()
    assert all(len(s) == 0 for s in view.surfaces)
    assert not view.mounted


def test_double_mount_is_rejected():
    view = HeatmapView(_layout([(2000, 1, 0.0)]))
    view.mount()
    with pytest.raises(RuntimeError):
        view.mount()
    view.unmount()
    view.mount()
    assert len(view.axis) == 12


def test_cell_shapes_keep_exact_geometry():
    view = HeatmapView(_layout([(2000, 1, -0.5), (2001, 2, 0.0)], cell_width=0.0001))
    view.mount()
    first, second = view.grid.figure.layout.shapes
    assert (first.x0, first.x1, first.y0, first.y1) == (0, 0.0001, 0, 46)
    assert second.x0 == 0.0001
    assert second.x1 == pytest.approx(0.0002)
    assert second.y0 == 46
    assert first.fillcolor == "rgb(255, 255, 191)"


def test_month_axis_has_labels_only():
    view = HeatmapView(_layout([(2000, 1, 0.0)]))
    view.mount()
    yaxis = view.axis.figure.layout.yaxis
    assert yaxis.ticks == ""
    assert yaxis.showline is False
    assert yaxis.ticktext[0] == "January"
    assert yaxis.tickvals[0] == 23
    assert len(view.axis.figure.layout.shapes) == 0


def test_figures_serialise_to_plotly_json():
    out = render_page_figures(_layout([(2000, 1, -0.5), (2010, 7, 6.0)]))
    assert set(out) == {"grid", "axis", "legend"}
    grid = json.loads(out["grid"])
    legend = json.loads(out["legend"])
    assert len(grid["layout"]["shapes"]) == 2
    assert grid["layout"]["shapes"][0]["fillcolor"] == "rgb(255, 255, 191)"
    assert grid["layout"]["xaxis"]["ticktext"] == ["2000", "2010"]
    assert grid["layout"]["xaxis"]["tickfont"]["size"] == 16
    assert legend["layout"]["yaxis"]["ticktext"][0] == "> 12.8℃"
    assert legend["layout"]["shapes"][0]["fillcolor"] == "rgb(165, 0, 38)"


def test_empty_layout_draws_no_cells():
    layout = _layout([])
    view = HeatmapView(layout)
    view.mount()
    assert len(view.grid) == 0
    assert len(view.axis) == 12
    out = json.loads(render_page_figures(layout)["grid"])
    assert not out["layout"].get("shapes")
