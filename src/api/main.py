import logging
from fastapi import FastAPI, HTTPException, Query

from ..config import CANVAS_HEIGHT
from ..data.dataset import Dataset, DatasetFetchError, DatasetValidationError, load_dataset
from ..heatmap.axes import LayoutError
from ..heatmap.layout import compute_layout
from ..heatmap.legend import legend_entries
from ..render.figures import render_page_figures

app = FastAPI(title="Heat Map API", version="0.1.0")
LOGGER = logging.getLogger(__name__)

PAGE_TITLE = "FCC Heat Map"
HEADLINE = "Monthly Global Land-Surface Temperature"


def _dataset(use_demo: bool) -> Dataset:
    try:
        return load_dataset(use_demo)
    except DatasetFetchError as exc:
        LOGGER.warning("Dataset fetch failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except DatasetValidationError as exc:
        LOGGER.warning("Dataset rejected: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _layout(use_demo: bool, height: float):
    dataset = _dataset(use_demo)
    try:
        return compute_layout(dataset, height)
    except LayoutError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/dataset")
def dataset_summary(use_demo: bool = False):
    ds = _dataset(use_demo)
    return {
        "min_year": ds.min_year,
        "max_year": ds.max_year,
        "base_temperature": ds.base_temperature,
        "entries": len(ds.monthly_variance),
        "years": len(ds.years()),
    }


@app.get("/layout")
def layout(height: float = Query(CANVAS_HEIGHT, gt=0), use_demo: bool = False):
    return _layout(use_demo, height).to_dict()


@app.get("/legend")
def legend(height: float = Query(CANVAS_HEIGHT, gt=0)):
    return {"entries": [vars(e) for e in legend_entries(height)]}


@app.get("/figures")
def figures(height: float = Query(CANVAS_HEIGHT, gt=0), use_demo: bool = False):
    lay = _layout(use_demo, height)
    return {
        "title": PAGE_TITLE,
        "headline": HEADLINE,
        "heading": lay.heading(),
        "width": lay.width,
        "height": lay.height,
        "figures": render_page_figures(lay),
    }
