import os

import plotly.io as pio
import requests
import streamlit as st

API = os.getenv("HEATMAP_API", "http://localhost:8000").rstrip("/")
CANVAS_HEIGHT = float(os.getenv("CANVAS_HEIGHT", "600"))
REQUEST_TIMEOUT = int(os.getenv("HEATMAP_REQUEST_TIMEOUT", "60"))
CHART_CONFIG = {"displayModeBar": False, "staticPlot": True}


def _fetch_heatmap(height: float, use_demo: bool) -> dict:
    resp = requests.get(
        f"{API}/figures",
        params={"height": height, "use_demo": use_demo},
        timeout=REQUEST_TIMEOUT,
    )
    resp.raise_for_status()
    return resp.json()


st.set_page_config(page_title="FCC Heat Map", layout="wide")
st.markdown(
    """
    <style>
    div[data-testid="stHorizontalBlock"] div[data-testid="stPlotlyChart"] {
        overflow-x: auto;
        overflow-y: hidden;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

st.sidebar.header("Data")
data_source = st.sidebar.radio(
    "Data source",
    ["Live (freeCodeCamp)", "Demo (synthetic)"],
    index=0,
    help="Demo renders a synthetic feed without touching the network.",
)
use_demo = data_source != "Live (freeCodeCamp)"
height = st.sidebar.slider("Canvas height (px)", 240, 1200, int(CANVAS_HEIGHT), step=12)

try:
    payload = _fetch_heatmap(float(height), use_demo)
except requests.exceptions.HTTPError as exc:
    detail = ""
    try:
        detail = exc.response.json().get("detail", "")
    except ValueError:
        pass
    st.error(f"Could not build the heat map ({exc.response.status_code}): {detail or exc}")
    st.stop()
except requests.exceptions.RequestException as exc:
    st.error(f"Heat map API unreachable at {API}: {exc}")
    st.stop()

st.title(payload["headline"])
st.subheader(payload["heading"])

figures = {name: pio.from_json(raw) for name, raw in payload["figures"].items()}
col_axis, col_grid, col_legend = st.columns([1, 8, 1.4], gap="small")
with col_axis:
    st.plotly_chart(figures["axis"], use_container_width=False, config=CHART_CONFIG, key="axis")
with col_grid:
    st.plotly_chart(figures["grid"], use_container_width=False, config=CHART_CONFIG, key="grid")
with col_legend:
    st.plotly_chart(figures["legend"], use_container_width=False, config=CHART_CONFIG, key="legend")
if not payload["width"]:
    st.caption("The dataset has no monthly entries to draw.")
