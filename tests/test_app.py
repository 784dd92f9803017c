import json
import sys
from pathlib import Path

import requests
from streamlit.testing.v1 import AppTest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from src.data.dataset import parse_dataset
from src.heatmap.layout import compute_layout
from src.render.figures import render_page_figures

APP = str(Path(__file__).resolve().parents[1] / "app" / "streamlit_app.py")


def _response(status_code, body):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = json.dumps(body).encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = "http://localhost:8000/figures"
    return resp


def _payload():
    ds = parse_dataset(
        {
            "baseTemperature": 8.0,
            "monthlyVariance": [
                {"year": 2000, "month": 1, "variance": -0.5},
                {"year": 2001, "month": 6, "variance": 1.5},
            ],
        }
    )
    layout = compute_layout(ds, 600)
    return {
        "title": "FCC Heat Map",
        "headline": "Monthly Global Land-Surface Temperature",
        "heading": layout.heading(),
        "width": layout.width,
        "height": layout.height,
        "figures": render_page_figures(layout),
    }


def test_page_renders_heading_and_fetches_every_run(monkeypatch):
    calls = []
    body = _payload()

    def fake_get(url, params=None, timeout=None, **kwargs):
        calls.append((url, dict(params or {})))
        return _response(200, body)

    monkeypatch.setattr("requests.get", fake_get)
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    assert not at.error
    assert at.title[0].value == "Monthly Global Land-Surface Temperature"
    assert at.subheader[0].value == "2000 - 2001: base temperature 8℃"

    at.run()
    assert len(calls) == 2
    assert calls[0][0].endswith("/figures")
    assert calls[0][1]["use_demo"] is False


def test_failed_fetch_shows_error_and_stops(monkeypatch):
    def fake_get(url, params=None, timeout=None, **kwargs):
        return _response(502, {"detail": "Dataset request failed with status 503"})

    monkeypatch.setattr("requests.get", fake_get)
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    assert len(at.error) == 1
    assert "502" in at.error[0].value
    assert "Dataset request failed with status 503" in at.error[0].value
    assert len(at.title) == 0


def test_unreachable_api_shows_error(monkeypatch):
    def fake_get(url, params=None, timeout=None, **kwargs):
        raise requests.exceptions.ConnectionError("connection refused")

    monkeypatch.setattr("requests.get", fake_get)
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert len(at.error) == 1
    assert "unreachable" in at.error[0].value
