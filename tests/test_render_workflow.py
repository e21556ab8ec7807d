import json
from pathlib import Path

import numpy as np
import pytest

from chainkit.io import read_png_pixels
from chainkit.workflows.render import run_render, write_input_template


def test_template_renders_every_image(tmp_path) -> None:
    cfg_path = write_input_template(tmp_path / "render.json")
    report = run_render(cfg_path)

    assert report["run"]["name"] == "image_batch"
    sizes = {item["name"]: item["pixel_size"] for item in report["images"]}
    assert sizes == {"red_badge": [200, 200], "outlined_pill": [320, 96]}

    for item in report["images"]:
        png = Path(item["path"])
        assert png.exists()
        assert png.parent == tmp_path / "outputs" / "images"
        assert len(item["sha256"]) == 64

    report_path = Path(report["outputs"]["report"])
    assert report_path.exists()
    saved = json.loads(report_path.read_text(encoding="utf-8"))
    assert saved["images"][0]["recipe"]["fill_color"] == "#ff0000"
    assert saved["images"][0]["recipe"]["scale"] == 2.0


def test_image_overrides_defaults(tmp_path) -> None:
    cfg = {
        "run": {"name": "override", "output_dir": "out", "write_report": False},
        "defaults": {"fill_color": "blue", "scale": 1.0},
        "images": [
            {"name": "a", "size": [4, 4]},
            {"name": "b", "size": [4, 4], "fill_color": "red"},
        ],
    }
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text(json.dumps(cfg), encoding="utf-8")

    report = run_render(cfg_path)
    assert "report" not in report["outputs"]
    a = read_png_pixels(report["outputs"]["images"]["a"])
    b = read_png_pixels(report["outputs"]["images"]["b"])
    assert np.all(a[..., :3] == [0, 0, 255])
    assert np.all(b[..., :3] == [255, 0, 0])


def test_duplicate_image_names_are_rejected(tmp_path) -> None:
    cfg = {"images": [{"name": "x", "size": [2, 2]}, {"name": "x", "size": [3, 3]}]}
    cfg_path = tmp_path / "dup.json"
    cfg_path.write_text(json.dumps(cfg), encoding="utf-8")
    with pytest.raises(ValueError, match="unique"):
        run_render(cfg_path)


def test_empty_image_list_is_rejected(tmp_path) -> None:
    cfg_path = tmp_path / "empty.json"
    cfg_path.write_text(json.dumps({"images": []}), encoding="utf-8")
    with pytest.raises(ValueError, match="non-empty"):
        run_render(cfg_path)


def test_camel_case_image_key_overrides_snake_case_default(tmp_path) -> None:
    cfg = {
        "run": {"output_dir": "out", "write_report": False},
        "defaults": {"fill_color": "blue", "cornerRadius": 1},
        "images": [{"name": "c", "size": [4, 4], "fillColor": "red", "corner_radius": 0}],
    }
    cfg_path = tmp_path / "alias.json"
    cfg_path.write_text(json.dumps(cfg), encoding="utf-8")

    report = run_render(cfg_path)
    recipe = report["images"][0]["recipe"]
    assert recipe["fill_color"] == "#ff0000"
    assert recipe["corner_radius"] == 0.0
    c = read_png_pixels(report["outputs"]["images"]["c"])
    assert np.all(c[..., :3] == [255, 0, 0])
