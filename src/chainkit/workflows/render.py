"""Batch-render image recipes from a JSON configuration into PNG files."""

from __future__ import annotations

import argparse
import hashlib
import json
import re
import socket
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from chainkit.io import canonical_recipe_payload, read_recipe, recipe_builder, recipe_to_dict, write_png


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _sanitize_token(value: str) -> str:
    token = re.sub(r"[^A-Za-z0-9._-]+", "_", value.strip())
    return token if token else "unnamed"


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as fh:
        while True:
            chunk = fh.read(1024 * 1024)
            if not chunk:
                break
            h.update(chunk)
    return h.hexdigest()


def _resolve_path(base_dir: Path, path_like: str | Path) -> Path:
    p = Path(path_like)
    return p if p.is_absolute() else (base_dir / p)


def _load_json_config(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8-sig") as fh:
        cfg = json.load(fh)
    if not isinstance(cfg, dict):
        raise ValueError("Input config must be a JSON object.")
    return cfg


def _save_json(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, sort_keys=True)
        fh.write("\n")


def _default_template() -> dict[str, Any]:
    return {
        "run": {
            "name": "image_batch",
            "output_dir": "outputs/images",
            "write_report": True,
        },
        "defaults": {
            "scale": 2.0,
            "antialias": 4,
        },
        "images": [
            {
                "name": "red_badge",
                "size": [100, 100],
                "fill_color": "red",
                "corner_radius": 20,
            },
            {
                "name": "outlined_pill",
                "size": "160x48",
                "fill_color": "#ffffff",
                "corner_radius": 24,
                "border_width": 2,
                "border_color": "#1e90ff",
                "opacity": 0.9,
            },
        ],
    }


def write_input_template(path: str | Path) -> Path:
    out = Path(path)
    _save_json(out, _default_template())
    return out


def _image_payloads(cfg: dict[str, Any]) -> list[dict[str, Any]]:
    defaults = cfg.get("defaults", {})
    if not isinstance(defaults, dict):
        raise ValueError("defaults must be a JSON object.")
    images = cfg.get("images", [])
    if not isinstance(images, list) or len(images) == 0:
        raise ValueError("images must be a non-empty list of image recipes.")
    payloads = []
    for i, item in enumerate(images):
        if not isinstance(item, dict):
            raise ValueError(f"images[{i}] must be a JSON object.")
        payloads.append({**canonical_recipe_payload(defaults), **canonical_recipe_payload(item)})
    return payloads


def run_render(config_path: str | Path) -> dict[str, Any]:
    cfg_path = Path(config_path)
    cfg_dir = cfg_path.parent if cfg_path.parent != Path("") else Path(".")
    cfg = _load_json_config(cfg_path)
    run_cfg = dict(cfg.get("run", {}))
    run_name = str(run_cfg.get("name", cfg_path.stem))
    output_dir = _resolve_path(cfg_dir, run_cfg.get("output_dir", "outputs/images"))
    write_report = bool(run_cfg.get("write_report", True))

    started = _utc_now_iso()
    t0 = time.perf_counter()

    recipes = [read_recipe(payload) for payload in _image_payloads(cfg)]
    file_names = [f"{_sanitize_token(r.name)}.png" for r in recipes]
    duplicates = sorted({n for n in file_names if file_names.count(n) > 1})
    if duplicates:
        raise ValueError(f"Image names must be unique, duplicated: {', '.join(duplicates)}")

    images: list[dict[str, Any]] = []
    image_paths: dict[str, str] = {}
    for recipe, file_name in zip(recipes, file_names):
        artifact = recipe_builder(recipe).build()
        png_path = write_png(artifact, output_dir / file_name)
        image_paths[recipe.name] = str(png_path)
        images.append(
            {
                "name": recipe.name,
                "recipe": recipe_to_dict(recipe),
                "pixel_size": list(artifact.pixel_size),
                "path": str(png_path),
                "sha256": _sha256_file(png_path),
            }
        )

    runtime = time.perf_counter() - t0
    report = {
        "run": {
            "name": run_name,
            "input_config": str(cfg_path.resolve()),
            "started_utc": started,
            "finished_utc": _utc_now_iso(),
            "runtime_seconds": float(runtime),
            "output_dir": str(output_dir.resolve()),
        },
        "images": images,
        "provenance": {
            "config_sha256": _sha256_file(cfg_path),
            "hostname": socket.gethostname(),
        },
        "outputs": {"images": image_paths},
    }
    if write_report:
        report_path = output_dir / run_cfg.get("report_filename", f"{_sanitize_token(run_name)}_report.json")
        _save_json(report_path, report)
        report["outputs"]["report"] = str(report_path)
    return report


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input", type=Path, default=None, help="Path to JSON render configuration.")
    parser.add_argument("--write-template", type=Path, default=None, help="Write template config and exit.")
    args = parser.parse_args()

    if args.write_template is not None:
        out = write_input_template(args.write_template)
        print(f"Wrote template: {out}")
        return
    if args.input is None:
        raise ValueError("Provide --input <config.json> or --write-template <path>.")

    report = run_render(args.input)
    print(f"Run complete: {report['run']['name']}")
    print(f"images={len(report['images'])}")
    print(f"runtime_seconds={report['run']['runtime_seconds']:.3f}")
    print(f"outputs={report['outputs']}")


if __name__ == "__main__":
    main()
