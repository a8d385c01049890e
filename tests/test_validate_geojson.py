"""Tests for the GeoJSON export validator tool."""

import json
from pathlib import Path

from ifn.api.export import export_records
from tools.validate_geojson import main

SCHEMA = Path(__file__).resolve().parent.parent / "docs" / "schemas" / "feature-collection.schema.json"


def _validate(*paths):
    return main([*map(str, paths), "--schema", str(SCHEMA)])


def test_exported_collections_validate(placettes, plots, session, tmp_path):
    placettes_file = tmp_path / "placettes.geojson"
    plots_file = tmp_path / "plots.geojson"
    export_records(session, "programme", format="geojson", out=placettes_file)
    export_records(session, "plot", format="geojson", out=plots_file)

    assert _validate(placettes_file, plots_file) == 0


def test_count_mismatch_fails(tmp_path, capsys):
    path = tmp_path / "bad.geojson"
    path.write_text(json.dumps({
        "type": "FeatureCollection",
        "totalFeatures": 2,
        "features": [{
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [-6.5, 34.2]},
            "properties": {"numPlacette": "P1"},
        }],
    }))

    assert _validate(path) == 1
    assert "totalFeatures=2" in capsys.readouterr().err


def test_null_coordinate_fails_schema(tmp_path):
    path = tmp_path / "null.geojson"
    path.write_text(json.dumps({
        "type": "FeatureCollection",
        "totalFeatures": 1,
        "features": [{
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [None, 34.2]},
            "properties": {"plotNo": "S1"},
        }],
    }))

    assert _validate(path) == 1


def test_no_files_is_usage_error():
    assert _validate() == 2
