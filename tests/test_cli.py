"""
Tests for the command-line interface
"""

import json

import cli
from osm_geojson.models import GeoJSONFeature, GeoJSONFeatureCollection, GeoJSONLineString
from osm_geojson.overpass import OSMCollector

RESPONSE = {"elements": [
    {"type": "node", "id": 1, "lat": 0.0, "lon": 0.0},
    {"type": "node", "id": 2, "lat": 1.0, "lon": 1.0},
    {"type": "way", "id": 10, "nodes": [1, 2], "tags": {"highway": "path"}},
]}


def test_convert_writes_feature_collection(tmp_path):
    input_path = tmp_path / "overpass.json"
    output_path = tmp_path / "out" / "features.geojson"
    input_path.write_text(json.dumps(RESPONSE), encoding="utf-8")

    code = cli.main(["convert", "--input", str(input_path), "--output", str(output_path)])

    assert code == 0
    collection = json.loads(output_path.read_text(encoding="utf-8"))
    assert collection["type"] == "FeatureCollection"
    assert collection["features"] == [{
        "type": "Feature",
        "id": "way/10",
        "geometry": {"type": "LineString", "coordinates": [[0.0, 0.0], [1.0, 1.0]]},
        "properties": {"highway": "path"},
    }]


def test_convert_missing_input_fails(tmp_path):
    assert cli.main(["convert", "--input", str(tmp_path / "missing.json")]) == 1


def test_convert_dangling_reference_fails_unless_lenient(tmp_path, capsys):
    input_path = tmp_path / "overpass.json"
    data = {"elements": [{"type": "way", "id": 10, "nodes": [1, 2], "tags": {"highway": "path"}}]}
    input_path.write_text(json.dumps(data), encoding="utf-8")

    assert cli.main(["convert", "--input", str(input_path)]) == 1
    assert cli.main(["convert", "--input", str(input_path), "--lenient"]) == 0
    assert '"FeatureCollection"' in capsys.readouterr().out


def test_no_command_prints_help():
    assert cli.main([]) == 1


FEATURE = GeoJSONFeature(
    id="way/10",
    geometry=GeoJSONLineString(coordinates=[[0.0, 0.0], [1.0, 1.0]]),
    properties={"highway": "path"},
)


def test_fetch_prints_feature(monkeypatch, capsys):
    requested = []

    def fetch_element(self, element_type, element_id):
        requested.append((element_type, element_id))
        return FEATURE

    monkeypatch.setattr(OSMCollector, "fetch_element", fetch_element)

    assert cli.main(["fetch", "--type", "way", "--id", "10"]) == 0
    assert requested == [("way", 10)]
    assert json.loads(capsys.readouterr().out) == {
        "type": "Feature",
        "id": "way/10",
        "geometry": {"type": "LineString", "coordinates": [[0.0, 0.0], [1.0, 1.0]]},
        "properties": {"highway": "path"},
    }


def test_fetch_without_feature_writes_nothing(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(OSMCollector, "fetch_element", lambda self, t, i: None)
    output_path = tmp_path / "node.geojson"

    assert cli.main(["fetch", "--type", "node", "--id", "1"]) == 0
    assert cli.main(["fetch", "--type", "node", "--id", "1", "--output", str(output_path)]) == 0
    assert capsys.readouterr().out == ""
    assert not output_path.exists()


def test_fetch_failure_returns_error(monkeypatch, capsys):
    def fetch_element(self, element_type, element_id):
        raise RuntimeError("Overpass unavailable")

    monkeypatch.setattr(OSMCollector, "fetch_element", fetch_element)

    assert cli.main(["fetch", "--type", "relation", "--id", "7"]) == 1
    assert capsys.readouterr().out == ""


def test_around_prints_feature_collection(monkeypatch, capsys):
    requested = []

    def fetch_around(self, lat, lon, radius_m=150):
        requested.append((lat, lon, radius_m))
        return GeoJSONFeatureCollection(features=[FEATURE])

    monkeypatch.setattr(OSMCollector, "fetch_around", fetch_around)

    assert cli.main(["around", "--lat", "32.08", "--lon", "34.78", "--radius", "50"]) == 0
    assert requested == [(32.08, 34.78, 50.0)]
    collection = json.loads(capsys.readouterr().out)
    assert collection["type"] == "FeatureCollection"
    assert [f["id"] for f in collection["features"]] == ["way/10"]


def test_around_failure_returns_error(monkeypatch, capsys):
    def fetch_around(self, lat, lon, radius_m=150):
        raise RuntimeError("Overpass unavailable")

    monkeypatch.setattr(OSMCollector, "fetch_around", fetch_around)

    assert cli.main(["around", "--lat", "32.08", "--lon", "34.78"]) == 1
    assert capsys.readouterr().out == ""
