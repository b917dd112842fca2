import json
import os

import pytest

from route_analyzer.analysis import analyze
from route_analyzer.config import AnalysisParameters
from route_analyzer.file_utils import generate_output_filename
from route_analyzer.geometry import Waypoint
from route_analyzer.output import render_result, result_to_dict, write_result


@pytest.fixture
def result():
    track = [
        Waypoint(1.0, 37.7749, -122.4194),
        Waypoint(2.0, 34.0522, -118.2437),
        Waypoint(3.0, 40.7128, -74.0060),
    ]
    params = AnalysisParameters(6371.0, 37.7749, -122.4194, 50.0, 10.0)
    return analyze(track, params)


def test_result_to_dict_layout(result):
    document = result_to_dict(result)

    assert list(document) == [
        "maxDistanceFromStart",
        "mostFrequentedArea",
        "waypointsOutsideGeofence",
    ]
    farthest = document["maxDistanceFromStart"]
    assert farthest["waypoint"] == {
        "timestamp": 3.0,
        "latitude": 40.7128,
        "longitude": -74.0060,
    }
    assert farthest["distanceKm"] == result.farthest.distance_km

    area = document["mostFrequentedArea"]
    assert area["centralWaypoint"]["timestamp"] == 1.0
    assert area["areaRadiusKm"] == 10.0
    assert area["entriesCount"] == 1

    geofence = document["waypointsOutsideGeofence"]
    assert geofence["centralWaypoint"] == {
        "timestamp": 0.0,
        "latitude": 37.7749,
        "longitude": -122.4194,
    }
    assert geofence["areaRadiusKm"] == 50.0
    assert geofence["count"] == 2
    assert [w["timestamp"] for w in geofence["waypoints"]] == [2.0, 3.0]


def test_render_result_is_indented_json(result):
    rendered = render_result(result)

    assert json.loads(rendered) == result_to_dict(result)
    assert '\n    "maxDistanceFromStart": {' in rendered


def test_write_result(tmp_path, result):
    path = tmp_path / "output.json"
    write_result(result, str(path))

    assert json.loads(path.read_text(encoding="utf-8")) == result_to_dict(result)


class TestGenerateOutputFilename:
    def test_strips_known_extension(self, tmp_path):
        filename = generate_output_filename(str(tmp_path / "waypoints.CSV"))
        assert filename == str(tmp_path / "waypoints analysis.json")
        assert os.path.exists(filename)

    def test_gpx_extension(self, tmp_path):
        filename = generate_output_filename(str(tmp_path / "ride.gpx"))
        assert filename == str(tmp_path / "ride analysis.json")

    def test_unknown_extension_is_kept(self, tmp_path):
        filename = generate_output_filename(str(tmp_path / "track.dat"))
        assert filename == str(tmp_path / "track.dat analysis.json")

    def test_numbered_variants(self, tmp_path):
        input_filename = str(tmp_path / "waypoints.csv")
        first = generate_output_filename(input_filename)
        second = generate_output_filename(input_filename)
        third = generate_output_filename(input_filename)

        assert first == str(tmp_path / "waypoints analysis.json")
        assert second == str(tmp_path / "waypoints analysis (1).json")
        assert third == str(tmp_path / "waypoints analysis (2).json")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ValueError):
            generate_output_filename(str(tmp_path / "missing" / "waypoints.csv"))
