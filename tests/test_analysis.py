import pytest

from route_analyzer.analysis import (
    analyze,
    derive_hotspot_radius,
    farthest_from_start,
)
from route_analyzer.config import AnalysisParameters
from route_analyzer.exceptions import (
    EmptyTrack,
    InvalidEarthRadius,
    InvalidRadius,
    MissingParameters,
)
from route_analyzer.geometry import Waypoint
from route_analyzer.output import render_result


@pytest.fixture
def waypoints():
    return [
        Waypoint(1.0, 37.7749, -122.4194),  # San Francisco
        Waypoint(2.0, 34.0522, -118.2437),  # Los Angeles
        Waypoint(3.0, 40.7128, -74.0060),  # New York
    ]


@pytest.fixture
def params():
    return AnalysisParameters(
        earth_radius_km=6371.0,
        geofence_center_latitude=37.7749,
        geofence_center_longitude=-122.4194,
        geofence_radius_km=50.0,
        hotspot_radius_km=10.0,
    )


class TestFarthestFromStart:
    def test_city_scenario(self, waypoints, params):
        result = farthest_from_start(waypoints, params)
        assert result.waypoint == waypoints[2]
        assert result.distance_km > 2000

    def test_single_waypoint(self, params):
        only = Waypoint(1.0, 37.7749, -122.4194)
        result = farthest_from_start([only], params)
        assert result.waypoint == only
        assert result.distance_km == 0.0

    def test_nearby_points(self, params):
        track = [Waypoint(1.0, 37.7749, -122.4194), Waypoint(2.0, 37.7750, -122.4195)]
        result = farthest_from_start(track, params)
        assert result.waypoint == track[1]
        assert result.distance_km < 1.0

    def test_tie_keeps_first_point(self, params):
        track = [
            Waypoint(1.0, 0.0, 0.0),
            Waypoint(2.0, 0.0, 1.0),
            Waypoint(3.0, 0.0, -1.0),
            Waypoint(4.0, 0.0, 1.0),
        ]
        result = farthest_from_start(track, params)
        assert result.waypoint.timestamp == 2.0

    def test_all_points_at_start(self, params):
        track = [Waypoint(float(i), 45.0, 7.0) for i in range(3)]
        result = farthest_from_start(track, params)
        assert result.waypoint == track[0]
        assert result.distance_km == 0.0

    def test_removing_non_farthest_point_keeps_result(self, waypoints, params):
        before = farthest_from_start(waypoints, params)
        after = farthest_from_start([waypoints[0], waypoints[2]], params)
        assert before == after

    def test_empty_track_raises(self, params):
        with pytest.raises(EmptyTrack):
            farthest_from_start([], params)


class TestDeriveHotspotRadius:
    def test_explicit_radius_wins(self, params):
        assert derive_hotspot_radius(params, 5000.0) == 10.0

    def test_short_track(self, params):
        implicit = AnalysisParameters(6371.0, 0.0, 0.0, 1.0)
        assert derive_hotspot_radius(implicit, 0.5) == 0.1
        assert derive_hotspot_radius(implicit, 0.0) == 0.1

    def test_long_track(self):
        implicit = AnalysisParameters(6371.0, 0.0, 0.0, 1.0)
        assert derive_hotspot_radius(implicit, 1.0) == pytest.approx(0.1)
        assert derive_hotspot_radius(implicit, 250.0) == pytest.approx(25.0)


class TestAnalyze:
    def test_city_scenario(self, waypoints, params):
        result = analyze(waypoints, params)

        assert result.farthest.waypoint == waypoints[2]
        assert result.hotspot_radius_km == 10.0
        assert result.hotspot_resolution == 8
        assert result.hotspot.cell_count == 1
        assert result.hotspot.members == [waypoints[0]]
        assert result.geofence.outside == [waypoints[1], waypoints[2]]
        assert result.geofence_center == Waypoint(0.0, 37.7749, -122.4194)
        assert result.geofence_radius_km == 50.0

    def test_derived_radius_from_farthest_distance(self, waypoints):
        implicit = AnalysisParameters(6371.0, 37.7749, -122.4194, 50.0)
        result = analyze(waypoints, implicit)

        assert result.hotspot_radius_km == pytest.approx(
            result.farthest.distance_km / 10
        )
        # ~4130 km / 10 falls in the 224.2-597.5 km bracket
        assert result.hotspot_resolution == 4

    def test_single_point_track_uses_short_track_radius(self):
        implicit = AnalysisParameters(6371.0, 0.0, 0.0, 1.0)
        result = analyze([Waypoint(1.0, 45.0, 7.0)], implicit)

        assert result.hotspot_radius_km == 0.1
        assert result.hotspot_resolution == 12
        assert result.hotspot.cell_count == 1

    def test_empty_track_raises(self, params):
        with pytest.raises(EmptyTrack):
            analyze([], params)

    def test_missing_parameters_raises(self, waypoints):
        with pytest.raises(MissingParameters):
            analyze(waypoints, None)

    def test_too_small_hotspot_radius_propagates(self, waypoints):
        tiny = AnalysisParameters(6371.0, 0.0, 0.0, 1.0, hotspot_radius_km=0.001)
        with pytest.raises(InvalidRadius):
            analyze(waypoints, tiny)

    def test_invalid_earth_radius_propagates(self, waypoints):
        broken = AnalysisParameters(0.0, 0.0, 0.0, 1.0, hotspot_radius_km=1.0)
        with pytest.raises(InvalidEarthRadius):
            analyze(waypoints, broken)

    def test_repeated_runs_render_identically(self, waypoints, params):
        assert render_result(analyze(waypoints, params)) == render_result(
            analyze(waypoints, params)
        )
