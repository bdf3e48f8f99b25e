"""Import, edit and export a route file end to end.

Covers the file boundary around an editing session: RouteImporter hands a
plain point list to the editor, edits go through EditFacade, and the result
is written back out as GPX or GeoJSON.
"""

import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from route_planner.constants import DecimationConfig
from route_planner.core.geo_calculator import GeoCalculator
from route_planner.editor.edit_facade import EditFacade
from route_planner.io.geojson_io import parse_geojson, to_geojson
from route_planner.io.gpx_io import parse_gpx, to_gpx
from route_planner.io.route_importer import RouteImporter
from route_planner.model.coordinate import Coordinate
from route_planner.model.saved_route import SavedRoute


def _write_dense_gpx(path: Path, count: int, step_m: float) -> None:
    """GPS-like track heading north with a point every step_m meters."""
    lat, lon = 59.0, 18.0
    trkpts = []
    for _ in range(count):
        trkpts.append(f'<trkpt lat="{lat:.7f}" lon="{lon:.7f}"></trkpt>')
        lon, lat = GeoCalculator.destination(lon=lon, lat=lat, bearing_deg=0.0, distance_m=step_m)
    path.write_text(
        '<gpx version="1.1" creator="logger" xmlns="http://www.topografix.com/GPX/1/1">'
        f"<trk><name>Long ride</name><trkseg>{''.join(trkpts)}</trkseg></trk></gpx>",
        encoding="utf-8",
    )


class TestImportEditExport:
    """File in, edits, file out."""

    def test_gpx_loop_round_trip(self, tmp_path: Path, editor: EditFacade, waypoints: list[Coordinate]) -> None:
        source = tmp_path / "loop.gpx"
        source.write_text(to_gpx(points=waypoints[:4], loop_closed=True, name="Loop"), encoding="utf-8")

        imported = RouteImporter.import_file(path=source)
        editor.load_imported(imported)
        assert editor.is_loop_closed() is True
        assert len(editor.current_points()) == 4

        editor.delete_point(index=3)
        editor.insert_midpoint(segment_index=2)  # closing segment
        editor.move_point(index=3, coordinate=waypoints[7])

        exported = parse_gpx(data=to_gpx(points=editor.current_points(), loop_closed=editor.is_loop_closed()))
        assert exported.loop_closed is True
        assert len(exported.points) == 4
        assert exported.points[3].distance_to(other=waypoints[7]) < 0.05

    def test_geojson_to_gpx(self, tmp_path: Path, editor: EditFacade, waypoints: list[Coordinate]) -> None:
        source = tmp_path / "route.geojson"
        source.write_text(to_geojson(points=waypoints[:3], loop_closed=False), encoding="utf-8")

        editor.load_imported(RouteImporter.import_file(path=source))
        editor.add_point(waypoints[3])
        editor.toggle_loop()

        gpx_route = parse_gpx(data=to_gpx(points=editor.current_points(), loop_closed=editor.is_loop_closed()))
        geojson_route = parse_geojson(
            data=to_geojson(points=editor.current_points(), loop_closed=editor.is_loop_closed())
        )
        assert gpx_route.loop_closed is geojson_route.loop_closed is True
        assert len(gpx_route.points) == len(geojson_route.points) == 4

    def test_large_track_is_decimated_then_editable(self, tmp_path: Path, editor: EditFacade) -> None:
        source = tmp_path / "long.gpx"
        count = DecimationConfig.POINT_THRESHOLD + 1000
        _write_dense_gpx(path=source, count=count, step_m=5.1)

        with ThreadPoolExecutor(max_workers=1) as executor:
            imported = RouteImporter.submit(path=source, executor=executor).result(timeout=30)

        assert imported.decimated is True
        assert imported.original_count == count
        assert imported.name == "Long ride"

        editor.load_imported(imported)
        assert len(editor.current_points()) == len(imported.points)
        # Decimation drops points but not length: total stays close to the raw track length
        assert editor.total_distance_meters() == pytest.approx((count - 1) * 5.1, rel=0.01)

        editor.generate_distance_markers(interval_m=1000.0)
        assert len(editor.distance_markers()) == int(editor.total_distance_meters() // 1000)

        assert editor.undo() is True
        assert editor.distance_markers() == []

    def test_saved_route_round_trip(self, editor: EditFacade, waypoints: list[Coordinate]) -> None:
        """A saved record survives JSON and loads back as an undoable edit."""
        editor.load_route(points=waypoints[:5], loop_closed=True)
        saved = editor.to_saved_route(name="Evening loop", description="mostly gravel")

        restored = SavedRoute.from_dict(data=json.loads(json.dumps(saved.to_dict())))
        other = EditFacade()
        other.add_point(waypoints[9])
        other.load_saved_route(restored)

        assert other.current_points() == waypoints[:5]
        assert other.is_loop_closed() is True
        assert other.total_distance_meters() == pytest.approx(restored.distance_m)

        other.undo()
        assert other.current_points() == [waypoints[9]]
