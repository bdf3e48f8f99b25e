"""Route Planner - Measure and edit hand-drawn routes.

A route measurement and editing engine featuring:
- Geodesic segment and total distances (Haversine, spherical Earth)
- Loop closure with an explicit closing segment
- Evenly spaced distance markers along the path
- Bounded undo history over every edit
- Distance-based decimation of large imported GPS tracks
- GPX and GeoJSON import/export

Modules:
    core: Geodesic math, decimation and display formatting
    model: Data structures (Coordinate, RouteModel, RouteSnapshot, UndoHistory)
    generators: Distance marker generation
    editor: EditFacade and the point-selection state machine
    io: GPX/GeoJSON parsing and export, file import dispatch

Example:
    from route_planner.editor import EditFacade
    from route_planner.model import Coordinate
    from route_planner.io import RouteImporter
"""
