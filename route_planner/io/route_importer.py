"""RouteImporter - Load route files by extension.

Parsing runs synchronously via import_file(), or on a worker thread via
submit() so a large track does not block the caller. Either way the
result is a plain ImportedRoute; nothing here touches an editing session.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional, Union

from route_planner.errors import RouteImportError
from route_planner.io.geojson_io import parse_geojson
from route_planner.io.gpx_io import parse_gpx
from route_planner.io.imported_route import ImportedRoute

logger = logging.getLogger(__name__)

Parser = Callable[[Union[str, bytes]], ImportedRoute]


class RouteImporter:
    """Dispatch route files to the GPX or GeoJSON parser.

    Example:
        imported = RouteImporter.import_file("ride.gpx")
        editor.load_imported(imported)
    """

    PARSERS: dict[str, Parser] = {
        "gpx": parse_gpx,
        "geojson": parse_geojson,
        "json": parse_geojson,
    }

    @classmethod
    def supported_formats(cls) -> list[str]:
        return sorted(cls.PARSERS)

    @classmethod
    def format_for_path(cls, path: Union[str, Path]) -> str:
        """Return the parser key for a file path.

        Raises:
            RouteImportError: If the extension is not supported.
        """
        suffix = Path(path).suffix.lower().lstrip(".")
        if suffix not in cls.PARSERS:
            raise RouteImportError(
                f"Unsupported file type '.{suffix}' for {path}, expected one of {cls.supported_formats()}"
            )
        return suffix

    @classmethod
    def import_bytes(cls, data: Union[str, bytes], fmt: str) -> ImportedRoute:
        """Parse in-memory file contents.

        Args:
            data: File contents
            fmt: One of supported_formats()

        Raises:
            RouteImportError: If the format is unknown or the data is malformed.
        """
        parser = cls.PARSERS.get(fmt.lower())
        if parser is None:
            raise RouteImportError(f"Unsupported format '{fmt}', expected one of {cls.supported_formats()}")
        return parser(data)

    @classmethod
    def import_file(cls, path: Union[str, Path]) -> ImportedRoute:
        """Read and parse a route file.

        Raises:
            RouteImportError: If the file cannot be read, has an unsupported
                extension, or is malformed.
        """
        fmt = cls.format_for_path(path)
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise RouteImportError(f"Cannot read {path}: {exc}") from exc

        logger.info(f"Importing {fmt.upper()} file {path} ({len(data)} bytes)")
        imported = cls.import_bytes(data=data, fmt=fmt)
        if imported.decimated:
            logger.info(f"Simplified {path}: {imported.original_count} -> {len(imported.points)} points")
        return imported

    @classmethod
    def submit(cls, path: Union[str, Path], executor: Optional[ThreadPoolExecutor] = None) -> "Future[ImportedRoute]":
        """Parse a file on a worker thread.

        Args:
            path: Route file path
            executor: Executor to run on; a single-use one is created if None

        Returns:
            Future resolving to the ImportedRoute, or raising RouteImportError.
        """
        if executor is not None:
            return executor.submit(cls.import_file, path)

        own_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="route-import")
        future = own_executor.submit(cls.import_file, path)
        # Queued work still runs to completion after shutdown
        own_executor.shutdown(wait=False)
        return future
