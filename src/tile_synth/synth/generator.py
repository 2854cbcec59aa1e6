"""Procedural synthesis of test features inside a bounding box.

Layout of a generated collection, in emission order:

1. Regular polygons on a grid in the bottom-left quadrant of the box.
2. One boundary line tracing the box corners.
3. Points on a grid right of the vertical centre line, reusing the
   polygon grid's latitude rows.
4. ``count_lines`` wavy lines stacked above the horizontal centre line.

Only polygon radii and colours are random; every count, ordering and
vertex position is fully determined by the parameters.
"""

import logging
import math
import random
import time
from collections.abc import Iterator

import numpy as np

from tile_synth.geometry import BoundingBox
from tile_synth.synth.types import (
    CURVE_COMPLEXITY,
    PERIOD_COUNT,
    Feature,
    FeatureCollection,
    FeatureKind,
    GenerationParameters,
)

logger = logging.getLogger(__name__)

Coordinate = list[float]


def random_color(rng: random.Random) -> str:
    """Return a random ``#rrggbb`` colour."""
    return f"#{rng.randrange(0x1000000):06x}"


def compute_grid_spacing(bbox: BoundingBox, count_points: int) -> float:
    """Cell size of the polygon/point grid.

    Zero only when the box has neither width nor height.
    """
    return (bbox.width + bbox.height) / 4 / (math.ceil(math.sqrt(count_points)) + 1)


def _grid_steps(start: float, stop: float, step: float) -> Iterator[float]:
    """Yield start, start + step, ... while below stop.

    The accumulator is advanced by repeated addition. If an addition no
    longer changes it (step below float resolution at this magnitude) the
    sequence ends.
    """
    value = start
    while value < stop:
        yield value
        advanced = value + step
        if advanced <= value:
            logger.warning(
                "Grid step %g does not advance %r; truncating grid", step, value
            )
            return
        value = advanced


def regular_polygon_ring(
    lon: float, lat: float, radius: float, num_vertices: int
) -> list[Coordinate]:
    """Closed ring of a regular polygon centred on (lon, lat).

    Vertices sit at equal angular steps starting at angle 0; the first
    vertex is repeated at the end.
    """
    angles = np.arange(num_vertices) * (2 * math.pi / num_vertices)
    ring = np.column_stack(
        (lon + radius * np.cos(angles), lat + radius * np.sin(angles))
    ).tolist()
    ring.append(list(ring[0]))
    return ring


def boundary_ring(bbox: BoundingBox) -> list[Coordinate]:
    """The box corners in fixed order, first corner repeated last."""
    return [
        [bbox.min_lon, bbox.min_lat],
        [bbox.max_lon, bbox.min_lat],
        [bbox.max_lon, bbox.max_lat],
        [bbox.min_lon, bbox.max_lat],
        [bbox.min_lon, bbox.min_lat],
    ]


def wavy_line_coordinates(
    bbox: BoundingBox,
    grid_spacing: float,
    line_index: int,
    latitude_spacing: float,
) -> list[Coordinate]:
    """Sample one cosine wave of PERIOD_COUNT periods across the box.

    Returns PERIOD_COUNT * CURVE_COMPLEXITY coordinates ordered by period,
    then by sample within the period.
    """
    period_width = (bbox.width - grid_spacing * 2) / PERIOD_COUNT
    period_height = bbox.height / 20
    start_lat = bbox.center_lat + period_height + line_index * latitude_spacing

    ratios = np.arange(CURVE_COMPLEXITY) / CURVE_COMPLEXITY
    period_starts = bbox.min_lon + np.arange(PERIOD_COUNT) * period_width + grid_spacing

    lons = (period_starts[:, np.newaxis] + ratios[np.newaxis, :] * period_width).ravel()
    offsets = np.cos(ratios * math.pi * 2) * period_height * 0.5
    lats = start_lat + np.tile(offsets, PERIOD_COUNT)

    return np.column_stack((lons, lats)).tolist()


def latitude_spacing_for(bbox: BoundingBox, count_lines: int) -> float:
    """Vertical distance between consecutive wavy lines (0 when there are none)."""
    if count_lines == 0:
        return 0.0
    period_height = bbox.height / 20
    return (bbox.height / 2 - period_height * 2) / count_lines


class GeometrySynthesizer:
    """Synthesizes a feature collection for one bounding box."""

    def __init__(
        self,
        params: GenerationParameters,
        rng: random.Random | None = None,
    ) -> None:
        self.params = params
        self.rng = rng or random.Random()
        self.grid_spacing = compute_grid_spacing(params.bbox, params.count_points)

    def generate(self) -> FeatureCollection:
        """Generate all features in emission order."""
        t_start = time.perf_counter()
        bbox = self.params.bbox
        collection = FeatureCollection()

        if self.grid_spacing <= 0:
            # Zero-area box: the grid would never advance
            collection.features.append(self._boundary_feature())
            logger.debug("Degenerate bbox %s; emitted boundary only", bbox.as_tuple())
            return collection

        collection.features.extend(self._grid_polygons())
        collection.features.append(self._boundary_feature())
        collection.features.extend(self._grid_points())
        collection.features.extend(self._wavy_lines())

        logger.debug(
            "Synthesized %d features (%d polygons, %d points, %d lines) in %.1fms",
            len(collection),
            collection.count(FeatureKind.GRID_POLYGON),
            collection.count(FeatureKind.GRID_POINT),
            collection.count(FeatureKind.WAVY_LINE),
            (time.perf_counter() - t_start) * 1000,
        )
        return collection

    def _latitude_rows(self) -> Iterator[float]:
        bbox = self.params.bbox
        return _grid_steps(bbox.min_lat + self.grid_spacing, bbox.center_lat, self.grid_spacing)

    def _grid_polygons(self) -> list[Feature]:
        bbox = self.params.bbox
        gs = self.grid_spacing
        features = []
        for lon in _grid_steps(bbox.min_lon + gs, bbox.center_lon, gs):
            for lat in self._latitude_rows():
                radius = (0.3 + self.rng.random() * 0.2) * gs
                ring = regular_polygon_ring(lon, lat, radius, self.params.num_vertices)
                features.append(
                    Feature(
                        kind=FeatureKind.GRID_POLYGON,
                        geometry={"type": "Polygon", "coordinates": [ring]},
                        properties={"color": random_color(self.rng)},
                    )
                )
        return features

    def _boundary_feature(self) -> Feature:
        return Feature(
            kind=FeatureKind.BOUNDARY,
            geometry={"type": "LineString", "coordinates": boundary_ring(self.params.bbox)},
            properties={"color": random_color(self.rng)},
        )

    def _grid_points(self) -> list[Feature]:
        # Same latitude rows as the polygons, right half of the box.
        bbox = self.params.bbox
        gs = self.grid_spacing
        features = []
        for lon in _grid_steps(bbox.center_lon + gs, bbox.max_lon, gs):
            for lat in self._latitude_rows():
                features.append(
                    Feature(
                        kind=FeatureKind.GRID_POINT,
                        geometry={"type": "Point", "coordinates": [lon, lat]},
                        properties={"color": random_color(self.rng)},
                    )
                )
        return features

    def _wavy_lines(self) -> list[Feature]:
        bbox = self.params.bbox
        count = self.params.count_lines
        spacing = latitude_spacing_for(bbox, count)
        return [
            Feature(
                kind=FeatureKind.WAVY_LINE,
                geometry={
                    "type": "LineString",
                    "coordinates": wavy_line_coordinates(bbox, self.grid_spacing, j, spacing),
                },
                properties={"color": random_color(self.rng)},
            )
            for j in range(count)
        ]


def make_data(
    params: GenerationParameters,
    rng: random.Random | None = None,
) -> FeatureCollection:
    """Synthesize the feature collection for one set of parameters.

    Args:
        params: Validated generation parameters.
        rng: Random source for radii and colours. Pass a seeded instance
            for reproducible output; each call should own its instance.

    Returns:
        The generated FeatureCollection.
    """
    return GeometrySynthesizer(params, rng).generate()
