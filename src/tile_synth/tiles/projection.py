"""Extent and geometry reprojection backed by pyproj."""

from functools import lru_cache

from pyproj import Transformer

Extent = tuple[float, float, float, float]


@lru_cache(maxsize=16)
def get_transformer(source: str, destination: str) -> Transformer:
    """Cached always-xy transformer between two CRS identifiers."""
    return Transformer.from_crs(source, destination, always_xy=True)


def transform_extent(extent: Extent, source: str, destination: str) -> Extent:
    """Reproject an extent by transforming its four corners.

    The result is the min/max of the transformed corners, so a zero-area
    extent stays zero-area.
    """
    min_x, min_y, max_x, max_y = extent
    if source == destination:
        return (min_x, min_y, max_x, max_y)
    xs, ys = get_transformer(source, destination).transform(
        [min_x, max_x, max_x, min_x],
        [min_y, min_y, max_y, max_y],
    )
    return (min(xs), min(ys), max(xs), max(ys))
