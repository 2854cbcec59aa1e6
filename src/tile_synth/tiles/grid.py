"""XYZ tile grid over the Web Mercator world extent."""

from tile_synth.geometry import TileCoord

# Half the EPSG:3857 world width in meters
HALF_WORLD = 20037508.342789244

WEB_MERCATOR_EXTENT = (-HALF_WORLD, -HALF_WORLD, HALF_WORLD, HALF_WORLD)

Extent = tuple[float, float, float, float]


class TileGrid:
    """Maps tile coordinates to planar extents.

    Rows are counted from the top edge of the extent, columns from the
    left. Each zoom level halves the resolution of the previous one.
    """

    def __init__(
        self,
        extent: Extent = WEB_MERCATOR_EXTENT,
        max_zoom: int = 15,
        tile_size: int = 256,
    ) -> None:
        if max_zoom < 0:
            raise ValueError(f"max_zoom must be non-negative, got {max_zoom}")
        if tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {tile_size}")
        self.extent = extent
        self.max_zoom = max_zoom
        self.tile_size = tile_size
        self.origin = (extent[0], extent[3])
        size = max(extent[2] - extent[0], extent[3] - extent[1])
        self.resolutions = [size / tile_size / 2**z for z in range(max_zoom + 1)]

    def get_resolution(self, z: int) -> float:
        return self.resolutions[z]

    def validate(self, tile_coord: TileCoord) -> None:
        """Raise ValueError if the coordinate is outside the grid."""
        if tile_coord.z > self.max_zoom:
            raise ValueError(f"Zoom {tile_coord.z} exceeds max zoom {self.max_zoom}")
        span = 2**tile_coord.z
        if tile_coord.x >= span or tile_coord.y >= span:
            raise ValueError(f"Tile {tile_coord} is outside the grid at zoom {tile_coord.z}")

    def get_tile_coord_extent(self, tile_coord: TileCoord) -> Extent:
        """Planar (minx, miny, maxx, maxy) covered by the tile."""
        self.validate(tile_coord)
        tile_span = self.tile_size * self.get_resolution(tile_coord.z)
        min_x = self.origin[0] + tile_coord.x * tile_span
        max_y = self.origin[1] - tile_coord.y * tile_span
        return (min_x, max_y - tile_span, min_x + tile_span, max_y)


def create_xyz_grid(max_zoom: int = 15, tile_size: int = 256) -> TileGrid:
    """Standard XYZ grid covering the whole Web Mercator world."""
    return TileGrid(WEB_MERCATOR_EXTENT, max_zoom=max_zoom, tile_size=tile_size)
