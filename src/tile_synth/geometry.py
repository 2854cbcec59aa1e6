"""Core geometry schemas shared by the synthesizer and the tile layer."""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BoundingBox(BaseModel):
    """An axis-aligned box in geographic degrees.

    Zero-area boxes are legal; inverted or non-finite boxes are not.
    """

    model_config = ConfigDict(allow_inf_nan=False, frozen=True)

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    @model_validator(mode="after")
    def check_ordering(self) -> "BoundingBox":
        if self.min_lon > self.max_lon:
            raise ValueError(f"min_lon {self.min_lon} is greater than max_lon {self.max_lon}")
        if self.min_lat > self.max_lat:
            raise ValueError(f"min_lat {self.min_lat} is greater than max_lat {self.max_lat}")
        return self

    @classmethod
    def from_extent(cls, extent: Sequence[float]) -> "BoundingBox":
        """Build from a [min_lon, min_lat, max_lon, max_lat] sequence."""
        if len(extent) != 4:
            raise ValueError(f"Extent must have 4 values, got {len(extent)}")
        min_lon, min_lat, max_lon, max_lat = extent
        return cls(min_lon=min_lon, min_lat=min_lat, max_lon=max_lon, max_lat=max_lat)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_lon, self.min_lat, self.max_lon, self.max_lat)

    @property
    def width(self) -> float:
        return self.max_lon - self.min_lon

    @property
    def height(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def center_lon(self) -> float:
        return self.min_lon + self.width / 2

    @property
    def center_lat(self) -> float:
        return self.min_lat + self.height / 2


class TileCoord(BaseModel):
    """A (zoom, column, row) tile coordinate in the XYZ scheme."""

    model_config = ConfigDict(frozen=True)

    z: int = Field(..., ge=0, description="Zoom level")
    x: int = Field(..., ge=0, description="Tile column")
    y: int = Field(..., ge=0, description="Tile row, counted from the top")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.z, self.x, self.y)

    def __str__(self) -> str:
        return f"{self.z}/{self.x}/{self.y}"
