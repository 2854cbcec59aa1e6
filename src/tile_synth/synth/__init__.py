"""Synthetic feature generation for exercising tile pipelines."""

from tile_synth.synth.generator import (
    GeometrySynthesizer,
    compute_grid_spacing,
    make_data,
)
from tile_synth.synth.types import (
    CURVE_COMPLEXITY,
    PERIOD_COUNT,
    Feature,
    FeatureCollection,
    FeatureKind,
    GenerationParameters,
)

__all__ = [
    "CURVE_COMPLEXITY",
    "PERIOD_COUNT",
    "Feature",
    "FeatureCollection",
    "FeatureKind",
    "GenerationParameters",
    "GeometrySynthesizer",
    "compute_grid_spacing",
    "make_data",
]
