"""Configuration settings for Pathbool."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class FillRule(str, Enum):
    """Rule deciding which points a set of contours encloses."""

    EVEN_ODD = "even_odd"
    NONZERO = "nonzero"


class IntersectionConfig(BaseModel):
    """Configuration for the subdivision intersection search.

    The defaults target coordinates in the range of a few hundred to a few
    thousand units, which is what drawing canvases and font outlines use.
    """

    convergence_threshold: float = Field(
        default=1e-4,
        ge=1e-9,
        le=0.5,
        description="Parameter window width below which a window pair is reported",
    )
    max_depth: int = Field(
        default=32,
        ge=1,
        le=64,
        description="Hard cap on subdivision depth",
    )
    min_hull_extent: float = Field(
        default=1e-4,
        gt=0.0,
        le=1.0,
        description="Minimum width and height of a bounding hull",
    )
    max_candidates: int | None = Field(
        default=50_000,
        ge=1,
        description="Stop searching after this many raw candidates (None = unbounded)",
    )
    max_pair_candidates: int = Field(
        default=1024,
        ge=1,
        description="Stop searching one curve pair after this many raw candidates",
    )
    param_resolution: float = Field(
        default=0.01,
        ge=1e-6,
        le=0.25,
        description="Bucket size used to collapse near-duplicate parameters",
    )
    point_resolution: float = Field(
        default=0.1,
        gt=0.0,
        le=10.0,
        description="Grid cell size used to collapse near-duplicate intersection points",
    )


class ClassificationConfig(BaseModel):
    """Configuration for inside/outside classification of segments."""

    fill_rule: FillRule = Field(
        default=FillRule.EVEN_ODD,
        description="Fill rule used for point-in-path tests",
    )
    flatten_tolerance: float = Field(
        default=0.01,
        ge=1e-4,
        le=10.0,
        description="Maximum deviation of flattened polygons from the true curves",
    )
    boundary_tolerance: float = Field(
        default=0.05,
        ge=1e-4,
        le=10.0,
        description="Distance below which a segment midpoint lies on the other boundary",
    )
    probe_offset: float = Field(
        default=0.25,
        ge=1e-3,
        le=50.0,
        description="Offset along the segment normal used to probe shared boundaries",
    )


class StitchConfig(BaseModel):
    """Configuration for contour reconstruction."""

    tolerance: float = Field(
        default=1.0,
        ge=1e-6,
        le=100.0,
        description="Maximum distance between end points that are stitched together",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PathboolSettings(BaseModel):
    """Main application settings."""

    intersection: IntersectionConfig = Field(default_factory=IntersectionConfig)
    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)
    stitch: StitchConfig = Field(default_factory=StitchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathboolSettings:
    """Get default application settings."""
    return PathboolSettings()
