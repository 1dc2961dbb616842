"""Core algorithms for pathbool.

This module contains the stages of a boolean operation:

- Decomposition of draw instructions into curves
- Curve-curve intersection by recursive subdivision
- Parameter and point deduplication
- Curve splitting at intersection parameters
- Inside/outside classification of split segments
- Segment selection and contour reconstruction

All stages are:
- Synchronous and single-threaded
- Pure (inputs are never mutated)
- Bounded (depth cap and candidate ceiling on the search)

Key functions:
- decompose: Turn PathElements into a Path
- split_curve: De Casteljau split at several parameters
- deduplicate_parameters: Collapse raw candidates into split sets
- select_segments: Apply an operation's selection table

Key classes:
- IntersectionFinder: Subdivision search between curves and paths
- SegmentClassifier: Midpoint classification under a fill rule
- ContourReconstructor: Stitches kept curves into contours
- BooleanProcessor: Runs the whole pipeline
"""

from pathbool.core.boolean import select_contours, select_segments, selection_rule
from pathbool.core.classifier import SegmentClassifier
from pathbool.core.decomposer import decompose
from pathbool.core.dedup import (
    SplitParameters,
    cluster_parameters,
    deduplicate_parameters,
    unique_points,
)
from pathbool.core.geometry import (
    PathRegion,
    path_area,
    point_in_polygon,
    signed_area,
    winding_number,
)
from pathbool.core.intersection import (
    IntersectionCandidate,
    IntersectionFinder,
    IntersectionSet,
)
from pathbool.core.processor import (
    BooleanProcessor,
    boolean_operation,
    difference,
    intersect,
    intersection_points,
    union,
    xor,
)
from pathbool.core.reconstructor import ContourReconstructor, ReconstructionResult
from pathbool.core.splitter import split_curve, split_path

__all__ = [
    # Processor
    "BooleanProcessor",
    # Pipeline classes
    "ContourReconstructor",
    "IntersectionCandidate",
    "IntersectionFinder",
    "IntersectionSet",
    "PathRegion",
    "ReconstructionResult",
    "SegmentClassifier",
    "SplitParameters",
    # Functions
    "boolean_operation",
    "cluster_parameters",
    "decompose",
    "deduplicate_parameters",
    "difference",
    "intersect",
    "intersection_points",
    "path_area",
    "point_in_polygon",
    "select_contours",
    "select_segments",
    "selection_rule",
    "signed_area",
    "split_curve",
    "split_path",
    "union",
    "unique_points",
    "winding_number",
    "xor",
]
