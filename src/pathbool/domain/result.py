"""Result types returned by boolean operations.

Instead of printing progress while it runs, the pipeline returns a structured
Diagnostics record alongside the output path. Callers decide whether to log it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pathbool.domain.path import Path


class BooleanOperation(str, Enum):
    """Supported boolean set operations."""

    UNION = "union"
    INTERSECT = "intersect"
    DIFFERENCE = "difference"
    XOR = "xor"


@dataclass
class Diagnostics:
    """Statistics and quality flags from one boolean operation.

    Attributes:
        operation: Operation that produced the result
        candidate_count: Raw intersection candidates from the subdivision search
        coincident_pairs: Curve pairs skipped because they coincide
        nodes_visited: Window pairs examined by the subdivision search
        depth_capped: True if any branch hit the depth cap
        truncated: True if the search stopped at the candidate ceiling
        overlap_pairs: Curve pairs cut off at the per-pair candidate cap, which
            happens when two curves share a stretch without coinciding
        split_count_a: Split parameters applied to path A
        split_count_b: Split parameters applied to path B
        segment_count_a: Segments produced from path A
        segment_count_b: Segments produced from path B
        selected_count: Segments kept by the operation
        contour_count: Contours in the output path
        open_contour_count: Output contours the stitcher could not close
        discarded_fragments: Open fragments no larger than the stitch tolerance
            that were dropped during stitching
        used_containment_shortcut: True if zero crossings allowed whole-contour
            selection by one containment check
        elapsed_ms: Wall-clock duration in milliseconds
    """

    operation: BooleanOperation
    candidate_count: int = 0
    coincident_pairs: int = 0
    nodes_visited: int = 0
    depth_capped: bool = False
    truncated: bool = False
    overlap_pairs: int = 0
    split_count_a: int = 0
    split_count_b: int = 0
    segment_count_a: int = 0
    segment_count_b: int = 0
    selected_count: int = 0
    contour_count: int = 0
    open_contour_count: int = 0
    discarded_fragments: int = 0
    used_containment_shortcut: bool = False
    elapsed_ms: float = 0.0

    @property
    def degraded(self) -> bool:
        """True if the output is a best-effort partial result."""
        return (
            self.open_contour_count > 0
            or self.truncated
            or self.overlap_pairs > 0
            or self.discarded_fragments > 0
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (for structured logging)."""
        return {
            "operation": self.operation.value,
            "candidate_count": self.candidate_count,
            "coincident_pairs": self.coincident_pairs,
            "nodes_visited": self.nodes_visited,
            "depth_capped": self.depth_capped,
            "truncated": self.truncated,
            "overlap_pairs": self.overlap_pairs,
            "split_count_a": self.split_count_a,
            "split_count_b": self.split_count_b,
            "segment_count_a": self.segment_count_a,
            "segment_count_b": self.segment_count_b,
            "selected_count": self.selected_count,
            "contour_count": self.contour_count,
            "open_contour_count": self.open_contour_count,
            "discarded_fragments": self.discarded_fragments,
            "used_containment_shortcut": self.used_containment_shortcut,
            "elapsed_ms": round(self.elapsed_ms, 3),
            "degraded": self.degraded,
        }


@dataclass
class BooleanResult:
    """Output path of a boolean operation plus its diagnostics.

    Attributes:
        path: The resulting path
        diagnostics: Statistics and quality flags
    """

    path: Path
    diagnostics: Diagnostics = field(repr=False)

    @property
    def degraded(self) -> bool:
        return self.diagnostics.degraded
