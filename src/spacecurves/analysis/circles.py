"""
Circle Aggregation
==================
Filter -> sort -> parallel reduce over a heterogeneous curve collection.

The reduction splits the index range into contiguous chunks, one per worker.
Each worker sums its chunk into a private partial; the partials are combined
in chunk order after every worker has finished, so no accumulator is shared
between threads and the result does not depend on scheduling.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, cast

from spacecurves.config import DEFAULT_NUM_WORKERS
from spacecurves.model.geometry_primitives import Curve, CurveKind, Circle

logger = logging.getLogger(__name__)


@dataclass
class CircleSummary:
    """Sorted circle subview and the sum of its radii."""
    circles: List[Circle] = field(default_factory=list)
    radius_sum: float = 0.0


def filter_circles(curves: Sequence[Curve]) -> List[Circle]:
    """
    Selects the Circle entries of a collection, keeping their original order.

    The returned list references the same objects as `curves`.
    """
    circles: List[Circle] = []
    for curve in curves:
        if curve.kind is CurveKind.CIRCLE:
            circles.append(cast(Circle, curve))
    return circles


def sort_by_radius(circles: List[Circle]) -> List[Circle]:
    """Sorts the subview in place by ascending radius and returns it."""
    circles.sort(key=lambda circle: circle.radius())
    return circles


def partition_ranges(n_items: int, n_chunks: int) -> List[Tuple[int, int]]:
    """
    Splits [0, n_items) into at most `n_chunks` contiguous, non-empty ranges.

    The first `n_items % n_chunks` ranges are one element longer.
    """
    if n_chunks < 1:
        raise ValueError(f"At least one chunk is required, got {n_chunks}.")
    n_chunks = min(n_chunks, n_items)
    if n_chunks == 0:
        return []

    base, extra = divmod(n_items, n_chunks)
    ranges = []
    start = 0
    for i in range(n_chunks):
        stop = start + base + (1 if i < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


def _partial_radius_sum(circles: Sequence[Circle], start: int, stop: int) -> float:
    partial = 0.0
    for i in range(start, stop):
        partial += circles[i].radius()
    return partial


def parallel_radius_sum(circles: Sequence[Circle], num_workers: int = DEFAULT_NUM_WORKERS) -> float:
    """
    Sums the radii of `circles` on a pool of `num_workers` threads.

    Args:
        circles: Read-only sequence of circles.
        num_workers: Size of the thread pool.

    Returns:
        Total of `radius()` over all circles, 0.0 for an empty sequence.
    """
    if num_workers < 1:
        raise ValueError(f"At least one worker is required, got {num_workers}.")

    ranges = partition_ranges(len(circles), num_workers)
    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        futures = [executor.submit(_partial_radius_sum, circles, start, stop) for start, stop in ranges]
        # Combined in partition order, after the pool has joined every task
        partials = [future.result() for future in futures]

    total = 0.0
    for partial in partials:
        total += partial
    logger.debug(f"Reduced {len(circles)} radii over {len(ranges)} partitions: {partials}")
    return total


def aggregate_circles(curves: Sequence[Curve], num_workers: int = DEFAULT_NUM_WORKERS) -> CircleSummary:
    """Runs filter, sort and parallel reduction over a curve collection."""
    circles = sort_by_radius(filter_circles(curves))
    logger.info(f"Selected {len(circles)} circles out of {len(curves)} curves.")
    radius_sum = parallel_radius_sum(circles, num_workers=num_workers)
    return CircleSummary(circles=circles, radius_sum=radius_sum)
