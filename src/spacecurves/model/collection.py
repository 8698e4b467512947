"""
Curve Collection Builder
========================
Generates a heterogeneous list of curves with random variants and parameters.

The random generator is passed in explicitly, so a seeded
`numpy.random.Generator` gives a reproducible collection.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from spacecurves.config import DEFAULT_COLLECTION_SIZE, PARAMETER_RANGE, STEP_RANGE
from spacecurves.model.geometry_primitives import Curve, CurveKind, Circle, Ellipse, Helix

logger = logging.getLogger(__name__)

# Order of the uniform discrete draw
CURVE_KINDS: Tuple[CurveKind, ...] = (CurveKind.CIRCLE, CurveKind.ELLIPSE, CurveKind.HELIX)


def random_curve(
    rng: np.random.Generator,
    parameter_range: Tuple[float, float] = PARAMETER_RANGE,
    step_range: Tuple[float, float] = STEP_RANGE
) -> Curve:
    """Draws one curve with a uniformly chosen variant and uniform parameters."""
    low, high = parameter_range
    kind = CURVE_KINDS[int(rng.integers(0, len(CURVE_KINDS)))]

    if kind is CurveKind.CIRCLE:
        return Circle(rng.uniform(low, high))
    if kind is CurveKind.ELLIPSE:
        return Ellipse(rng.uniform(low, high), rng.uniform(low, high))
    return Helix(rng.uniform(low, high), rng.uniform(*step_range))


def build_curves(
    size: int = DEFAULT_COLLECTION_SIZE,
    rng: Optional[np.random.Generator] = None,
    parameter_range: Tuple[float, float] = PARAMETER_RANGE,
    step_range: Tuple[float, float] = STEP_RANGE
) -> List[Curve]:
    """
    Builds a collection of randomly generated curves.

    Args:
        size: Number of curves to generate.
        rng: Random generator. A fresh entropy-seeded one is used if omitted.
        parameter_range: (low, high) range of radius-like parameters.
        step_range: (low, high) range of the helix step.

    Returns:
        List of curves in generation order.
    """
    if size < 0:
        raise ValueError(f"Collection size must be non-negative, got {size}.")
    if rng is None:
        rng = np.random.default_rng()

    curves = [random_curve(rng, parameter_range, step_range) for _ in range(size)]
    logger.debug(f"Built {len(curves)} curves: {[c.kind.value for c in curves]}")
    return curves
