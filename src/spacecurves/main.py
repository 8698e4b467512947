"""
Application Entry
=================
Wires the pipeline together: build -> report -> aggregate -> print total.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Creates the random generator and the curve collection.
3. Passes the collection to the reporter and to the circle aggregator.
"""
import logging
from typing import Optional, TextIO

import numpy as np

from spacecurves.analysis.circles import CircleSummary, aggregate_circles
from spacecurves.config import PipelineConfig
from spacecurves.logging_config import setup_logging
from spacecurves.model.collection import build_curves
from spacecurves.report import report_curves, report_radius_sum

logger = logging.getLogger(__name__)


def run(config: PipelineConfig, stream: Optional[TextIO] = None) -> CircleSummary:
    """Runs one pass of the pipeline and returns the circle summary."""
    rng = np.random.default_rng(config.seed)
    curves = build_curves(
        size=config.size,
        rng=rng,
        parameter_range=config.parameter_range,
        step_range=config.step_range
    )

    report_curves(curves, t=config.t, t_label=config.t_label, stream=stream)

    summary = aggregate_circles(curves, num_workers=config.num_workers)
    report_radius_sum(summary.radius_sum, stream=stream)
    return summary


def main(config: Optional[PipelineConfig] = None) -> None:
    config = config or PipelineConfig()

    # Use logging.DEBUG to see the partition sums during development
    setup_logging(level=config.log_level, log_file=config.log_file)
    logger.info(f"Running with {config}")

    run(config)


if __name__ == "__main__":
    main()
