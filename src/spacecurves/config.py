"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants that drive a run.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (collection size, parameter ranges,
   worker count) scattered throughout the code.
2. Testing: `PipelineConfig` bundles the values so a run can be reproduced
   with a fixed seed and a different size or worker count.

Exports:
    DEFAULT_COLLECTION_SIZE (int): Number of curves generated per run.
    PARAMETER_RANGE (tuple): Range of radius-like parameters.
    STEP_RANGE (tuple): Range of the helix step.
    DEFAULT_NUM_WORKERS (int): Threads used by the radius reduction.
    EVALUATION_PARAMETER (float): Parameter at which curves are reported.
    PipelineConfig: Per-run settings.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple


# Global Constants
DEFAULT_COLLECTION_SIZE: int = 10
PARAMETER_RANGE: Tuple[float, float] = (0.1, 100.0)
STEP_RANGE: Tuple[float, float] = (0.1, 100.0)
DEFAULT_NUM_WORKERS: int = 4
EVALUATION_PARAMETER: float = math.pi / 4
EVALUATION_PARAMETER_LABEL: str = "PI / 4"


def parameter_label(t: float) -> str:
    """Label printed in the report for the evaluation parameter."""
    if math.isclose(t, EVALUATION_PARAMETER):
        return EVALUATION_PARAMETER_LABEL
    return f"{t:g}"


@dataclass
class PipelineConfig:
    size: int = DEFAULT_COLLECTION_SIZE
    num_workers: int = DEFAULT_NUM_WORKERS
    parameter_range: Tuple[float, float] = PARAMETER_RANGE
    step_range: Tuple[float, float] = STEP_RANGE
    t: float = EVALUATION_PARAMETER
    t_label: Optional[str] = None  # None -> derived from t
    seed: Optional[int] = None  # None -> fresh entropy on every run
    log_level: int = logging.WARNING
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"Collection size must be non-negative, got {self.size}.")
        if self.num_workers < 1:
            raise ValueError(f"At least one worker is required, got {self.num_workers}.")
        for name, (low, high) in (("parameter_range", self.parameter_range), ("step_range", self.step_range)):
            if not low < high:
                raise ValueError(f"{name} must satisfy low < high, got ({low}, {high}).")
        if self.t_label is None:
            self.t_label = parameter_label(self.t)
