"""Console reporting of curves and the circle radius total."""
import sys
from typing import Optional, Sequence, TextIO

from spacecurves.config import EVALUATION_PARAMETER, parameter_label
from spacecurves.model.geometry_primitives import Curve


def report_curves(
    curves: Sequence[Curve],
    t: float = EVALUATION_PARAMETER,
    t_label: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> None:
    """Writes description, point and derivative at `t` for every curve, in order."""
    if t_label is None:
        t_label = parameter_label(t)
    out = stream if stream is not None else sys.stdout
    for curve in curves:
        out.write(f"{curve}\n")
        out.write(f"Point at t = {t_label}: {curve.point(t)}\n")
        out.write(f"Derivative at t = {t_label}: {curve.derivative(t)}\n")
        out.write("\n")


def report_radius_sum(radius_sum: float, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(f"Total sum of radii of the circles: {radius_sum:g}\n")
