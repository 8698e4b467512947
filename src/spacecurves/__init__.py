"""Parametric space curves and a parallel circle-radius reduction."""
