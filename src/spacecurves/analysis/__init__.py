"""Aggregations over curve collections."""
