"""Offline Monte Carlo path tracer with a BVH and row-parallel rendering."""

__version__ = "0.1.0"
