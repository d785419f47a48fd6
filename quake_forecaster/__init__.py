"""Earthquake forecaster - USGS feed parsing and earthquake activity queries."""

__version__ = "1.0.0"
