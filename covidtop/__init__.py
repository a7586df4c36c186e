"""Rank countries by COVID-19 cases, deaths or recoveries from a CSV summary."""

__version__ = "0.1.0"
__all__ = ["records", "heap", "cli"]