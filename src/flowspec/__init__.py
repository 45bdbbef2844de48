"""flowspec - data-flow endpoint models for static analysis."""

__version__ = "0.1.0"
