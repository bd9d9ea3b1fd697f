"""Weighted, explainable ordering of samples awaiting evaluation."""

__version__ = "0.1.0"
