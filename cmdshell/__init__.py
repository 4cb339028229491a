"""Minimal command-shell core: registry, evaluator and self-describing help."""

__version__ = "0.1.0"
