"""Motion graphics generator: frame-indexed scene evaluation for explainer videos."""

__version__ = "0.1.0"
