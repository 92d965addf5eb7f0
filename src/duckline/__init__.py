"""duckline: lay out dated events, periods and notes as timeline diagrams."""

__version__ = "0.1.0"
