"""caseintel: case-study taxonomy normalization and sales-intelligence reports."""

__version__ = "0.1.0"
