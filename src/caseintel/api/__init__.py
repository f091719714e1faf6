"""HTTP API for case-study normalization and reports."""
