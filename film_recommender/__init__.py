"""
Film Recommendations application package.

This package contains the recommendation pipeline, the film catalog database
layer, the HTTP API and shared utilities.
"""

__version__ = "1.0.0"
