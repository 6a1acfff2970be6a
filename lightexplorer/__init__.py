"""Chain config, chain math, HTML formatting helpers, validator names and page models for a beacon chain explorer."""

__version__ = "0.1.0"