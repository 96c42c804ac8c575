"""flycors configuration properties."""

from flycors.config.properties import CorsProperties, LoggingProperties

__all__ = ["CorsProperties", "LoggingProperties"]
