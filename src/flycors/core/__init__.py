"""flycors core — configuration loading and binding."""

from flycors.core.config import Config, config_properties

__all__ = ["Config", "config_properties"]
