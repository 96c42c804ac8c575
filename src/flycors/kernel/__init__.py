"""flycors kernel — exception hierarchy with zero external dependencies."""

from flycors.kernel.exceptions import (
    ConfigurationException,
    FlyCorsException,
    InvalidCorsPolicyException,
)

__all__ = [
    "ConfigurationException",
    "FlyCorsException",
    "InvalidCorsPolicyException",
]
