"""flycors logging — logging port and its structlog adapter."""

from flycors.logging.port import LoggingPort
from flycors.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
