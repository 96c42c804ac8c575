"""Exception hierarchy for flycors.

Request evaluation never raises: a missing header or a malformed list is a
"not permitted" answer, not an error. The only hard failures are made at
startup, when configuration is turned into a policy.

Categories:
- ConfigurationException: configuration cannot be loaded or bound
- InvalidCorsPolicyException: a CORS policy was given unusable values
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class FlyCorsException(Exception):
    """Base exception for all flycors errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CORS_POLICY").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(FlyCorsException):
    """Configuration could not be loaded, resolved or bound."""


class InvalidCorsPolicyException(ConfigurationException):
    """A CORS policy was constructed from values that cannot be evaluated."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="CORS_POLICY", context=context)
