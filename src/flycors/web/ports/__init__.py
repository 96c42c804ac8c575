"""Framework-agnostic web ports."""

from flycors.web.ports.filter import CallNext, WebFilter
from flycors.web.ports.request import RequestView

__all__ = ["CallNext", "RequestView", "WebFilter"]
