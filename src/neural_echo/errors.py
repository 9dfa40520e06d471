"""Exception hierarchy for Neural Echo."""

from __future__ import annotations


class NeuralEchoError(Exception):
    """Base class for all package errors."""


class ConfigurationError(NeuralEchoError, ValueError):
    """Raised when a constant table or user configuration is invalid."""


__all__ = ["NeuralEchoError", "ConfigurationError"]
