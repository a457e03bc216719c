"""Shared helpers: error types, random source and tie-break rules."""

from .utils import ConfigurationError, InvariantViolation, make_rng, first_argmax, first_argmin

__all__ = ["ConfigurationError", "InvariantViolation", "make_rng", "first_argmax", "first_argmin"]
