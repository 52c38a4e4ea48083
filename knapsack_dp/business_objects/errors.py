# -*- coding: utf-8 -*-
"""
Common exceptions for the knapsack DP package.
"""


class SchemaError(ValueError):
    """Raised when an input file (JSON) violates the expected schema."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class ConfigurationError(ValueError):
    """Raised when solver settings are invalid or cannot honour the constraints."""
