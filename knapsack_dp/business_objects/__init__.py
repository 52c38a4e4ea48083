# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError, ConfigurationError
from .items import Item
from .constraints import Constraints

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "ConfigurationError",
    # core models
    "Item",
    "Constraints",
]
