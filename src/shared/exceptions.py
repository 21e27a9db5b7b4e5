"""
Custom exceptions for panorbit.

This module provides domain-specific exceptions for better error handling
and clearer error messages throughout the controller.

Clean Architecture Note:
- This file belongs to the Shared layer (cross-cutting concerns)
- Can be imported by any layer (input, control, rendering, config, core)
"""

from __future__ import annotations

from typing import Any


class PanOrbitError(Exception):
    """Base exception for all controller-related errors."""

    pass


class ConfigValidationError(PanOrbitError):
    """Raised when controller configuration is invalid."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        """
        Initialize ConfigValidationError.

        Parameters
        ----------
        message : str
            Error message
        field : str | None
            Name of the offending configuration field
        value : Any
            The rejected value
        """
        self.field = field
        self.value = value

        full_message = message
        if field:
            full_message = f"{full_message} (field: {field}, value: {value!r})"

        super().__init__(full_message)


class EventParseError(PanOrbitError):
    """Raised when an input event cannot be parsed from its serialized form."""

    def __init__(self, message: str, index: int | None = None):
        """
        Initialize EventParseError.

        Parameters
        ----------
        message : str
            Error message
        index : int | None
            Position of the event within its batch or script
        """
        self.index = index

        full_message = message
        if index is not None:
            full_message = f"{full_message} (event: {index})"

        super().__init__(full_message)
