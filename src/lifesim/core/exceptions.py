"""Custom exceptions used throughout the lifesim package."""

from __future__ import annotations
from typing import Any, Optional


class LifeSimError(Exception):
    """Base exception for all lifesim errors.

    Catching this catches every error raised by the grid, the engine
    and the driver.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """
        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        super().__init__(message)
        self.details = details or {}


class OutOfBounds(LifeSimError):
    """Raised when a cell is addressed outside the grid.

    Coordinates are never clamped or wrapped: a bad coordinate is a bug in
    the caller (usually a click mapped to the wrong cell).
    """

    def __init__(
        self,
        row: int,
        col: int,
        shape: tuple[int, int],
        details: Optional[dict[str, Any]] = None,
    ):
        rows, cols = shape
        message = f"Cell ({row}, {col}) is outside the {rows}x{cols} grid"
        details = details or {}
        details.update({"row": row, "col": col, "shape": shape})
        super().__init__(message=message, details=details)
        self.row = row
        self.col = col
        self.shape = shape


class ConfigurationError(LifeSimError):
    """Raised for invalid grid or driver configuration.

    This includes:
    - Non-positive grid dimensions or cell size
    - A window smaller than a single cell
    - A state array whose shape does not match the grid
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key
