"""Exceptions raised by the rolling cubes models."""

from __future__ import annotations


class RollingCubesError(Exception):
    """Base class for every error raised by the puzzle models."""


class InvalidConfigurationError(RollingCubesError, ValueError):
    """The supplied grid does not describe a legal tray."""


class InvalidValueError(RollingCubesError, ValueError):
    """An integer could not be decoded into a cube."""


class InvalidOffsetError(RollingCubesError, ValueError):
    """A row/column offset is not a single orthogonal step."""


class InvalidMoveError(RollingCubesError, ValueError):
    """The requested cell cannot be rolled to the empty space."""


class UnsupportedOperationError(RollingCubesError, TypeError):
    """The operation is not defined for this cube (e.g. rolling the empty cell)."""
