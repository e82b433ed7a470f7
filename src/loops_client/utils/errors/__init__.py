"""Exceções da biblioteca."""

from .exceptions import (
    LoopsConfigurationError,
    LoopsError,
    LoopsTransportError,
)

__all__ = [
    "LoopsConfigurationError",
    "LoopsError",
    "LoopsTransportError",
]
