"""Exceptions raised by the UI kit package."""

from typing import Optional


class UIKitError(Exception):
    """Base exception for the UI kit package"""


class BlockParseError(UIKitError):
    """Raised when wire data cannot be validated into blocks"""

    def __init__(self, detail: str, errors: Optional[list] = None):
        super().__init__(detail)
        self.detail = detail
        self.errors = errors or []


class InvalidSettingsError(UIKitError):
    """Raised for configuration values the package cannot honour"""
