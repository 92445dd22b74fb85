"""Utility functions for the extensibility SDK."""

from .validation import email_validation, url_validation

__all__ = [
    'email_validation',
    'url_validation',
]
