"""Exceptions raised by SearchFields."""

from __future__ import annotations


class FieldsError(Exception):
    """Base class for field value errors."""


class ValidationError(FieldsError, ValueError):
    """A value or wire document does not have the expected shape."""


class ParseError(FieldsError, ValueError):
    """A timestamp string is not valid RFC 3339."""
