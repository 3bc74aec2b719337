"""Shared type aliases for leadscore."""

from .common import JsonObject, JsonScalar, JsonValue
from .issues import StoredIssue

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "StoredIssue",
]
