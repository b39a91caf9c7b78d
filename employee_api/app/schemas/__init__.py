"""
Pydantic schema definitions for API payloads.

The same ``Employee`` model is used for request bodies, responses and
as the record type passed between the service and repository layers.
"""

from .employee import Employee

__all__ = ["Employee"]
