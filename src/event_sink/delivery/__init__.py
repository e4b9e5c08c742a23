"""
Package: delivery
Description: Event delivery to the user event ingestion API.

Provides the connector that pushes validated, pruned events over HTTP
and the retry policy used for transient delivery failures.
"""

from .connector import UserEventSinkConnector

__all__ = ["UserEventSinkConnector"]
