"""Telemetry and observability helpers.

This package emits deterministic stage events for lookups and speech sessions.
"""

from .logger import LookupLogger

__all__ = ["LookupLogger"]
