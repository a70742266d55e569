"""Domain errors shared across layers."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Project configuration is missing or contradictory.

    Always raised before any file or network I/O so a bad config never
    leaves a half-synchronised string tree behind.
    """
