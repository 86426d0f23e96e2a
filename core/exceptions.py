# -*- coding: utf-8 -*-
"""
Error types raised by the enrichment pipeline.
"""


class EnricherError(Exception):
    """Base class for every error the enricher raises on purpose."""


class ConfigurationError(EnricherError):
    """Missing or invalid settings or credentials; raised before any browser work."""


class WalletSourceError(EnricherError):
    """The wallet list could not be read from the CSV file or the sheet."""


class NavigationError(EnricherError):
    """A page failed to load within the configured timeout."""


class ExtractionError(EnricherError):
    """The expected text pattern was not found on the rendered page."""


class SinkWriteError(EnricherError):
    """Writing metric values back to the sheet failed."""
