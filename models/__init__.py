# -*- coding: utf-8 -*-
"""
Models Package
--------------
Contains the data models shared by the wallet enrichment pipeline.
"""

from .wallet_record import (
    EnrichmentSummary,
    ExtractionTask,
    MetricKind,
    RetryPolicy,
    ScreenshotArtifact,
    WalletRecord,
)

__all__ = [
    "EnrichmentSummary",
    "ExtractionTask",
    "MetricKind",
    "RetryPolicy",
    "ScreenshotArtifact",
    "WalletRecord",
]
