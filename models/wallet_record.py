# -*- coding: utf-8 -*-
"""
Data models for the wallet enrichment pipeline.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from utils.helpers import is_blank


class MetricKind(Enum):
    """The two metrics collected for every wallet."""

    ACTIVITIES = "activities"
    HOLDINGS_PNL = "holdings_pnl"


@dataclass(frozen=True)
class WalletRecord:
    """One wallet row to process; read-only once loaded."""

    wallet: Optional[str]
    row_index: int
    existing_activities: Optional[str] = None
    existing_holdings_pnl: Optional[str] = None

    @property
    def has_wallet(self) -> bool:
        return not is_blank(self.wallet)

    @property
    def is_fully_populated(self) -> bool:
        """Both result cells already hold a value (resume support)."""
        return not is_blank(self.existing_activities) and not is_blank(
            self.existing_holdings_pnl
        )


@dataclass(frozen=True)
class ExtractionTask:
    """A single attempt at one metric for one wallet."""

    wallet: str
    metric_kind: MetricKind
    attempt: int


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded attempts with linear backoff."""

    max_attempts: int
    backoff_base_ms: int

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.backoff_base_ms < 0:
            raise ValueError(f"backoff_base_ms must be >= 0, got {self.backoff_base_ms}")

    def backoff_ms(self, attempt: int) -> int:
        """Delay after failed attempt ``attempt`` (1-based) before the next one."""
        return self.backoff_base_ms * attempt


@dataclass(frozen=True)
class ScreenshotArtifact:
    """Diagnostic page capture written after an unrecoverable failure."""

    path: str
    wallet: str
    label: str
    timestamp_ms: int


@dataclass
class EnrichmentSummary:
    """Row counts for one run."""

    processed: int = 0
    skipped: int = 0
    failed: int = 0
