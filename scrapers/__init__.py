"""Page scrapers used by the wallet enricher."""

from .extractors import extract_jupiter_holdings_pnl, extract_solscan_activities
from .screenshots import ScreenshotCapturer
from .verification import ConsoleResumeSignal, ResumeSignal, VerificationDetector

__all__ = [
    "ConsoleResumeSignal",
    "ResumeSignal",
    "ScreenshotCapturer",
    "VerificationDetector",
    "extract_jupiter_holdings_pnl",
    "extract_solscan_activities",
]
