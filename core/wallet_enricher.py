# -*- coding: utf-8 -*-
"""
Wallet Enricher
---------------
Drives one browser page through every pending wallet: Solscan activities,
then Jupiter Holdings PnL, then a single write of both values to the sheet.

Per wallet the sequence is strictly:
    navigate A -> verification gate -> extract A -> pause
    navigate B -> verification gate -> extract B -> pause
    write result -> pause
Navigation, verification and extraction of each metric are retried together.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from config.constants import (
    JUPITER_LABEL,
    JUPITER_PORTFOLIO_URL_TEMPLATE,
    NAVIGATION_WAIT_UNTIL,
    SOLSCAN_ACTIVITIES_URL_TEMPLATE,
    SOLSCAN_LABEL,
)
from config.settings import Settings
from core.exceptions import EnricherError, NavigationError, SinkWriteError
from models.wallet_record import EnrichmentSummary, ExtractionTask, MetricKind, WalletRecord
from scrapers.extractors import extract_jupiter_holdings_pnl, extract_solscan_activities
from scrapers.screenshots import ScreenshotCapturer
from scrapers.verification import ConsoleResumeSignal, ResumeSignal, VerificationDetector
from utils.helpers import print_error, print_info, print_success, print_warning
from utils.rate_limiter import RateLimiter, execute_with_retry

Sleep = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True)
class MetricSource:
    """Where one metric comes from and how it is read off the page."""

    kind: MetricKind
    label: str
    url_template: str
    extract: Callable[[Page, int, Sleep], Awaitable[str]]

    @property
    def screenshot_label(self) -> str:
        return self.label.lower()

    def url_for(self, wallet: str) -> str:
        return self.url_template.format(wallet)


SOLSCAN_ACTIVITIES = MetricSource(
    kind=MetricKind.ACTIVITIES,
    label=SOLSCAN_LABEL,
    url_template=SOLSCAN_ACTIVITIES_URL_TEMPLATE,
    extract=extract_solscan_activities,
)

JUPITER_HOLDINGS_PNL = MetricSource(
    kind=MetricKind.HOLDINGS_PNL,
    label=JUPITER_LABEL,
    url_template=JUPITER_PORTFOLIO_URL_TEMPLATE,
    extract=extract_jupiter_holdings_pnl,
)


class WalletEnricher:
    """Sequential per-wallet pipeline; the only user of ``page`` for the whole run."""

    def __init__(
        self,
        page: Page,
        sink: Any,
        settings: Settings,
        *,
        detector: Optional[VerificationDetector] = None,
        resume_signal: Optional[ResumeSignal] = None,
        rate_limiter: Optional[RateLimiter] = None,
        screenshot_capturer: Optional[ScreenshotCapturer] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        """
        Args:
            page: The single browser page reused for every navigation.
            sink: Object with ``write_metrics(row_index, activities, holdings_pnl)``.
            settings: Immutable run settings.
            detector: Challenge detector; defaults to the Cloudflare markers.
            resume_signal: Operator hand-off after a challenge; defaults to the console.
            rate_limiter: Pause between navigation steps; defaults to ``settings.rate_limit_ms``.
            screenshot_capturer: Failure capture; defaults to ``settings.screenshot_dir``.
            sleep: Awaitable sleep in seconds used for settle and backoff delays.
        """
        self.page = page
        self.sink = sink
        self.settings = settings
        self.retry_policy = settings.retry_policy()
        self.detector = detector or VerificationDetector()
        self.resume_signal = resume_signal or ConsoleResumeSignal()
        self.rate_limiter = rate_limiter or RateLimiter(settings.rate_limit_ms, sleep=sleep)
        self.screenshot_capturer = screenshot_capturer or ScreenshotCapturer(
            settings.screenshot_dir
        )
        self._sleep = sleep

    async def run(self, records: Iterable[WalletRecord]) -> EnrichmentSummary:
        """Processes every record in order and returns the row counts."""
        summary = EnrichmentSummary()

        for position, record in enumerate(records, start=1):
            if not record.has_wallet:
                print_warning("Skipping empty wallet row", {"rowIndex": record.row_index})
                summary.skipped += 1
                continue
            if record.is_fully_populated:
                print_info(
                    "Skipping already processed row",
                    {"rowIndex": record.row_index, "wallet": record.wallet},
                )
                summary.skipped += 1
                continue

            print_info(
                "Processing wallet",
                {"index": position, "wallet": record.wallet, "rowIndex": record.row_index},
            )
            try:
                await self.process_wallet(record)
            except SinkWriteError:
                raise
            except (EnricherError, PlaywrightError) as e:
                if not self.settings.continue_on_error:
                    raise
                summary.failed += 1
                print_error(
                    "Wallet failed, continuing with next wallet",
                    {"rowIndex": record.row_index, "wallet": record.wallet, "error": str(e)},
                )
                continue
            summary.processed += 1

        return summary

    async def process_wallet(self, record: WalletRecord) -> Tuple[str, str]:
        """Fetches both metrics for one wallet and writes them to its row."""
        try:
            activities = await self.fetch_metric(record.wallet, SOLSCAN_ACTIVITIES)
        finally:
            await self.rate_limiter.pause()

        try:
            holdings_pnl = await self.fetch_metric(record.wallet, JUPITER_HOLDINGS_PNL)
        finally:
            await self.rate_limiter.pause()

        await asyncio.to_thread(self.sink.write_metrics, record.row_index, activities, holdings_pnl)
        print_success(
            "Updated sheet row",
            {
                "rowIndex": record.row_index,
                "activitiesValue": activities,
                "pnlValue": holdings_pnl,
            },
        )
        await self.rate_limiter.pause()
        return activities, holdings_pnl

    async def fetch_metric(self, wallet: str, source: MetricSource) -> str:
        """
        Loads the source page and extracts its metric, retrying the whole step.

        A screenshot labeled after the source is saved once all attempts fail;
        the last error is then raised.
        """
        url = source.url_for(wallet)
        attempts = 0

        async def attempt_once() -> str:
            nonlocal attempts
            attempts += 1
            task = ExtractionTask(wallet=wallet, metric_kind=source.kind, attempt=attempts)
            print_info(
                f"Fetching {source.label} data",
                {"wallet": task.wallet, "metric": task.metric_kind.value, "attempt": task.attempt},
            )
            await self.load_page(url, source.label)
            return await source.extract(self.page, self.settings.settle_delay_ms, self._sleep)

        async def capture_failure(_error: Exception) -> None:
            await self.screenshot_capturer.capture(self.page, wallet, source.screenshot_label)

        return await execute_with_retry(
            attempt_once,
            self.retry_policy,
            label=f"{source.screenshot_label}-{wallet}",
            on_failure=capture_failure,
            sleep=self._sleep,
        )

    async def load_page(self, url: str, label: str) -> None:
        """
        Navigates to ``url`` and passes the verification gate.

        When a challenge is showing, the run waits for the operator and then
        repeats the navigation once; the page is not checked again afterwards.
        """
        await self._navigate(url)
        if await self.detector.detect(self.page):
            await self.resume_signal.wait(f"Verification detected on {label}.")
            await self._navigate(url)

    async def _navigate(self, url: str) -> None:
        try:
            await self.page.goto(url, wait_until=NAVIGATION_WAIT_UNTIL)
        except PlaywrightTimeoutError as e:
            raise NavigationError(f"Timed out loading {url}: {e}") from e
        except PlaywrightError as e:
            raise NavigationError(f"Failed to load {url}: {e}") from e
