# -*- coding: utf-8 -*-
"""
Metric Extractors
-----------------
Text-pattern extraction of the two wallet metrics from rendered page text.

Each metric is an ordered list of named strategies. A strategy is a pure
function ``text -> Optional[str]``; the first one returning a value wins, so
earlier entries take priority over later, broader ones. The page-level
coroutines only add the settle delay and the body-text read around them.
"""

import asyncio
import re
from typing import Any, Awaitable, Callable, List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from config.constants import ACTIVITIES_VIEW_MARKER, ACTIVITY_SNIPPET_RADIUS
from core.exceptions import ExtractionError, NavigationError
from utils.helpers import print_info

Strategy = Callable[[str], Optional[str]]

_WHITESPACE = re.compile(r"\s+")

TOTAL_ACTIVITIES_PATTERN = re.compile(r"Total\s+([\d,]+)\s+activit(?:y|ies)", re.IGNORECASE)
MORE_THAN_ACTIVITIES_PATTERN = re.compile(
    r"More\s+than\s+([\d,]+)\s+activit(?:y|ies)", re.IGNORECASE
)
ZERO_ACTIVITIES_PATTERN = re.compile(r"Total\s+0\s+activit(?:y|ies)", re.IGNORECASE)
HOLDINGS_PNL_CURRENCY_PATTERN = re.compile(
    r"Holdings\s+PnL[^$]*?(?P<sign>[-+]?)\$\s*(?P<number>[-+]?[\d,]*\d(?:\.\d+)?)",
    re.IGNORECASE,
)
HOLDINGS_PNL_BARE_PATTERN = re.compile(
    r"Holdings\s+PnL[^$\d+-]*?(?P<number>[-+]?[\d,]*\d(?:\.\d+)?)", re.IGNORECASE
)


def normalize_text(text: Optional[str]) -> str:
    """Collapses runs of whitespace into single spaces and trims."""
    return _WHITESPACE.sub(" ", text or "").strip()


def activity_snippet(text: str, radius: int = ACTIVITY_SNIPPET_RADIUS) -> Optional[str]:
    """Up to ``radius`` characters on each side of the first 'activit'."""
    match = re.search(r".{0,%d}activit.{0,%d}" % (radius, radius), text, re.IGNORECASE)
    return match.group(0) if match else None


def _count_strategy(pattern: "re.Pattern[str]") -> Strategy:
    def strategy(text: str) -> Optional[str]:
        match = pattern.search(text)
        if not match:
            return None
        return match.group(1).replace(",", "")

    return strategy


def explicit_zero_activities(text: str) -> Optional[str]:
    return "0" if ZERO_ACTIVITIES_PATTERN.search(text) else None


def holdings_pnl_after_currency(text: str) -> Optional[str]:
    """First dollar amount after the label; anything before the '$' is skipped."""
    match = HOLDINGS_PNL_CURRENCY_PATTERN.search(text)
    if not match:
        return None
    number = match.group("number")
    sign = match.group("sign")
    # Only a sign directly against the symbol ("-$12.30") belongs to the number.
    if sign and number[0] not in "+-":
        number = sign + number
    return number


def holdings_pnl_bare_number(text: str) -> Optional[str]:
    match = HOLDINGS_PNL_BARE_PATTERN.search(text)
    return match.group("number") if match else None


ACTIVITY_STRATEGIES: List[Tuple[str, Strategy]] = [
    ("total_activities", _count_strategy(TOTAL_ACTIVITIES_PATTERN)),
    ("more_than_activities", _count_strategy(MORE_THAN_ACTIVITIES_PATTERN)),
    ("explicit_zero_activities", explicit_zero_activities),
]

HOLDINGS_PNL_STRATEGIES: List[Tuple[str, Strategy]] = [
    ("holdings_pnl_currency", holdings_pnl_after_currency),
    ("holdings_pnl_bare_number", holdings_pnl_bare_number),
]


def apply_strategies(
    text: str, strategies: List[Tuple[str, Strategy]]
) -> Tuple[Optional[str], Optional[str]]:
    """Returns (strategy_name, value) of the first matching strategy, else (None, None)."""
    for name, strategy in strategies:
        value = strategy(text)
        if value is not None:
            return name, value
    return None, None


def extract_activities_from_text(text: str, page_url: str = "") -> str:
    """
    Activity count from normalized page text.

    A page that was opened on the activities view but shows no activity
    section is read as zero activities rather than unknown.
    """
    name, value = apply_strategies(text, ACTIVITY_STRATEGIES)
    if value is not None:
        print_info(f"Found activity count: {value}", {"strategy": name})
        return value

    if ACTIVITIES_VIEW_MARKER in (page_url or ""):
        print_info("No activities section found on page, assuming 0 activities")
        return "0"

    raise ExtractionError("Unable to locate Solscan activities section on page.")


def extract_holdings_pnl_from_text(text: str) -> str:
    """Holdings PnL figure exactly as displayed (sign, separators and decimals kept)."""
    _, value = apply_strategies(text, HOLDINGS_PNL_STRATEGIES)
    if value is None:
        raise ExtractionError("Unable to locate Holdings PnL value on page.")
    return value


async def read_page_text(
    page: Page, settle_delay_ms: int, sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep
) -> str:
    """Waits for client-side rendering to settle, then returns normalized body text."""
    await sleep(settle_delay_ms / 1000)
    try:
        body = await page.text_content("body")
    except PlaywrightTimeoutError as e:
        raise NavigationError(f"Timed out reading page text from {page.url}: {e}") from e
    except PlaywrightError as e:
        raise NavigationError(f"Failed to read page text from {page.url}: {e}") from e
    return normalize_text(body)


async def extract_solscan_activities(
    page: Page, settle_delay_ms: int, sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep
) -> str:
    text = await read_page_text(page, settle_delay_ms, sleep)

    snippet = activity_snippet(text)
    if snippet:
        print_info("Found text containing 'activit'", {"snippet": snippet})
    else:
        print_info("No text containing 'activit' found in page body")

    return extract_activities_from_text(text, page.url)


async def extract_jupiter_holdings_pnl(
    page: Page, settle_delay_ms: int, sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep
) -> str:
    text = await read_page_text(page, settle_delay_ms, sleep)
    return extract_holdings_pnl_from_text(text)
