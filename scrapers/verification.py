# -*- coding: utf-8 -*-
"""
Anti-bot challenge detection and the operator hand-off used to clear it.
"""

import asyncio
from typing import Sequence

from playwright.async_api import Page

from config.constants import CHALLENGE_SELECTORS, CHALLENGE_TITLE_PHRASES, CHALLENGE_URL_SEGMENTS
from utils.helpers import print_prompt


class VerificationDetector:
    """Read-only check for a human-verification interstitial on the current page."""

    def __init__(
        self,
        title_phrases: Sequence[str] = tuple(CHALLENGE_TITLE_PHRASES),
        url_segments: Sequence[str] = tuple(CHALLENGE_URL_SEGMENTS),
        selectors: Sequence[str] = tuple(CHALLENGE_SELECTORS),
    ):
        self.title_phrases = [phrase.lower() for phrase in title_phrases]
        self.url_segments = list(url_segments)
        self.selectors = list(selectors)

    async def detect(self, page: Page) -> bool:
        """True when the page shows a challenge instead of its content."""
        title = (await page.title() or "").lower()
        if any(phrase in title for phrase in self.title_phrases):
            return True

        url = page.url or ""
        if any(segment in url for segment in self.url_segments):
            return True

        for selector in self.selectors:
            if await page.locator(selector).first.count() > 0:
                return True

        return False


class ResumeSignal:
    """Blocks until an operator says automated work may continue."""

    async def wait(self, message: str) -> None:
        raise NotImplementedError


class ConsoleResumeSignal(ResumeSignal):
    """Waits for Enter on stdin; there is no timeout."""

    def __init__(self, prompt: str = "Press Enter to continue..."):
        self.prompt = prompt

    async def wait(self, message: str) -> None:
        print_prompt(message)
        await asyncio.to_thread(input, self.prompt)
