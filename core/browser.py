# -*- coding: utf-8 -*-
"""
Browser session owned by a single enrichment run.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Page, async_playwright

from config.constants import (
    BROWSER_EXTRA_HEADERS,
    BROWSER_LAUNCH_ARGS,
    BROWSER_USER_AGENT,
    BROWSER_VIEWPORT,
)
from config.settings import Settings
from utils.helpers import print_info


@asynccontextmanager
async def open_browser_page(settings: Settings) -> AsyncIterator[Page]:
    """Launches Chromium and yields one page with the per-operation timeout applied."""
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=settings.headless, args=BROWSER_LAUNCH_ARGS)
        try:
            context = await browser.new_context(
                user_agent=BROWSER_USER_AGENT,
                viewport=BROWSER_VIEWPORT,
                extra_http_headers=BROWSER_EXTRA_HEADERS,
            )
            page = await context.new_page()
            page.set_default_timeout(settings.timeout_ms)
            page.set_default_navigation_timeout(settings.timeout_ms)
            print_info("Browser ready", {"headless": settings.headless})
            yield page
        finally:
            await browser.close()
