# -*- coding: utf-8 -*-
"""
Failure screenshots for pages whose metric could not be extracted.
"""

import os
from typing import Optional

from playwright.async_api import Page

from models.wallet_record import ScreenshotArtifact
from utils.helpers import get_current_timestamp_ms, print_error, print_info, safe_filename


class ScreenshotCapturer:
    """Writes one full-page PNG per call into ``output_dir``."""

    def __init__(self, output_dir: str):
        self.output_dir = output_dir

    def build_path(self, wallet: str, label: str, timestamp_ms: int) -> str:
        filename = safe_filename(f"{label}-{wallet}-{timestamp_ms}.png")
        return os.path.join(self.output_dir, filename)

    async def capture(self, page: Page, wallet: str, label: str) -> Optional[ScreenshotArtifact]:
        """
        Saves a screenshot of the current page.

        Errors are reported and swallowed so the extraction error that led here
        stays the one the caller sees.
        """
        timestamp_ms = get_current_timestamp_ms()
        path = self.build_path(wallet, label, timestamp_ms)
        try:
            os.makedirs(self.output_dir, exist_ok=True)
            await page.screenshot(path=path, full_page=True)
        except Exception as e:
            print_error(f"Could not save failure screenshot: {e}", {"filepath": path})
            return None

        print_info("Saved failure screenshot", {"filepath": path})
        return ScreenshotArtifact(path=path, wallet=wallet, label=label, timestamp_ms=timestamp_ms)
