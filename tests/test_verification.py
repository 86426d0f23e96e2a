"""Unit tests for anti-bot challenge detection."""

import unittest
from unittest import mock

from scrapers.verification import ConsoleResumeSignal, VerificationDetector
from tests.fakes import FakePage

URL = "https://solscan.io/account/W#activities"


async def _page_with(content):
    page = FakePage({URL: content})
    await page.goto(URL)
    return page


class VerificationDetectorTests(unittest.IsolatedAsyncioTestCase):
    async def test_challenge_title_is_detected_case_insensitively(self):
        page = await _page_with({"title": "Just a moment..."})
        self.assertTrue(await VerificationDetector().detect(page))

    async def test_challenge_platform_url_is_detected(self):
        page = await _page_with(
            {"title": "solscan", "final_url": "https://solscan.io/cdn-cgi/challenge-platform/h/b"}
        )
        self.assertTrue(await VerificationDetector().detect(page))

    async def test_verification_widget_selector_is_detected(self):
        page = await _page_with({"title": "Solscan", "selectors": ["#challenge-form"]})
        self.assertTrue(await VerificationDetector().detect(page))

    async def test_text_marker_is_detected(self):
        page = await _page_with({"selectors": ["text=verify you are human"]})
        self.assertTrue(await VerificationDetector().detect(page))

    async def test_regular_page_is_not_a_challenge(self):
        page = await _page_with({"title": "Solscan | Account", "text": "Total 5 activities"})
        self.assertFalse(await VerificationDetector().detect(page))

    async def test_custom_markers(self):
        detector = VerificationDetector(title_phrases=["Access Denied"], url_segments=[], selectors=[])
        page = await _page_with({"title": "ACCESS DENIED"})
        self.assertTrue(await detector.detect(page))


class ConsoleResumeSignalTests(unittest.IsolatedAsyncioTestCase):
    async def test_waits_for_enter(self):
        signal = ConsoleResumeSignal(prompt="go? ")
        with mock.patch("builtins.input", return_value="") as fake_input:
            await signal.wait("Verification detected on Solscan.")
        fake_input.assert_called_once_with("go? ")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
