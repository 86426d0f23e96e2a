"""Tests for the command line entry point."""

import unittest
from unittest import mock

import enrich_wallets
from config.settings import Settings


class ApplyOverridesTests(unittest.TestCase):
    def setUp(self):
        self.settings = Settings(sheet_id="s", service_account_json="c")

    def test_no_flags_keep_settings(self):
        args = enrich_wallets.build_parser().parse_args([])
        self.assertIs(enrich_wallets.apply_overrides(self.settings, args), self.settings)

    def test_flags_override_settings(self):
        args = enrich_wallets.build_parser().parse_args(
            ["--csv", "w.csv", "--start-row", "7", "--headed", "--continue-on-error"]
        )

        settings = enrich_wallets.apply_overrides(self.settings, args)

        self.assertEqual(settings.csv_path, "w.csv")
        self.assertEqual(settings.start_row, 7)
        self.assertFalse(settings.headless)
        self.assertTrue(settings.continue_on_error)


class MainTests(unittest.TestCase):
    def test_configuration_error_exits_nonzero(self):
        with mock.patch.object(
            enrich_wallets,
            "load_settings",
            return_value=Settings(sheet_id=None, service_account_json=None),
        ), mock.patch.object(enrich_wallets, "open_browser_page") as open_page:
            self.assertEqual(enrich_wallets.main([]), 1)
        open_page.assert_not_called()

    def test_empty_wallet_list_exits_zero(self):
        store = mock.Mock()
        store.load_wallets.return_value = []
        with mock.patch.object(
            enrich_wallets,
            "load_settings",
            return_value=Settings(sheet_id="s", service_account_json="c"),
        ), mock.patch.object(enrich_wallets.SheetsClient, "from_service_account"), mock.patch.object(
            enrich_wallets, "SheetRowStore", return_value=store
        ), mock.patch.object(enrich_wallets, "open_browser_page") as open_page:
            self.assertEqual(enrich_wallets.main([]), 0)
        open_page.assert_not_called()


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
