"""Unit tests for the Google Sheets client using a fake HTTP session."""

import json
import os
import tempfile
import unittest
from urllib.parse import unquote

import requests

from api_clients.sheets_client import (
    SheetRowStore,
    SheetsClient,
    load_service_account_credentials,
    quote_sheet_name,
)
from core.exceptions import ConfigurationError, SinkWriteError, WalletSourceError
from models.wallet_record import WalletRecord


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload or {}
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.requests = []

    def get(self, url, **kwargs):
        self.requests.append(("GET", url, kwargs))
        return self.response

    def put(self, url, **kwargs):
        self.requests.append(("PUT", url, kwargs))
        return self.response


class SheetRowStoreTests(unittest.TestCase):
    def make_store(self, response, sheet_name="Sheet1", start_row=2):
        session = FakeSession(response)
        client = SheetsClient("sheet-id", session)
        return SheetRowStore(client, sheet_name, start_row), session

    def test_load_wallets_reads_a_to_d_from_start_row(self):
        store, session = self.make_store(
            FakeResponse({"values": [["W1", "", "5", "1.2"], ["W2"]]}), start_row=3
        )

        records = store.load_wallets()

        method, url, _ = session.requests[0]
        self.assertEqual(method, "GET")
        self.assertTrue(unquote(url).endswith("/sheet-id/values/Sheet1!A3:D"))
        self.assertEqual(records, [WalletRecord("W1", 3, "5", "1.2"), WalletRecord("W2", 4)])

    def test_load_wallets_with_no_values(self):
        store, _ = self.make_store(FakeResponse({}))
        self.assertEqual(store.load_wallets(), [])

    def test_load_wallets_http_error(self):
        store, _ = self.make_store(FakeResponse(status_code=403))
        with self.assertRaises(WalletSourceError):
            store.load_wallets()

    def test_write_metrics_updates_c_and_d_of_the_row(self):
        store, session = self.make_store(FakeResponse({"updatedCells": 2}), sheet_name="My Wallets")

        store.write_metrics(7, "1234", "-1,234.56")

        method, url, kwargs = session.requests[0]
        self.assertEqual(method, "PUT")
        self.assertTrue(unquote(url).endswith("/values/'My Wallets'!C7:D7"))
        self.assertEqual(kwargs["params"], {"valueInputOption": "USER_ENTERED"})
        self.assertEqual(kwargs["json"]["values"], [["1234", "-1,234.56"]])

    def test_write_metrics_http_error(self):
        store, _ = self.make_store(FakeResponse(status_code=500))
        with self.assertRaises(SinkWriteError):
            store.write_metrics(2, "1", "2")


class QuoteSheetNameTests(unittest.TestCase):
    def test_plain_name_is_not_quoted(self):
        self.assertEqual(quote_sheet_name("Sheet1"), "Sheet1")

    def test_name_with_space_and_apostrophe(self):
        self.assertEqual(quote_sheet_name("Bob's Sheet"), "'Bob''s Sheet'")


class CredentialsTests(unittest.TestCase):
    def test_invalid_inline_json(self):
        with self.assertRaises(ConfigurationError):
            load_service_account_credentials("not-a-file-and-not-json")

    def test_inline_json_missing_fields(self):
        with self.assertRaises(ConfigurationError):
            load_service_account_credentials(json.dumps({"type": "service_account"}))

    def test_unusable_credentials_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sa.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("{}")
            with self.assertRaises(ConfigurationError):
                load_service_account_credentials(path)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
