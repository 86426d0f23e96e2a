# -*- coding: utf-8 -*-
"""
Google Sheets Client
--------------------
Thin wrapper around the Sheets v4 REST API using a service account and an
authorized requests session. Provides the wallet row reader and the metric
writer used by the enrichment run.
"""

import json
import os
from typing import Any, List, Optional
from urllib.parse import quote

import requests
from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account

from config.constants import (
    SHEET_ACTIVITIES_COLUMN,
    SHEET_HOLDINGS_PNL_COLUMN,
    SHEET_LAST_COLUMN,
    SHEET_WALLET_COLUMN,
    SHEETS_API_BASE_URL,
    SHEETS_REQUEST_TIMEOUT_SECONDS,
    SHEETS_SCOPES,
    SHEETS_VALUE_INPUT_OPTION,
)
from core.exceptions import ConfigurationError, SinkWriteError, WalletSourceError
from models.wallet_record import WalletRecord
from wallets.sources import wallet_records_from_rows


def load_service_account_credentials(value: str) -> service_account.Credentials:
    """
    Resolves GOOGLE_SERVICE_ACCOUNT_JSON into credentials.

    ``value`` is treated as a file path when such a file exists, otherwise as
    inline JSON credentials.
    """
    if os.path.exists(value):
        try:
            return service_account.Credentials.from_service_account_file(value, scopes=SHEETS_SCOPES)
        except (OSError, ValueError, KeyError) as e:
            raise ConfigurationError(
                f"Service account file {value} could not be loaded: {e}"
            ) from e

    try:
        info = json.loads(value)
    except ValueError as e:
        raise ConfigurationError(
            "GOOGLE_SERVICE_ACCOUNT_JSON must be either:\n"
            f"  1. A valid file path (file not found at: {value}), or\n"
            f"  2. Valid JSON credentials string (JSON parse failed: {e})\n\n"
            "Please check your .env file and ensure the path exists or provide the JSON directly."
        ) from e

    try:
        return service_account.Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)
    except (ValueError, KeyError, TypeError) as e:
        raise ConfigurationError(f"Inline service account credentials are invalid: {e}") from e


def quote_sheet_name(sheet_name: str) -> str:
    """A1-notation sheet reference; quoted unless it is a plain identifier."""
    if sheet_name.replace("_", "").isalnum():
        return sheet_name
    return "'" + sheet_name.replace("'", "''") + "'"


class SheetsClient:
    """Reads and writes value ranges of one spreadsheet."""

    def __init__(
        self,
        spreadsheet_id: str,
        session: requests.Session,
        timeout: float = SHEETS_REQUEST_TIMEOUT_SECONDS,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.session = session
        self.timeout = timeout

    @classmethod
    def from_service_account(cls, spreadsheet_id: str, credentials_value: str) -> "SheetsClient":
        credentials = load_service_account_credentials(credentials_value)
        return cls(spreadsheet_id, AuthorizedSession(credentials))

    def _values_url(self, a1_range: str) -> str:
        return f"{SHEETS_API_BASE_URL}/{self.spreadsheet_id}/values/{quote(a1_range, safe='')}"

    def read_values(self, a1_range: str) -> List[List[Any]]:
        response = self.session.get(self._values_url(a1_range), timeout=self.timeout)
        response.raise_for_status()
        return response.json().get("values", [])

    def update_values(self, a1_range: str, values: List[List[Any]]) -> dict:
        response = self.session.put(
            self._values_url(a1_range),
            params={"valueInputOption": SHEETS_VALUE_INPUT_OPTION},
            json={"range": a1_range, "majorDimension": "ROWS", "values": values},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()


class SheetRowStore:
    """Wallet rows in columns A-D of one worksheet; metrics go to columns C and D."""

    def __init__(self, client: SheetsClient, sheet_name: str, start_row: int):
        self.client = client
        self.sheet_name = sheet_name
        self.start_row = start_row

    @property
    def wallet_range(self) -> str:
        return (
            f"{quote_sheet_name(self.sheet_name)}!"
            f"{SHEET_WALLET_COLUMN}{self.start_row}:{SHEET_LAST_COLUMN}"
        )

    def metrics_range(self, row_index: int) -> str:
        return (
            f"{quote_sheet_name(self.sheet_name)}!"
            f"{SHEET_ACTIVITIES_COLUMN}{row_index}:{SHEET_HOLDINGS_PNL_COLUMN}{row_index}"
        )

    def load_wallets(self) -> List[WalletRecord]:
        try:
            rows = self.client.read_values(self.wallet_range)
        except requests.RequestException as e:
            raise WalletSourceError(f"Could not read {self.wallet_range}: {e}") from e
        return wallet_records_from_rows(rows, self.start_row)

    def write_metrics(self, row_index: int, activities: str, holdings_pnl: Optional[str]) -> None:
        a1_range = self.metrics_range(row_index)
        try:
            self.client.update_values(a1_range, [[activities, holdings_pnl]])
        except requests.RequestException as e:
            raise SinkWriteError(f"Could not write {a1_range}: {e}") from e
