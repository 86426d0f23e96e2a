# -*- coding: utf-8 -*-
"""
Runtime settings for the Wallet Metrics Enricher
-------------------------------------------------
Settings are read once from the environment (and an optional .env file) into an
immutable ``Settings`` value that is passed explicitly to every component.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from config.constants import (
    DEFAULT_BACKOFF_BASE_MS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RATE_LIMIT_MS,
    DEFAULT_SCREENSHOT_DIR,
    DEFAULT_SETTLE_DELAY_MS,
    DEFAULT_SHEET_NAME,
    DEFAULT_START_ROW,
    DEFAULT_TIMEOUT_MS,
)
from core.exceptions import ConfigurationError
from models.wallet_record import RetryPolicy

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, immutable after startup."""

    sheet_id: Optional[str]
    service_account_json: Optional[str]
    sheet_name: str = DEFAULT_SHEET_NAME
    csv_path: Optional[str] = None
    start_row: int = DEFAULT_START_ROW
    headless: bool = True
    rate_limit_ms: int = DEFAULT_RATE_LIMIT_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    backoff_base_ms: int = DEFAULT_BACKOFF_BASE_MS
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    settle_delay_ms: int = DEFAULT_SETTLE_DELAY_MS
    screenshot_dir: str = DEFAULT_SCREENSHOT_DIR
    continue_on_error: bool = False

    def retry_policy(self) -> RetryPolicy:
        """Retry policy shared by both metric fetches."""
        return RetryPolicy(max_attempts=self.max_retries, backoff_base_ms=self.backoff_base_ms)

    def validate(self) -> "Settings":
        """Raises ConfigurationError when required values are missing or out of range."""
        if not self.sheet_id:
            raise ConfigurationError("SHEET_ID is required.")
        if not self.service_account_json:
            raise ConfigurationError(
                "GOOGLE_SERVICE_ACCOUNT_JSON is required. Set it to either:\n"
                "  1. A path to your service account JSON file, or\n"
                "  2. The JSON credentials directly as a string"
            )
        if self.start_row < 1:
            raise ConfigurationError(f"START_ROW must be at least 1, got {self.start_row}.")
        if self.max_retries < 1:
            raise ConfigurationError(f"MAX_RETRIES must be at least 1, got {self.max_retries}.")
        for name, value in (
            ("RATE_LIMIT_MS", self.rate_limit_ms),
            ("BACKOFF_BASE_MS", self.backoff_base_ms),
            ("TIMEOUT_MS", self.timeout_ms),
            ("SETTLE_DELAY_MS", self.settle_delay_ms),
        ):
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative, got {value}.")
        return self


def _get_str(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _get_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _get_str(environ, name)
    if raw is None:
        return default
    try:
        return int(raw, 10)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}.") from None


def _get_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _get_str(environ, name)
    if raw is None:
        return default
    return raw.lower() in _TRUE_VALUES


def load_settings(
    environ: Optional[Mapping[str, str]] = None, env_file: Optional[str] = None
) -> Settings:
    """
    Builds Settings from environment variables.

    When ``environ`` is omitted the process environment is used, after loading
    ``env_file`` (or a .env file found from the working directory). Values that
    are already set in the environment win over the .env file.
    """
    if environ is None:
        load_dotenv(dotenv_path=env_file, override=False)
        environ = os.environ

    headless_raw = _get_str(environ, "HEADLESS")

    return Settings(
        sheet_id=_get_str(environ, "SHEET_ID"),
        service_account_json=_get_str(environ, "GOOGLE_SERVICE_ACCOUNT_JSON"),
        sheet_name=_get_str(environ, "SHEET_NAME") or DEFAULT_SHEET_NAME,
        csv_path=_get_str(environ, "CSV_PATH"),
        start_row=_get_int(environ, "START_ROW", DEFAULT_START_ROW),
        # Only the literal "false" turns headless mode off.
        headless=headless_raw != "false",
        rate_limit_ms=_get_int(environ, "RATE_LIMIT_MS", DEFAULT_RATE_LIMIT_MS),
        max_retries=_get_int(environ, "MAX_RETRIES", DEFAULT_MAX_RETRIES),
        backoff_base_ms=_get_int(environ, "BACKOFF_BASE_MS", DEFAULT_BACKOFF_BASE_MS),
        timeout_ms=_get_int(environ, "TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
        settle_delay_ms=_get_int(environ, "SETTLE_DELAY_MS", DEFAULT_SETTLE_DELAY_MS),
        screenshot_dir=_get_str(environ, "SCREENSHOT_DIR") or DEFAULT_SCREENSHOT_DIR,
        continue_on_error=_get_bool(environ, "CONTINUE_ON_ERROR", False),
    )
