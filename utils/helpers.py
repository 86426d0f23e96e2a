# -*- coding: utf-8 -*-
"""
Console output and small utility functions for the Wallet Metrics Enricher
"""
import json
import re
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Import the console theme
from utils.display_theme import theme

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9_.-]")


def get_current_timestamp_iso() -> str:
    """Returns the current UTC time in ISO format."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_current_timestamp_ms() -> int:
    """Returns the current UTC time in milliseconds since epoch."""
    return int(time.time() * 1000)


def format_context(context: Optional[Dict[str, Any]]) -> str:
    """Renders a log context dict as compact JSON, or an empty string."""
    if not context:
        return ""
    return " " + json.dumps(context, default=str, separators=(",", ":"))


def _emit(color: str, symbol: str, text: str, context: Optional[Dict[str, Any]]) -> None:
    print(
        f"{theme.SUBTLE}[{get_current_timestamp_iso()}]{theme.RESET} "
        f"{color}{symbol} {text}{theme.RESET}{format_context(context)}"
    )


def print_header(text: str, width: int = 70):
    """Prints a formatted header."""
    print(f"\n{theme.PRIMARY}{'═' * width}{theme.RESET}")
    print(f"{theme.ACCENT}{text.center(width)}{theme.RESET}")
    print(f"{theme.PRIMARY}{'═' * width}{theme.RESET}")


def print_success(text: str, context: Optional[Dict[str, Any]] = None):
    """Prints a success message."""
    _emit(theme.SUCCESS, theme.CHECKMARK, text, context)


def print_error(text: str, context: Optional[Dict[str, Any]] = None):
    """Prints an error message."""
    _emit(theme.ERROR, theme.CROSS, f"Error: {text}", context)


def print_warning(text: str, context: Optional[Dict[str, Any]] = None):
    """Prints a warning message."""
    _emit(theme.WARNING, theme.WARNING_SYMBOL, f"Warning: {text}", context)


def print_info(text: str, context: Optional[Dict[str, Any]] = None):
    """Prints an informational message."""
    _emit(theme.INFO, theme.INFO_SYMBOL, text, context)


def print_prompt(text: str):
    """Prints a message that asks the operator to act."""
    _emit(theme.PROMPT, theme.PAUSE_SYMBOL, text, None)


def print_key_value(key: str, value: Any, key_width: int = 20):
    """Prints a key-value pair with consistent formatting."""
    print(f"  {theme.SUBTLE}{key:<{key_width}}{theme.RESET} {theme.PRIMARY}{value}{theme.RESET}")


def safe_filename(name: str) -> str:
    """Replaces every character outside [a-zA-Z0-9_.-] with an underscore."""
    return _UNSAFE_FILENAME_CHARS.sub("_", name)


def is_blank(value: Optional[str]) -> bool:
    """True for None and whitespace-only strings."""
    return value is None or not str(value).strip()
