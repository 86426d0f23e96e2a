# -*- coding: utf-8 -*-
"""
Configuration constants for the Wallet Metrics Enricher
"""

# Source pages (formatted with the wallet address)
SOLSCAN_ACTIVITIES_URL_TEMPLATE = "https://solscan.io/account/{}#activities"
JUPITER_PORTFOLIO_URL_TEMPLATE = "https://jup.ag/portfolio/{}"
SOLSCAN_LABEL = "Solscan"
JUPITER_LABEL = "Jupiter"
ACTIVITIES_VIEW_MARKER = "#activities"

# Google Sheets API
SHEETS_API_BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
SHEETS_VALUE_INPUT_OPTION = "USER_ENTERED"
SHEETS_REQUEST_TIMEOUT_SECONDS = 30
SHEET_WALLET_COLUMN = "A"
SHEET_LAST_COLUMN = "D"
SHEET_ACTIVITIES_COLUMN = "C"
SHEET_HOLDINGS_PNL_COLUMN = "D"

# CSV wallet columns, matched case-insensitively in this order
CSV_WALLET_COLUMNS = ["wallet", "address"]

# Defaults (overridable through the environment)
DEFAULT_SHEET_NAME = "Sheet1"
DEFAULT_START_ROW = 2
DEFAULT_RATE_LIMIT_MS = 2000
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_BASE_MS = 2000
DEFAULT_TIMEOUT_MS = 45000
DEFAULT_SETTLE_DELAY_MS = 3000
DEFAULT_SCREENSHOT_DIR = "screenshots"

# Anti-bot challenge markers
CHALLENGE_TITLE_PHRASES = ["just a moment", "attention required"]
CHALLENGE_URL_SEGMENTS = ["challenge-platform", "/cdn-cgi/challenge"]
CHALLENGE_SELECTORS = [
    "text=verify you are human",
    "text=complete the security check",
    "#challenge-form",
    ".cf-challenge-running",
    "#cf-challenge-running",
]

# Browser
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
BROWSER_VIEWPORT = {"width": 1920, "height": 1080}
BROWSER_EXTRA_HEADERS = {
    "Accept-Language": "en-US,en;q=0.9",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
}
BROWSER_LAUNCH_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--disable-dev-shm-usage",
]
NAVIGATION_WAIT_UNTIL = "domcontentloaded"

# Logging
ACTIVITY_SNIPPET_RADIUS = 50
