# -*- coding: utf-8 -*-
"""
Console Theme for the Wallet Metrics Enricher
"""

from colorama import Fore, Style


class ConsoleTheme:
    """Colors and symbols shared by every console message."""

    def __init__(self):
        # Message colors
        self.PRIMARY = Fore.WHITE + Style.BRIGHT
        self.ACCENT = Fore.CYAN + Style.BRIGHT
        self.SUCCESS = Fore.GREEN + Style.BRIGHT
        self.ERROR = Fore.RED + Style.BRIGHT
        self.WARNING = Fore.YELLOW + Style.BRIGHT
        self.INFO = Fore.BLUE + Style.BRIGHT
        self.PROMPT = Fore.MAGENTA + Style.BRIGHT
        self.SUBTLE = Style.DIM
        self.RESET = Style.RESET_ALL

        # Symbols
        self.CHECKMARK = "✓"
        self.CROSS = "✗"
        self.WARNING_SYMBOL = "⚠"
        self.INFO_SYMBOL = "ℹ"
        self.PAUSE_SYMBOL = "⏸"


# Global theme instance
theme = ConsoleTheme()
