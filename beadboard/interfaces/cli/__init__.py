"""
CLI interface package.
Console output for the server starter.
"""

from .cli_ui import InfoPanel, print_error, print_info, show_startup_banner

__all__ = ["InfoPanel", "print_error", "print_info", "show_startup_banner"]
