#!/usr/bin/env python3
"""
Rich UI components for the command line starter.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel

console = Console()

# Color scheme constants
COLOR_ERROR = "red"
COLOR_INFO = "cyan"


class InfoPanel:
    """
    Simple panel for displaying status/info without progress tracking.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO, target: Console | None = None):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        (target or console).print(panel)


def show_startup_banner(url: str, town_root: str, sources: int, target: Console | None = None):
    """Print where the dashboard listens and what it aggregates."""
    content = "\n".join(
        [
            f"Dashboard: [bold]{url}[/bold]",
            f"Town:      {town_root}",
            f"Sources:   {sources} bead location(s)",
        ]
    )
    InfoPanel.show("Beadboard", content, target=target)


def print_error(message: str, target: Console | None = None):
    """Print an error message."""
    (target or console).print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_info(message: str, target: Console | None = None):
    """Print an info message."""
    (target or console).print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {message}")
