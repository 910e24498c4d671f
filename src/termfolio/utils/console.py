"""Shared Rich console instance."""

from rich.console import Console

# Global console instance
console = Console()
