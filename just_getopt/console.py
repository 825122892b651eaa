# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Just Getopt command-line output."""
from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "option": "bold cyan",
        "value": "green",
        "other": "white",
        "unknown": "bold red",
        "missing": "yellow",
        "dim": "grey50",
    }
)

console = Console(theme=theme)
error_console = Console(theme=theme, stderr=True)
