from rich.console import Console
from rich.markup import escape
from typing import Any, Optional

class OutputManager:
    """
    Manages all output to the terminal, enforcing the 'Clean Pipe' rule.
    - stdout: Reserved for requested data (context names, tables).
    - stderr: Reserved for logs, status messages and the interactive picker.
    """
    def __init__(self):
        # stderr console for human logs/interaction
        self.console = Console(stderr=True)
        # stdout console for data piping
        self.stdout = Console(stderr=False)

    def print(self, renderable: Any):
        """Prints requested data to stdout."""
        self.stdout.print(renderable, markup=False, highlight=False, soft_wrap=True)

    def log(self, message: str, style: Optional[str] = None):
        """Logs a message to stderr."""
        self.console.print(message, style=style)

    def success(self, message: str):
        """Logs a success message to stderr."""
        self.console.print(f"[bold green]✓[/bold green] {escape(message)}")

    def error(self, message: str):
        """Logs an error message to stderr."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    
    def warn(self, message: str):
        """Logs a warning to stderr."""
        self.console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")
