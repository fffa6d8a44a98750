"""
Rich console helpers for request/response tracing.

Traces go to stderr so stdout only carries fetched bodies.
"""
from typing import Dict, Mapping, Optional

from rich.console import Console
from rich.panel import Panel

console = Console(stderr=True)

SENSITIVE_HEADERS = ("authorization", "proxy-authorization", "x-api-key")


def mask_value(val: Optional[str], visible_chars: int = 10) -> str:
    """Mask sensitive value for logging, showing the first visible_chars chars."""
    if not val:
        return "<empty>"
    if len(val) <= visible_chars:
        return "*" * len(val)
    return val[:visible_chars] + "*" * (len(val) - visible_chars)


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Copy of headers with sensitive values masked."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = mask_value(masked[key], 15)
    return masked


def print_panel(content: str, title: Optional[str] = None) -> None:
    """Print content in a box."""
    console.print(Panel(content, title=title))


def print_request(method: str, url: str, headers: Mapping[str, str]) -> None:
    print_panel(f"[bold cyan]{method}[/bold cyan] {url}", title="[bold blue]Request[/bold blue]")
    console.print("[bold]Headers:[/bold]", mask_headers(headers))


def print_response(status_code: int, reason_phrase: str, url: str) -> None:
    status_color = "green" if 200 <= status_code < 300 else "red"
    print_panel(
        f"[bold {status_color}]{status_code}[/bold {status_color}] {reason_phrase}",
        title=f"[bold blue]Response[/bold blue] ({url})",
    )
