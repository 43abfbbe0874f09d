"""Operator-facing log lines, printed the same way throughout the tool."""

from __future__ import annotations


def log_message(message: str, level: str = "INFO") -> None:
    print(f"[{level}] {message}")


def log_heading(title: str) -> None:
    """Print a section heading that separates the phases of a run."""
    print()
    print(f"=== {title} ===")
