"""Frontends for life boards."""

from .cli import CLILifeRunner

__all__ = ["CLILifeRunner"]
