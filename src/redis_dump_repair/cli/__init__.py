"""Command-line interface module for redis dump repair."""

from .main import main

__all__ = ["main"]
