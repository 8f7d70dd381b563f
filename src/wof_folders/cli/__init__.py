"""
CLI package for wof_folders.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from wof_folders.cli.app import app, main

__all__ = [
    "app",
    "main",
]
