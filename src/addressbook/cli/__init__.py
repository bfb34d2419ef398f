"""
addressbook CLI - Command Line Interface

Provides add/delete/search/list commands over a file-backed address book.
"""

from .app import cli, main, setup_logging

__all__ = ["cli", "main", "setup_logging"]
