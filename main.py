"""
addressbook - Plain-text address book

Main entry point for the addressbook command line.
"""

from addressbook.cli import cli


if __name__ == "__main__":
    cli()
