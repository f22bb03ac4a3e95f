"""skuselect CLI - Command line interface for skuselect."""

from skuselect.cli.commands import cli
from skuselect.cli.output import SelectionOutput


def main() -> None:
    """Main entry point for the skuselect CLI."""
    cli()


__all__ = ["main", "cli", "SelectionOutput"]
