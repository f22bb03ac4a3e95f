"""Rich terminal rendering for the skuselect CLI."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from skuselect.index.builder import PathIndex
from skuselect.selection.resolver import VariantSummary
from skuselect.selection.state import SelectionState


class SelectionOutput:
    """Renders path indexes, selection flags and summaries."""

    SYMBOLS = {"selected": "●", "enabled": "○", "disabled": "✗"}
    ASCII_SYMBOLS = {"selected": "*", "enabled": "o", "disabled": "x"}

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self._use_unicode = self._supports_unicode()

    def _supports_unicode(self) -> bool:
        encoding = getattr(sys.stdout, "encoding", None)
        return encoding is not None and "utf" in encoding.lower()

    def _symbol(self, name: str) -> str:
        symbols = self.SYMBOLS if self._use_unicode else self.ASCII_SYMBOLS
        return symbols[name]

    def header(self, text: str) -> None:
        self.console.print()
        self.console.rule(f"[bold]{escape(text)}[/bold]", style="blue")

    def error(self, message: str) -> None:
        self.console.print(f"[red]{escape(message)}[/red]")

    def index_table(self, index: PathIndex) -> None:
        """Display every key of the index with its variant ids."""
        table = Table(show_header=True, header_style="bold dim", box=None, padding=(0, 1))
        table.add_column("Key")
        table.add_column("Variants", style="cyan")

        for key, ids in index.items():
            table.add_row(escape(key), escape(", ".join(str(i) for i in ids)))

        self.console.print(table)
        self.console.print(f"[dim]{len(index)} key(s)[/dim]")

    def state_table(self, state: SelectionState) -> None:
        """Display the selected/disabled flags of every value."""
        table = Table(show_header=True, header_style="bold dim", box=None, padding=(0, 1))
        table.add_column("Dimension", style="bold")
        table.add_column("Values")

        for dimension in state.dimensions:
            cells = []
            for value in dimension.values:
                if value.selected:
                    cells.append(f"[green]{self._symbol('selected')} {escape(value.name)}[/green]")
                elif value.disabled:
                    cells.append(f"[dim]{self._symbol('disabled')} {escape(value.name)}[/dim]")
                else:
                    cells.append(f"{self._symbol('enabled')} {escape(value.name)}")
            table.add_row(escape(dimension.name), "  ".join(cells))

        self.console.print(table)

    def summary(self, summary: VariantSummary) -> None:
        """Display an emitted variant summary."""
        price = f"{summary.price:g}"
        if summary.old_price is not None:
            price = f"{price} (was {summary.old_price:g})"
        self.console.print(f"[green]Resolved variant[/green] {escape(str(summary.id))}")
        self.console.print(f"  {escape(summary.description)}")
        self.console.print(f"  price {price}, inventory {summary.inventory}")
