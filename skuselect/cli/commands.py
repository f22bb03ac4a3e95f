"""CLI commands for skuselect."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import click

from skuselect.cli.output import SelectionOutput
from skuselect.config import SelectorConfig, load_config
from skuselect.errors import SkuSelectError
from skuselect.selection.resolver import VariantSummary
from skuselect.selector import SkuSelector


def setup_logging(config: SelectorConfig) -> None:
    """Configure logging from the verbosity flag and configured level."""
    level = logging.DEBUG if config.verbose else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_choice(raw: str) -> tuple[str, str]:
    """Split ``DIMENSION=VALUE``."""
    dimension, sep, value = raw.partition("=")
    if not sep or not dimension or not value:
        raise click.BadParameter(f"expected DIMENSION=VALUE, got '{raw}'", param_hint="--select")
    return dimension, value


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """skuselect - resolve variant choices against a stocked catalog."""
    ctx.ensure_object(dict)

    config_obj = load_config(config)
    if verbose:
        config_obj.verbose = True

    ctx.obj["config"] = config_obj
    setup_logging(config_obj)


@cli.command()
@click.argument("catalog_path", type=click.Path())
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.pass_context
def index(ctx: click.Context, catalog_path: str, output_format: str) -> None:
    """Show the path index built from CATALOG_PATH."""
    selector = _open_selector(ctx, catalog_path)

    if output_format == "json":
        click.echo(json.dumps({k: list(v) for k, v in selector.index.items()}, indent=2))
        return

    output = SelectionOutput()
    output.header(f"Path index: {catalog_path}")
    output.index_table(selector.index)
    output.header("Initial state")
    output.state_table(selector.state)


@cli.command()
@click.argument("catalog_path", type=click.Path())
@click.option(
    "--select",
    "-s",
    "choices",
    multiple=True,
    help="Toggle DIMENSION=VALUE (repeatable, applied in order)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.pass_context
def select(
    ctx: click.Context,
    catalog_path: str,
    choices: tuple[str, ...],
    output_format: str,
) -> None:
    """Apply toggles to CATALOG_PATH and show the resulting state.

    Every toggle that completes the selection emits a variant summary.
    """
    parsed = [parse_choice(raw) for raw in choices]
    changes: list[VariantSummary] = []
    selector = _open_selector(ctx, catalog_path)
    selector.listeners.subscribe(changes.append)

    ignored: list[str] = []
    for dimension, value in parsed:
        try:
            if selector.state.value(dimension, value).disabled:
                ignored.append(f"{dimension}={value}")
            selector.toggle(dimension, value)
        except SkuSelectError as e:
            click.echo(str(e), err=True)
            sys.exit(1)

    if output_format == "json":
        result: dict[str, Any] = {
            "selected": selector.state.selected_map(),
            "disabled": selector.state.disabled_names(),
            "ignored": ignored,
            "changes": [summary.to_dict() for summary in changes],
        }
        click.echo(json.dumps(result, indent=2, default=str))
        return

    output = SelectionOutput()
    for choice in ignored:
        output.error(f"Ignored disabled choice {choice}")
    output.header("Selection")
    output.state_table(selector.state)
    if changes:
        output.header("Changes")
        for summary in changes:
            output.summary(summary)


def _open_selector(ctx: click.Context, catalog_path: str) -> SkuSelector:
    config: SelectorConfig = ctx.obj["config"]
    try:
        return SkuSelector.from_file(catalog_path, config=config)
    except SkuSelectError as e:
        click.echo(e.format_verbose(), err=True)
        sys.exit(1)
