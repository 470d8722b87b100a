import logging

import click

from order_totals.infrastructure.cli.order_commands import order_totals


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Order Totals — monetary summaries for orders"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.group()
def order() -> None:
    """Inspect orders."""


# Register subcommands
order.add_command(order_totals)
