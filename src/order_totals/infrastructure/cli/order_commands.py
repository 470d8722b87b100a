"""CLI commands for order totals."""

from __future__ import annotations

import json
from pathlib import Path

import click

from order_totals.application.show_order_total import (
    ShowOrderTotalHandler,
    resolve_order_total,
)
from order_totals.domain.exceptions import DomainException
from order_totals.infrastructure.bootstrap import order_repository
from order_totals.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def _load_document(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"'{path}' is not valid JSON: {exc}")


@click.command("totals")
@click.option("--id", "increment_id", default=None, help="Increment ID of a stored order.")
@click.option(
    "--file",
    "file_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Format a single order document instead of a stored one.",
)
def order_totals(increment_id: str | None, file_path: Path | None) -> None:
    """Print the monetary summary of an order as JSON."""
    if (increment_id is None) == (file_path is None):
        raise click.UsageError("Specify exactly one of --id or --file")

    try:
        if file_path is not None:
            order = JsonOrderRepository.to_domain(_load_document(file_path))
            result = resolve_order_total({"model": order})
        else:
            result = ShowOrderTotalHandler(order_repository()).handle(increment_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(result, indent=2, default=str))
