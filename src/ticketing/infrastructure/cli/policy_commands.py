"""CLI commands for the ticket policy."""

from __future__ import annotations

from pathlib import Path

import click

from ticketing.application.show_policy import ShowPolicyHandler
from ticketing.domain.exceptions import DomainException
from ticketing.domain.model.policy import DEFAULT_POLICY
from ticketing.infrastructure.bootstrap import ticket_policy
from ticketing.infrastructure.config.json_policy_loader import JsonPolicyLoader


@click.command("show")
@click.pass_obj
def policy_show(policy_file: Path | None) -> None:
    """Show prices, seat allocations and the ticket limit."""
    try:
        dto = ShowPolicyHandler(ticket_policy(policy_file)).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Maximum tickets per purchase: {dto.maximum_tickets}")
    click.echo(f"Currency: {dto.currency}")
    click.echo()
    click.echo(f"{'Type':<12} {'Price':>10} {'Seats':>6}")
    click.echo("-" * 30)
    for line in dto.lines:
        click.echo(f"{line.ticket_type:<12} {line.price:>10} {line.seat_allocation:>6}")


@click.command("init")
@click.option(
    "--output",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the policy file.",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing file.")
def policy_init(output: Path, force: bool) -> None:
    """Write the built-in policy to a JSON file for editing."""
    if output.exists() and not force:
        raise click.ClickException(f"{output} already exists (use --force to overwrite)")

    JsonPolicyLoader(output).save(DEFAULT_POLICY)
    click.echo(f"Default policy written to {output}")
