"""CLI command for purchasing tickets."""

from __future__ import annotations

from pathlib import Path

import click

from ticketing.domain.exceptions import DomainException
from ticketing.domain.model.ticket_type import TicketTypeRequest
from ticketing.infrastructure.bootstrap import purchase_handler, ticket_policy


def _parse_tickets(raw: str) -> list[TicketTypeRequest]:
    """Parse 'ADULT:2,CHILD:1' into TicketTypeRequest list."""
    requests: list[TicketTypeRequest] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid ticket format '{pair}'. Expected 'TYPE:Count'.",
                param_hint="--tickets",
            )
        type_id, count_str = pair.rsplit(":", 1)
        try:
            count = int(count_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid count '{count_str}' for ticket type '{type_id}'.",
                param_hint="--tickets",
            )
        try:
            requests.append(TicketTypeRequest(type_id.strip().upper(), count))
        except DomainException as exc:
            raise click.BadParameter(str(exc), param_hint="--tickets")
    return requests


@click.command("purchase")
@click.option("--account", "account_id", required=True, type=int, help="Account ID.")
@click.option("--tickets", required=True, help="Tickets as 'TYPE:Count,TYPE:Count'.")
@click.pass_obj
def purchase(policy_file: Path | None, account_id: int, tickets: str) -> None:
    """Purchase tickets (reserves seats, then takes payment)."""
    requests = _parse_tickets(tickets)

    try:
        handler = purchase_handler(ticket_policy(policy_file))
        result = handler.handle(account_id, *requests)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.message)
    click.echo()
    click.echo(f"  {'Tickets':<16} {result.ticket_count:>10}")
    click.echo(f"  {'Seats reserved':<16} {result.seats_reserved:>10}")
    click.echo(f"  {'Total cost':<16} {str(result.total_cost):>10}")
