import logging
from pathlib import Path

import click

from ticketing.infrastructure.cli.policy_commands import policy_init, policy_show
from ticketing.infrastructure.cli.purchase_commands import purchase


@click.group()
@click.option(
    "--policy",
    "policy_file",
    envvar="TICKETING_POLICY_FILE",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Ticket policy JSON file.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, policy_file: Path | None, verbose: bool) -> None:
    """Ticket purchase validation and pricing."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = policy_file


@cli.group()
def policy() -> None:
    """Inspect the ticket policy."""


# Register subcommands
cli.add_command(purchase)
policy.add_command(policy_init)
policy.add_command(policy_show)
