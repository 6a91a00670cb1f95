#!/usr/bin/env python3
"""
Ledger CLI - Balances, Settlement and Grouped View

Command-line access to the shared expense ledger of one trip snapshot.
"""

import click

from ..core.json_utils import format_json
from ..core.money import Money
from ..ledger import LedgerError, TripSnapshot, aggregate, build_view, load_snapshot, plan, verify_settlement


def _load(snapshot_path: str) -> TripSnapshot:
    try:
        return load_snapshot(snapshot_path)
    except FileNotFoundError as e:
        raise click.ClickException(str(e))
    except LedgerError as e:
        raise click.ClickException(f"Invalid snapshot: {e}")


@click.group()
def ledger() -> None:
    """Shared expense ledger commands."""
    pass


@ledger.command()
@click.argument("snapshot", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print balances as JSON")
def balances(snapshot: str, as_json: bool) -> None:
    """
    Show each member's paid total, share and net balance.

    Example:
      tripsplit ledger balances trip.json
    """
    trip = _load(snapshot)
    try:
        result = aggregate(trip.expenses, trip.members)
    except LedgerError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(format_json([b.to_dict() for b in result.values()]))
        return

    click.echo(f"Balances ({trip.currency}):")
    click.echo("=" * 60)
    for balance in result.values():
        click.echo(f"\n{balance.member.name}")
        click.echo(f"  Paid:  {balance.paid.format(trip.currency)}")
        click.echo(f"  Share: {balance.owed_share.format(trip.currency)}")
        click.echo(f"  Net:   {balance.net.format(trip.currency)}")
        if not balance.personal.is_zero():
            click.echo(f"  Personal: {balance.personal.format(trip.currency)}")


@ledger.command()
@click.argument("snapshot", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print transfers as JSON")
@click.pass_context
def settle(ctx: click.Context, snapshot: str, as_json: bool) -> None:
    """
    Show the transfers that settle all balances.

    Example:
      tripsplit ledger settle trip.json
    """
    trip = _load(snapshot)
    try:
        trip_balances = aggregate(trip.expenses, trip.members)
        transfers = plan(trip_balances)
    except LedgerError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(format_json([t.to_dict() for t in transfers]))
        return

    if not transfers:
        click.echo("Everyone is settled up.")
        return

    click.echo("Settlement:")
    click.echo("=" * 40)
    for transfer in transfers:
        click.echo(
            f"{transfer.from_member.name} pays {transfer.to_member.name} "
            f"{transfer.amount.format(trip.currency)}"
        )

    total = sum((t.amount for t in transfers), Money.zero())
    click.echo(f"\n{'-' * 40}")
    click.echo(f"Total: {len(transfers)} transfers, {total.format(trip.currency)}")

    if (ctx.obj or {}).get("verbose") and not verify_settlement(trip_balances, transfers):
        click.echo("Warning: transfers leave residual balances above one cent")


@ledger.command()
@click.argument("snapshot", type=click.Path(dir_okay=False))
@click.option("--budget", help="Trip budget (overrides the snapshot budget)")
@click.option("--json", "as_json", is_flag=True, help="Print the view as JSON")
def view(snapshot: str, budget: str | None, as_json: bool) -> None:
    """
    Show logged and planned expenses grouped by date, with totals.

    Examples:
      tripsplit ledger view trip.json
      tripsplit ledger view trip.json --budget 2500
    """
    trip = _load(snapshot)

    trip_budget = trip.budget
    if budget is not None:
        try:
            trip_budget = Money.from_value(budget)
        except ValueError:
            raise click.ClickException(f"Invalid budget: {budget}")

    try:
        result = build_view(trip.expenses, trip.planned_expenses, trip.members, trip_budget)
    except LedgerError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(format_json(result.to_dict()))
        return

    currency = result.currency
    for group in result.groups:
        heading = "Unscheduled" if group.is_unscheduled else str(group.date)
        click.echo(f"\n{heading}")
        for entry in group.entries:
            if entry.paid_by is not None:
                detail = f"paid by {entry.paid_by.name}"
            else:
                detail = f"planned, {entry.per_person_estimate.format(currency)} per person"
            click.echo(f"  {entry.title}: {entry.amount.format(currency)} ({entry.category}, {detail})")

    click.echo(f"\n{'-' * 40}")
    click.echo(f"Spent:   {result.total_manual_spent.format(currency)}")
    click.echo(f"Planned: {result.total_planned.format(currency)}")
    if result.percent_of_budget is not None:
        click.echo(f"Budget used: {result.percent_of_budget}%")

    if result.paid_by_member:
        click.echo("\nPaid by member:")
        for member_total in result.paid_by_member:
            click.echo(f"  {member_total.member.name}: {member_total.total.format(currency)}")
