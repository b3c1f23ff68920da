import click
from flask.cli import with_appcontext
from flask_jwt_extended import create_access_token
from isp_manager.extension.extensions import db
from isp_manager.middleware.role_guard import ROLES, CUSTOMER


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create all tables (packages, members, subscriptions, transactions)"""
    db.create_all()
    click.echo("✅ Database tables created")


@click.command('issue-token')
@click.option('--role', type=click.Choice(ROLES), default='admin', help='Caller role')
@click.option('--member-id', type=int, default=None, help='Member id (required for customers)')
@with_appcontext
def issue_token_command(role, member_id):
    """
    Mint a bearer token for a demo caller

    Usage:
        flask issue-token --role admin
        flask issue-token --role customer --member-id 1
    """
    if role == CUSTOMER and member_id is None:
        raise click.UsageError("--member-id is required for customer tokens")

    claims = {"role": role}
    if member_id is not None:
        claims["member_id"] = member_id
    identity = f"member:{member_id}" if member_id is not None else role
    click.echo(create_access_token(identity=identity, additional_claims=claims))


@click.command('list-subscriptions')
@click.option('--member-id', type=int, help='Filter by member ID')
@with_appcontext
def list_subscriptions_command(member_id):
    """
    List subscriptions with their package and payment state

    Usage:
        flask list-subscriptions
        flask list-subscriptions --member-id=1
    """
    from isp_manager.models.subscription import Subscription

    query = Subscription.query
    if member_id:
        query = query.filter_by(member_id=member_id)
        click.echo(f"\n📋 Subscriptions for Member {member_id}:")
    else:
        click.echo("\n📋 All Subscriptions:")

    subs = query.order_by(Subscription.id.asc()).all()
    if not subs:
        click.echo("No subscriptions found.\n")
        return

    click.echo(f"\n{'ID':<5} {'Member':<8} {'Package':<20} {'Status':<10} {'Ends':<20} {'Amount':<10} {'Payment'}")
    click.echo("-" * 90)
    for sub in subs:
        txn = sub.transactions[0] if sub.transactions else None
        amount = f"{float(txn.amount):.2f}" if txn else "-"
        payment = txn.payment_status if txn else "-"
        click.echo(
            f"{sub.id:<5} {sub.member_id:<8} {sub.package.name[:20]:<20} "
            f"{sub.status.value:<10} {sub.end_date.strftime('%Y-%m-%d %H:%M'):<20} "
            f"{amount:<10} {payment}"
        )

    active = sum(1 for s in subs if s.status.value == 'active')
    click.echo(f"\nTotal: {len(subs)} subscription(s)")
    click.echo(f"Active: {active} | Expired: {len(subs) - active}\n")


@click.command('expire-subscriptions')
@with_appcontext
def expire_subscriptions_command():
    """
    Mark active subscriptions past their end date as expired

    Nothing runs this automatically; invoke it by hand or from cron.

    Usage: flask expire-subscriptions
    """
    from isp_manager.services.subscription_service import expire_subscriptions

    click.echo("🔍 Checking for expired subscriptions...")
    count = expire_subscriptions()
    if count > 0:
        click.echo(f"✅ Expired {count} subscription(s)")
    else:
        click.echo("✓ No subscriptions to expire")


def register_commands(app):
    for command in (init_db_command, issue_token_command,
                    list_subscriptions_command, expire_subscriptions_command):
        app.cli.add_command(command)
