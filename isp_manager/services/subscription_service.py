from datetime import datetime, timezone
from dateutil.relativedelta import relativedelta
from flask import current_app
from isp_manager.models.subscription import Subscription, SubscriptionStatus
from isp_manager.models.transaction import Transaction, PaymentStatus
from isp_manager.models.member import Member
from isp_manager.models.package import Package
from isp_manager.extension.extensions import db, atomic, reading
from isp_manager.errors import NotFoundError
from isp_manager.services.validators import require_payload, require_id

def _now():
    return datetime.now(timezone.utc)

def list_subscriptions():
    with reading("list subscriptions"):
        return (Subscription.query
            .join(Member, Subscription.member_id == Member.id)
            .join(Package, Subscription.package_id == Package.id)
            .order_by(Subscription.id.asc())
            .all())

def derive_status(end_date, now=None):
    """Status is decided once, at creation, and never re-evaluated by the services."""
    now = now or _now()
    return SubscriptionStatus.expired if end_date < now else SubscriptionStatus.active

def _open_transaction(sub, pkg, start):
    # amount is copied, later price changes never reach it
    return Transaction(
        subscription_id=sub.id,
        transaction_date=start,
        amount=pkg.price,
        payment_status=PaymentStatus.PENDING
    )

def create_subscription(data):
    """
    Subscribe a member to a package.

    Writes the subscription and its pending transaction in one commit;
    if either insert fails neither is kept.
    """
    data = require_payload(data)
    member_id = require_id(data, 'member_id')
    package_id = require_id(data, 'package_id')

    with reading("load subscription parties"):
        member = db.session.get(Member, member_id)
        pkg = db.session.get(Package, package_id)
    if member is None:
        current_app.logger.warning(f"Subscription rejected: member {member_id} not found")
        raise NotFoundError(f"Member with id {member_id} not found", details={"member_id": member_id})
    if pkg is None:
        current_app.logger.warning(f"Subscription rejected: package {package_id} not found")
        raise NotFoundError(f"Package with id {package_id} not found", details={"package_id": package_id})

    start = _now()
    end = start + relativedelta(days=pkg.active_duration)
    sub = Subscription(
        member_id=member.id, package_id=pkg.id,
        start_date=start,
        end_date=end,
        status=derive_status(end)
    )
    with atomic("create subscription"):
        db.session.add(sub)
        db.session.flush()   # need sub.id for the transaction row
        db.session.add(_open_transaction(sub, pkg, start))

    current_app.logger.info(
        f"Member {member_id} subscribed to package {package_id}: "
        f"subscription {sub.id} ({sub.status.value}) until {end.isoformat()}"
    )
    return sub

def expire_subscriptions(now=None):
    """
    Mark active subscriptions whose end_date has passed as expired.

    Only the `flask expire-subscriptions` command calls this; no service
    operation or timer does.
    """
    now = now or _now()
    with reading("find lapsed subscriptions"):
        due = (Subscription.query
            .filter(Subscription.status == SubscriptionStatus.active)
            .filter(Subscription.end_date <= now)
            .all())
    if not due:
        return 0
    with atomic("expire subscriptions"):
        for sub in due:
            sub.status = SubscriptionStatus.expired
    current_app.logger.info(f"Expired {len(due)} subscription(s)")
    return len(due)
