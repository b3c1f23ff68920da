from flask import current_app
from isp_manager.models.member import Member
from isp_manager.models.subscription import Subscription, SubscriptionStatus
from isp_manager.extension.extensions import db, atomic, reading
from isp_manager.errors import NotFoundError, ConflictError
from isp_manager.services.password_service import hash_password, verify_password as _verify_hash
from isp_manager.services.validators import require_payload, require_text, parse_email, parse_password, is_storable_id

TEXT_FIELDS = ('full_name', 'address', 'phone_number', 'username')

def get_member(member_id):
    member = None
    if is_storable_id(member_id):
        with reading("load member"):
            member = db.session.get(Member, member_id)
    if member is None:
        raise NotFoundError(f"Member with id {member_id} not found", details={"id": member_id})
    return member

def list_members():
    # includes the password hash; callers decide what to expose
    with reading("list members"):
        return Member.query.order_by(Member.id.asc()).all()

def create_member(data):
    data = require_payload(data)
    fields = {f: require_text(data, f) for f in TEXT_FIELDS}
    fields['email'] = parse_email(data)
    password = parse_password(data)

    member = Member(password=hash_password(password), **fields)
    with atomic("create member"):
        db.session.add(member)
    current_app.logger.info(f"Created member {member.id} ({member.username})")
    return member

def update_member(member_id, data):
    data = require_payload(data)
    member = get_member(member_id)
    changes = {f: require_text(data, f) for f in TEXT_FIELDS if f in data}
    if 'email' in data:
        changes['email'] = parse_email(data)
    if 'password' in data:
        # same guarantee as create: plaintext never reaches the table
        changes['password'] = hash_password(parse_password(data))

    with atomic("update member"):
        for k, v in changes.items():
            setattr(member, k, v)
    current_app.logger.info(f"Updated member {member.id}: {sorted(changes)}")
    return member

def delete_member(member_id):
    """
    Delete a member together with its expired subscriptions.

    Blocked while any subscription is active. Subscriptions and member go
    in one commit; transactions are not touched, so a store that enforces
    the transactions foreign key rejects the whole unit.
    """
    member = get_member(member_id)
    with reading("check member subscriptions"):
        active = (Subscription.query
            .filter(Subscription.member_id == member.id)
            .filter(Subscription.status == SubscriptionStatus.active)
            .count())
    if active:
        current_app.logger.warning(f"Refusing to delete member {member.id}: {active} active subscription(s)")
        raise ConflictError(
            "Cannot delete member with active subscriptions",
            details={"id": member.id, "active_subscriptions": active}
        )

    with atomic("delete member"):
        subs = Subscription.query.filter_by(member_id=member.id).all()
        for sub in subs:
            db.session.delete(sub)
        db.session.delete(member)
    current_app.logger.info(f"Deleted member {member_id} and {len(subs)} expired subscription(s)")
    return True

def verify_password(member, password):
    return _verify_hash(password, member.password)
