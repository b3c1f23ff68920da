from isp_manager.models.transaction import Transaction
from isp_manager.models.subscription import Subscription
from isp_manager.models.member import Member
from isp_manager.models.package import Package
from isp_manager.extension.extensions import reading
from isp_manager.services.validators import is_storable_id

def list_transactions():
    with reading("list transactions"):
        return (Transaction.query
            .join(Subscription, Transaction.subscription_id == Subscription.id)
            .join(Member, Subscription.member_id == Member.id)
            .join(Package, Subscription.package_id == Package.id)
            .order_by(Transaction.id.asc())
            .all())

def list_transactions_by_member(member_id):
    # no existence check: an unknown member simply has no transactions
    if not is_storable_id(member_id):
        return []
    with reading("list member transactions"):
        return (Transaction.query
            .join(Subscription, Transaction.subscription_id == Subscription.id)
            .filter(Subscription.member_id == member_id)
            .order_by(Transaction.id.asc())
            .all())
