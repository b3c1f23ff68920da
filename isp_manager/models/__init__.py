# isp_manager/models/__init__.py

# Import models in the correct order so string relationships resolve
from .package import Package
from .member import Member
from .subscription import Subscription, SubscriptionStatus
from .transaction import Transaction, PaymentStatus


# Make them available when importing from this module
__all__ = ['Package', 'Member', 'Subscription', 'SubscriptionStatus', 'Transaction', 'PaymentStatus']
