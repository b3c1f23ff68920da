# isp_manager/services/payload_formatters.py
from decimal import Decimal
from typing import Any, Dict, Optional

from isp_manager.services.validators import MONEY_QUANTUM

def _to_money(val: Any) -> Optional[float]:
    # Decimal stays exact until the JSON boundary
    if val is None:
        return None
    return float(Decimal(str(val)).quantize(MONEY_QUANTUM))

def _to_timestamp(val: Any) -> Optional[str]:
    return val.isoformat() if val is not None else None

def format_package(pkg) -> Dict[str, Any]:
    return {
        "id": pkg.id,
        "name": pkg.name,
        "speed": pkg.speed,
        "price": _to_money(pkg.price),
        "active_duration": pkg.active_duration,
        "created_at": _to_timestamp(pkg.created_at),
    }

def format_member(member) -> Dict[str, Any]:
    return {
        "id": member.id,
        "full_name": member.full_name,
        "address": member.address,
        "phone_number": member.phone_number,
        "email": member.email,
        "username": member.username,
        "password": member.password,   # bcrypt hash
        "created_at": _to_timestamp(member.created_at),
    }

def format_subscription(sub) -> Dict[str, Any]:
    return {
        "id": sub.id,
        "member_id": sub.member_id,
        "package_id": sub.package_id,
        "start_date": _to_timestamp(sub.start_date),
        "end_date": _to_timestamp(sub.end_date),
        "status": sub.status.value,
        "created_at": _to_timestamp(sub.created_at),
    }

def format_transaction(txn) -> Dict[str, Any]:
    return {
        "id": txn.id,
        "subscription_id": txn.subscription_id,
        "transaction_date": _to_timestamp(txn.transaction_date),
        "amount": _to_money(txn.amount),
        "payment_status": txn.payment_status,
        "created_at": _to_timestamp(txn.created_at),
    }
