from flask import Blueprint, request, jsonify
from isp_manager.middleware.role_guard import (
    role_required, may_act_for_member, forbidden_for_member, ADMIN, CUSTOMER
)
from isp_manager.services.subscription_service import list_subscriptions, create_subscription
from isp_manager.services.payload_formatters import format_subscription

bp_subs = Blueprint('subscriptions', __name__, url_prefix='/api/subscriptions')

@bp_subs.get('/')
@role_required(ADMIN)
def get_subscriptions():
    subs = list_subscriptions()
    return jsonify([format_subscription(s) for s in subs]), 200

@bp_subs.post('/')
@role_required(ADMIN, CUSTOMER)
def post_subscription():
    data = request.get_json(silent=True)
    member_id = data.get('member_id') if isinstance(data, dict) else None
    # malformed ids fall through to the service's validation
    if isinstance(member_id, int) and not may_act_for_member(member_id):
        return forbidden_for_member(member_id)
    sub = create_subscription(data)
    return jsonify(format_subscription(sub)), 201
