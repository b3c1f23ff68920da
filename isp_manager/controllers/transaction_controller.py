from flask import Blueprint, jsonify
from isp_manager.middleware.role_guard import (
    role_required, may_act_for_member, forbidden_for_member, ADMIN, CUSTOMER
)
from isp_manager.services.transaction_service import list_transactions, list_transactions_by_member
from isp_manager.services.payload_formatters import format_transaction

bp_transactions = Blueprint('transactions', __name__, url_prefix='/api/transactions')

@bp_transactions.get('/')
@role_required(ADMIN)
def get_transactions():
    txns = list_transactions()
    return jsonify([format_transaction(t) for t in txns]), 200

@bp_transactions.get('/member/<int:member_id>')
@role_required(ADMIN, CUSTOMER)
def get_member_transactions(member_id):
    if not may_act_for_member(member_id):
        return forbidden_for_member(member_id)
    txns = list_transactions_by_member(member_id)
    return jsonify([format_transaction(t) for t in txns]), 200
