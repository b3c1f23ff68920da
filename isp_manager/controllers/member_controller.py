from flask import Blueprint, request, jsonify
from isp_manager.middleware.role_guard import role_required, ADMIN
from isp_manager.services.member_service import list_members, create_member, update_member, delete_member
from isp_manager.services.payload_formatters import format_member

bp_members = Blueprint('members', __name__, url_prefix='/api/members')

@bp_members.get('/')
@role_required(ADMIN)
def get_members():
    members = list_members()
    return jsonify([format_member(m) for m in members]), 200

@bp_members.post('/')
@role_required(ADMIN)
def post_member():
    member = create_member(request.get_json(silent=True))
    return jsonify(format_member(member)), 201

@bp_members.patch('/<int:member_id>')
@role_required(ADMIN)
def patch_member(member_id):
    member = update_member(member_id, request.get_json(silent=True))
    return jsonify(format_member(member)), 200

@bp_members.delete('/<int:member_id>')
@role_required(ADMIN)
def remove_member(member_id):
    delete_member(member_id)
    return jsonify({"success": True}), 200
