from flask import Blueprint, request, jsonify
from isp_manager.middleware.role_guard import role_required, ADMIN, CUSTOMER
from isp_manager.services.package_service import list_packages, create_package, update_package, delete_package
from isp_manager.services.payload_formatters import format_package

bp_packages = Blueprint('packages', __name__, url_prefix='/api/packages')

@bp_packages.get('/')
@role_required(ADMIN, CUSTOMER)
def get_packages():
    pkgs = list_packages()
    return jsonify([format_package(p) for p in pkgs]), 200

@bp_packages.post('/')
@role_required(ADMIN)
def post_package():
    data = request.get_json(silent=True)
    pkg = create_package(data)
    return jsonify(format_package(pkg)), 201

@bp_packages.patch('/<int:pkg_id>')
@role_required(ADMIN)
def patch_package(pkg_id):
    data = request.get_json(silent=True)
    pkg = update_package(pkg_id, data)
    return jsonify(format_package(pkg)), 200

@bp_packages.delete('/<int:pkg_id>')
@role_required(ADMIN)
def remove_package(pkg_id):
    delete_package(pkg_id)
    return jsonify({"success": True}), 200
