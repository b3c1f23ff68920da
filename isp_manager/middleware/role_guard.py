from functools import wraps
from flask import jsonify, current_app
from flask_jwt_extended import verify_jwt_in_request, get_jwt

ADMIN = "admin"
CUSTOMER = "customer"
ROLES = (ADMIN, CUSTOMER)


def current_caller():
    """
    Caller identity taken from the verified JWT of the current request.

    Returns a dict: {"role": "admin"|"customer", "member_id": int|None}
    """
    claims = get_jwt()
    member_id = claims.get("member_id")
    return {
        "role": claims.get("role"),
        "member_id": int(member_id) if member_id is not None else None,
    }


def role_required(*roles):
    """
    Decorator that lets a request through only if its token carries one of `roles`.

    Usage:
        @bp.post('/')
        @role_required(ADMIN)
        def create_thing():
            ...

    Missing or invalid tokens are answered by flask_jwt_extended (401).
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            verify_jwt_in_request()
            caller = current_caller()
            if caller["role"] not in roles:
                current_app.logger.warning(
                    f"Forbidden: role {caller['role']!r} calling {f.__name__}, needs one of {roles}"
                )
                return jsonify({
                    "error": "Forbidden",
                    "message": f"This operation requires role: {', '.join(roles)}"
                }), 403
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def may_act_for_member(member_id):
    """Admins act for anyone, customers only for their own member id"""
    caller = current_caller()
    if caller["role"] == ADMIN:
        return True
    return caller["role"] == CUSTOMER and caller["member_id"] == member_id


def forbidden_for_member(member_id):
    current_app.logger.warning(f"Forbidden: caller {current_caller()} acting for member {member_id}")
    return jsonify({
        "error": "Forbidden",
        "message": "Customers can only act on their own member account"
    }), 403
