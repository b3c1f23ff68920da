# isp_manager/errors.py
"""
Service-level exceptions and their HTTP rendering.

Services raise these; the handlers registered in create_app turn them into
JSON error responses so controllers never build error payloads by hand.
"""
from flask import jsonify, current_app


class ServiceError(Exception):
    """Base class for every error a service operation can raise"""

    status_code = 500

    def __init__(self, message, error_code=None, details=None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self):
        payload = {"error": self.error_code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(ServiceError):
    """Malformed or out-of-range input, caught before persistence"""
    status_code = 400


class NotFoundError(ServiceError):
    """Referenced record does not exist"""
    status_code = 404


class ConflictError(ServiceError):
    """Operation would break a referential or business invariant"""
    status_code = 409


class PersistenceError(ServiceError):
    """Underlying store failure"""
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(err):
        if err.status_code >= 500:
            current_app.logger.error(f"{err.error_code}: {err.message}")
            # Store details stay in the logs
            return jsonify({"error": err.error_code, "message": "Internal server error"}), err.status_code
        return jsonify(err.to_dict()), err.status_code
