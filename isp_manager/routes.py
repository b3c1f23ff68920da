from datetime import datetime, timezone
from flask import Blueprint, jsonify

api_service = Blueprint("api_service", __name__)

@api_service.route('/health', methods=['GET'])
def healthcheck():
    return jsonify({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }), 200
