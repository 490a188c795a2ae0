# threaded_comments/api/health/routes.py
from flask import Blueprint, jsonify

from threaded_comments.utils.datetime_utils import DateTimeUtils

health_bp = Blueprint('health_bp', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({"status": "OK", "timestamp": DateTimeUtils.to_iso_string(DateTimeUtils.now())}), 200
