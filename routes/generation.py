import logging

import requests
from flask import Blueprint, request, jsonify

import config
from services.ads import generate_ads
from services.errors import AdEngineError
from services.models import parse_generation_request

logger = logging.getLogger(__name__)

generation_bp = Blueprint('generation', __name__)


@generation_bp.route('/generate', methods=['POST'])
def generate():
    """Generate three ads from a product URL or as variations of an ad."""
    try:
        gen_request = parse_generation_request(request.get_json(silent=True), config.DEFAULT_LANGUAGE)
        result = generate_ads(gen_request)
        return jsonify(result.to_dict())

    except AdEngineError as e:
        return jsonify(e.to_dict()), e.status_code
    except requests.exceptions.RequestException as e:
        logger.warning("Scrape failed: %s", e)
        return jsonify({"error": f"Failed to load page: {str(e)}"}), 500
    except Exception as e:
        logger.exception("Ad generation failed")
        return jsonify({"error": str(e) or "Unknown error"}), 500
