import logging

from flask import Blueprint, request, jsonify

from services.ads import translate_ads
from services.errors import AdEngineError

logger = logging.getLogger(__name__)

translation_bp = Blueprint('translation', __name__)


@translation_bp.route('/translate', methods=['POST'])
def translate():
    """Translate a list of ads into the target language."""
    try:
        data = request.get_json(silent=True) or {}
        ads = data.get('ads') if isinstance(data, dict) else None
        target_language = data.get('targetLanguage') if isinstance(data, dict) else None

        if not isinstance(ads, list) or not target_language:
            return jsonify({"error": "Missing data: ads or targetLanguage."}), 400

        translated = translate_ads(ads, target_language)
        return jsonify({"ads": [ad.to_dict() for ad in translated]})

    except AdEngineError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logger.exception("Ad translation failed")
        return jsonify({"error": str(e) or "Unknown error"}), 500
