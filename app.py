import logging
from datetime import datetime, timezone

from flask import Flask, render_template, jsonify

import config
from routes.generation import generation_bp
from routes.translation import translation_bp

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = Flask(__name__)
app.json.ensure_ascii = False
app.register_blueprint(generation_bp)
app.register_blueprint(translation_bp)


@app.route('/')
def index():
    """Main page."""
    return render_template(
        'index.html',
        languages=config.LANGUAGES,
        default_language=config.DEFAULT_LANGUAGE,
        history_limit=config.HISTORY_LIMIT,
    )


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({
        "status": "healthy",
        "service": "Ad Copy Engine",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "openai_configured": bool(config.get_openai_api_key()),
    }), 200


if __name__ == '__main__':
    app.run(debug=True, port=5000)
