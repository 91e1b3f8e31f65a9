"""
gen3save — Flask Web Application

Small JSON API around the decoder: upload a .sav, get the decoded image back.
"""

import os
import logging
from datetime import datetime

from flask import Flask, request, jsonify
from flask_cors import CORS

from gen3save import DecodeError, decode, __version__
from gen3save.core.constants import SAVE_SIZE

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)
# A save is 128 KB; leave headroom for the multipart envelope
app.config['MAX_CONTENT_LENGTH'] = int(os.environ.get('GEN3SAVE_MAX_UPLOAD', SAVE_SIZE * 2))

# Enable CORS for API endpoints
CORS(app, resources={r"/api/*": {"origins": "*"}})


# ── Save Routes ──────────────────────────────────────────────────────────────

@app.route("/api/save/decode", methods=["POST"])
def api_save_decode():
    """Decode an uploaded .sav file (multipart ``sav_file`` or raw body)."""
    if "sav_file" in request.files:
        data = request.files["sav_file"].read()
    else:
        data = request.get_data()
    if not data:
        return jsonify({"success": False, "error": "No file provided"}), 400

    include_raw = request.args.get("include_raw", "false").lower() == "true"
    try:
        image = decode(data)
    except DecodeError as e:
        logger.info(f"Rejected save upload: {e}")
        return jsonify({"success": False, "error": str(e), "details": e.to_dict()}), 400

    save = image.to_dict()
    if include_raw:
        for slot_dict, slot in zip(save["slots"], image.slots):
            for sec_dict, sec in zip(slot_dict["sections"], slot.sections):
                if not sec.is_recognized:
                    sec_dict["payload"] = sec.payload.to_dict(include_raw=True)
    return jsonify({"success": True, "save": save})


# ── Error Handlers ───────────────────────────────────────────────────────────

@app.errorhandler(404)
def not_found(error):
    """Handle 404 errors."""
    return jsonify({'error': 'Endpoint not found'}), 404


@app.errorhandler(413)
def too_large(error):
    return jsonify({'success': False, 'error': f'Upload too large (a save is {SAVE_SIZE} bytes)'}), 413


@app.errorhandler(500)
def internal_error(error):
    """Handle 500 errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({'error': 'Internal server error'}), 500


# ── Health Check ─────────────────────────────────────────────────────────────

@app.route("/health")
def health_check():
    """Health check endpoint for load balancers and monitoring."""
    return jsonify({
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.utcnow().isoformat() + "Z",
    })


if __name__ == '__main__':
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("DEBUG", "False").lower() == "true"
    logger.info(f"Starting gen3save on {host}:{port} (debug={debug})")
    app.run(debug=debug, host=host, port=port)
