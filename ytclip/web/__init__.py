"""Flask application factory for the ytclip HTTP API."""

import tempfile
from pathlib import Path

from flask import Flask, jsonify


def create_app(work_dir: Path | None = None, ffmpeg_path: str = "ffmpeg") -> Flask:
    app = Flask(__name__)
    # Each job writes its clip under WORK_DIR/<job_id>/.
    app.config["WORK_DIR"] = work_dir or Path(tempfile.mkdtemp(prefix="ytclip_"))
    app.config["FFMPEG_PATH"] = ffmpeg_path

    from ytclip.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Unknown endpoint; submit clips with POST /api/clips"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "Method not allowed"}), 405

    return app
