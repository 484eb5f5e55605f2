"""HTTP routes: submit a clip job, poll it, fetch the result."""

import logging
import threading
import uuid
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request, send_file

from ytclip.engine import clip
from ytclip.errors import ClipError
from ytclip.manifest import ClipRequest, ToolConfig
from ytclip.models import ClipRange, validate_speed
from ytclip.resolver import require_video_id

logger = logging.getLogger(__name__)

bp = Blueprint("api", __name__)

# In-memory job store: job_id -> job dict
_jobs: dict[str, dict] = {}


def _request_from_json(data: dict, job_dir: Path) -> ClipRequest:
    missing = [k for k in ("url", "start_time", "end_time") if data.get(k) is None]
    if "url" not in missing and not data["url"]:
        missing.insert(0, "url")
    if missing:
        raise ValueError(f"Missing fields: {', '.join(missing)}")

    output = data.get("output")
    # Only a bare file name is honoured; the clip always lands in the job dir.
    output_path = Path(Path(output).name) if output else None
    return ClipRequest(
        url=str(data["url"]),
        start_time=str(data["start_time"]),
        end_time=str(data["end_time"]),
        output=output_path,
        speed=float(data.get("speed", 1.0)),
        tools=ToolConfig(ffmpeg_path=current_app.config["FFMPEG_PATH"], output_dir=job_dir),
    )


@bp.route("/api/clips", methods=["POST"])
def create_clip():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    job_id = uuid.uuid4().hex[:12]
    job_dir = Path(current_app.config["WORK_DIR"]) / job_id

    try:
        clip_request = _request_from_json(data, job_dir)
        # Bad input is a 400, never a failed job.
        validate_speed(clip_request.speed)
        ClipRange.from_strings(clip_request.start_time, clip_request.end_time)
        require_video_id(clip_request.url)
    except (ValueError, TypeError) as e:  # ParseError, ValidationError, UnsupportedURLError
        return jsonify({"error": str(e)}), 400

    job_dir.mkdir(parents=True, exist_ok=True)
    job = {"dir": job_dir, "status": "processing", "error": None, "result": None}
    _jobs[job_id] = job

    def run():
        try:
            result = clip(clip_request)
            job["result"] = {
                "output_path": str(result.output_path),
                "video_id": result.video_id,
                "title": result.title,
                "duration": result.duration,
                "speed": result.speed,
            }
            job["status"] = "done"
        except ClipError as e:
            logger.error("Job %s failed: %s", job_id, e)
            job["status"] = "error"
            job["error"] = str(e)
        except Exception as e:
            logger.exception("Job %s crashed", job_id)
            job["status"] = "error"
            job["error"] = str(e)

    threading.Thread(target=run, daemon=True).start()
    return jsonify({"job_id": job_id, "status": "started"})


@bp.route("/api/jobs/<job_id>/status")
def job_status(job_id: str):
    if job_id not in _jobs:
        return jsonify({"error": "Job not found"}), 404

    job = _jobs[job_id]
    resp = {"status": job["status"]}
    if job["status"] == "done":
        resp["result"] = job.get("result")
    if job["status"] == "error":
        resp["error"] = job.get("error")
    return jsonify(resp)


@bp.route("/api/jobs/<job_id>/result")
def download_result(job_id: str):
    if job_id not in _jobs:
        return jsonify({"error": "Job not found"}), 404

    job = _jobs[job_id]
    if job["status"] != "done":
        return jsonify({"error": "Job not complete"}), 409

    output_path = Path(job["result"]["output_path"])
    return send_file(output_path.resolve(), as_attachment=True)
