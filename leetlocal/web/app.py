"""Flask bridge that lets an editor trigger local runs over HTTP."""

from __future__ import annotations

import asyncio

from flask import Flask, current_app, jsonify, request

from leetlocal.config import Config
from leetlocal.models import RunStatus
from leetlocal.output import Notifier, OutputChannel
from leetlocal.runner import run_local

app = Flask(__name__)


def _config() -> Config:
    """Config installed by ``leetlocal serve``, else read from the environment."""
    config = current_app.config.get("LEETLOCAL_CONFIG")
    if config is None:
        config = Config.from_env()
        current_app.config["LEETLOCAL_CONFIG"] = config
    return config


@app.route("/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/shortcuts")
def shortcuts():
    try:
        config = _config()
    except ValueError as e:
        return jsonify({"error": str(e)}), 500
    return jsonify({"shortcuts": config.shortcuts})


@app.route("/run", methods=["POST"])
def run():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "request body must be a JSON object"}), 400
    file_path = data.get("file_path", "")
    test_input = data.get("input", "")

    if not isinstance(file_path, str) or not file_path:
        return jsonify({"error": "file_path is required"}), 400
    if not isinstance(test_input, str) or not test_input:
        return jsonify({"error": "input is required"}), 400

    try:
        config = _config()
    except ValueError as e:
        return jsonify({"error": str(e)}), 500

    channel = OutputChannel()
    notifier = Notifier()
    outcome = asyncio.run(
        run_local(file_path, channel, notifier, config=config, test_input=test_input)
    )

    status_code = 422 if outcome.status is RunStatus.FAILED else 200
    return jsonify({
        "status": outcome.status.value,
        "result": outcome.result,
        "error": outcome.error,
        "log": channel.lines,
        "notifications": [
            {"level": level, "message": message} for level, message in notifier.messages
        ],
    }), status_code
