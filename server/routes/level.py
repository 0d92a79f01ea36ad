"""
Purpose: Level query routes - paths, reachability, edge-checked neighbors.
Dependencies: server/level_data.py, flask.
Ext Hooks: Add stat checks (e.g., action point costs per step).
Server Only: Rules enforcement.
"""

import logging

from flask import Blueprint, request, jsonify

from server.level_data import LevelDataError, build_controller, parse_coords, parse_int

logger = logging.getLogger(__name__)

bp = Blueprint('level', __name__)


def _payload(*required):
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or any(key not in data for key in required):
        raise LevelDataError(f"Request needs {', '.join(required)}")
    return data


@bp.errorhandler(LevelDataError)
def handle_level_error(error):
    logger.info("Rejected request to %s: %s", request.path, error)
    return jsonify({"error": str(error)}), 400


@bp.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@bp.route("/api/path", methods=["POST"])
def handle_path():
    data = _payload('level', 'start', 'goal')
    controller = build_controller(data['level'])
    start = parse_coords(data['start'], 'start')
    goal = parse_coords(data['goal'], 'goal')

    path = controller.path_between(start, goal)
    if path is None:
        return jsonify({"error": "No valid path", "path": None}), 200
    # end -> start, as returned by the controller
    return jsonify({"path": [list(c) for c in path]})


@bp.route("/api/reachable", methods=["POST"])
def handle_reachable():
    data = _payload('level', 'center', 'steps')
    controller = build_controller(data['level'])
    center = parse_coords(data['center'], 'center')
    steps = parse_int(data['steps'], "steps")
    if steps < 0:
        raise LevelDataError("steps must be >= 0")

    tiers = controller.fringes(center, steps)
    response = {"cells": sorted(list(c.coords) for tier in tiers for c in tier)}
    if data.get('include_fringes'):
        response["fringes"] = [sorted(list(c.coords) for c in tier) for tier in tiers]
    return jsonify(response)


@bp.route("/api/neighbors", methods=["POST"])
def handle_neighbors():
    data = _payload('level', 'cell')
    controller = build_controller(data['level'])
    coords = parse_coords(data['cell'], 'cell')
    search_height = parse_int(data.get('search_height', 1), "search_height")

    cell = controller[coords]
    if cell is None:
        return jsonify({"cells": []})
    return jsonify({"cells": sorted(list(n.coords) for n in controller.valid_neighbors(cell, search_height))})
