"""Mock of the API under test for framework tests.

Serves the two surfaces the API steps use:
- GET /                 HTML landing page (health check)
- /api/users[/<id>]     Reqres-style user endpoints (get, create, delete)

State is kept in module-level dicts so tests can inspect what cleanup did.
"""
from __future__ import annotations

import itertools
from datetime import datetime, timezone
from typing import Any, Dict, List

from flask import Flask, jsonify, request

SEED_USERS: Dict[str, Dict[str, Any]] = {
    "1": {"id": 1, "email": "george.bluth@reqres.in", "first_name": "George", "last_name": "Bluth"},
    "2": {"id": 2, "email": "janet.weaver@reqres.in", "first_name": "Janet", "last_name": "Weaver"},
    "3": {"id": 3, "email": "emma.wong@reqres.in", "first_name": "Emma", "last_name": "Wong"},
}

USERS: Dict[str, Dict[str, Any]] = {}
DELETED_IDS: List[str] = []
_next_id = itertools.count(100)

LANDING_PAGE = """<!doctype html>
<html><head><title>Reqres - A hosted REST-API ready to respond to your AJAX requests</title></head>
<body><h1>Reqres</h1><p>Test your front-end against a real API.</p></body></html>
"""


def create_mock_api_app() -> Flask:
    """Create and configure the mock API Flask app."""
    app = Flask(__name__)
    app.config['TESTING'] = True

    @app.route('/', methods=['GET'])
    def landing():
        return LANDING_PAGE, 200, {"Content-Type": "text/html; charset=utf-8"}

    @app.route('/api/users/<user_id>', methods=['GET'])
    def get_user(user_id: str):
        user = USERS.get(user_id)
        if user is None:
            return jsonify({}), 404
        return jsonify({
            "data": user,
            "support": {"url": "https://reqres.in/#support-heading", "text": "mock"},
        }), 200

    @app.route('/api/users', methods=['POST'])
    def create_user():
        payload = request.get_json(silent=True) or {}
        user_id = str(next(_next_id))
        user = {
            "id": user_id,
            "name": payload.get("name", ""),
            "job": payload.get("job", ""),
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }
        USERS[user_id] = user
        return jsonify(user), 201

    @app.route('/api/users/<user_id>', methods=['DELETE'])
    def delete_user(user_id: str):
        USERS.pop(user_id, None)
        DELETED_IDS.append(user_id)
        return "", 204

    return app


def reset_mock_state() -> None:
    """Restore the seeded users and forget deletions."""
    USERS.clear()
    USERS.update({key: dict(value) for key, value in SEED_USERS.items()})
    DELETED_IDS.clear()
