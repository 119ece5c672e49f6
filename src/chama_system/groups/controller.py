from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.controller import capability_required, current_auth, login_required
from ..container import Container
from ..core.enums import Capability
from ..core.exceptions import PersistenceError, ValidationError
from .model import GroupRegistrationInput

FORM_FIELDS = (
    "group_name",
    "email",
    "account_no",
    "chairman_name",
    "chairman_email",
    "chairman_password",
    "secretary_name",
    "secretary_email",
    "treasurer_name",
    "treasurer_email",
)


def register(app: Flask, container: Container) -> None:
    @app.route("/groups/register", methods=["POST"], endpoint="register_group")
    def register_group():
        form = request.form
        document = request.files.get("document")
        data = GroupRegistrationInput(
            **{name: form.get(name) for name in FORM_FIELDS},
            document=document if document and document.filename else None,
        )

        try:
            outcome = container.group_service.register(data, auth=current_auth())
        except ValidationError as e:
            return jsonify(e.to_dict()), 400
        except Exception:
            app.logger.exception("Group registration failed")
            return jsonify({"error": "An unexpected error occurred"}), 500

        return jsonify(outcome.to_dict()), 201

    @app.route("/groups/current", endpoint="current_group")
    @login_required
    def current_group():
        try:
            group = container.group_service.current_group(auth=current_auth())
        except PersistenceError:
            app.logger.exception("Could not load current group")
            return jsonify({"error": "Group data is temporarily unavailable"}), 503
        if not group:
            return jsonify({"error": "Group not found"}), 404
        return jsonify(group.to_dict())

    @app.route("/members", endpoint="members")
    @capability_required(Capability.MANAGE_MEMBER_DIRECTORY)
    def members():
        try:
            rows = container.group_service.member_directory(auth=current_auth())
        except PersistenceError:
            app.logger.exception("Could not load member directory")
            return jsonify({"error": "Group data is temporarily unavailable"}), 503
        return jsonify(rows)
