from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import Flask, current_app, g, jsonify, session

from ..core.enums import Capability
from ..members.model import Identity
from ..navigation.service import can, navigation_for
from .context import AuthContext

SESSION_KEY = "identity"


def _identity_from_session() -> Optional[Identity]:
    data = session.get(SESSION_KEY)
    if not data:
        return None
    try:
        return Identity.from_dict(data)
    except (KeyError, TypeError, ValueError, ArithmeticError):
        current_app.logger.warning("Dropping unreadable identity from session")
        session.pop(SESSION_KEY, None)
        return None


def current_auth() -> AuthContext:
    """Auth context of the current request."""
    return g.auth


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_auth().is_authenticated:
            return jsonify({"error": "Login required"}), 401
        return view(*args, **kwargs)

    return wrapper


def capability_required(capability: Capability):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = current_auth().current_identity()
            if identity is None:
                return jsonify({"error": "Login required"}), 401
            if not can(identity, capability):
                return jsonify({"error": "You do not have access to this page"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register(app: Flask) -> None:
    @app.before_request
    def load_auth_context():
        g.auth = AuthContext(_identity_from_session())

    @app.after_request
    def store_auth_context(response):
        auth: Optional[AuthContext] = g.get("auth")
        if auth is None:
            return response

        identity = auth.current_identity()
        if identity is None:
            session.pop(SESSION_KEY, None)
        else:
            session[SESSION_KEY] = identity.to_dict()
        return response

    @app.route("/me", endpoint="me")
    @login_required
    def me():
        return jsonify(current_auth().current_identity().to_dict())

    @app.route("/navigation", endpoint="navigation")
    def navigation():
        entries = navigation_for(current_auth().current_identity())
        return jsonify([entry.to_dict() for entry in entries])

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        current_auth().logout()
        session.clear()
        return jsonify({"message": "Logged out"})
