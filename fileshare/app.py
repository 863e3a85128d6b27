#!/usr/bin/env python3
# app.py - web file browser with login and public share links
# Run: fileshare  (or: flask --app fileshare.app run)
# Settings are read from the environment, see config.DEFAULTS
import logging

import click
from flask import (
    Flask, current_app, redirect, render_template_string, request, send_file,
    session, url_for
)

from .access import REFUSAL_MESSAGE, Outcome, classify_file, join_base, resolve_for_view
from .auth import AuthGate, login_required
from .config import DEFAULTS, load_config
from .errors import AuthFailure, ConflictError, NotFoundError, StorageError
from .listing import child_of, filter_entries, list_directory, parent_of
from .shares import ShareRegistry
from .templates import TPL_INDEX, TPL_LOGIN, TPL_SHARED
from .users import UserStore

logger = logging.getLogger("fileshare")


def configure_logging(level: str):
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")
    logger.setLevel(level)


def create_app(config=None) -> Flask:
    cfg = load_config(config)
    configure_logging(cfg["LOG_LEVEL"])

    app = Flask(__name__)
    app.config.update(cfg)
    app.secret_key = cfg["SECRET_KEY"]
    if cfg["SECRET_KEY"] == DEFAULTS["SECRET_KEY"]:
        logger.warning("Using the default session secret; set FLASK_SECRET")

    # one of each per app, shared by every request thread
    app.extensions["user_store"] = UserStore(cfg["USERS_FILE"])
    app.extensions["auth_gate"] = AuthGate(app.extensions["user_store"])
    app.extensions["share_registry"] = ShareRegistry()

    register_routes(app)
    register_error_handlers(app)
    register_cli(app)
    return app


def auth_gate() -> AuthGate:
    return current_app.extensions["auth_gate"]


def share_registry() -> ShareRegistry:
    return current_app.extensions["share_registry"]


def base_directory() -> str:
    return current_app.config["BASE_DIRECTORY"]


def serve_decision(decision, missing_message: str):
    if decision.outcome is Outcome.NOT_FOUND:
        return missing_message, 404
    if decision.outcome is Outcome.REFUSED:
        return REFUSAL_MESSAGE
    return send_file(decision.path)


# ---- Routes ----
def register_routes(app: Flask):
    @app.route("/login", methods=["GET"])
    def login():
        return render_template_string(TPL_LOGIN)

    @app.route("/login", methods=["POST"])
    def login_submit():
        username = request.form.get("username") or ""
        password = request.form.get("password") or ""
        try:
            auth_gate().login(session, username, password)
        except AuthFailure:
            return "Login failed"
        return redirect(url_for("index"))

    @app.route("/register", methods=["POST"])
    @login_required
    def register():
        username = request.form.get("username") or ""
        password = request.form.get("password") or ""
        if not username or not password:
            return "Username and password are required", 400
        auth_gate().register(username, password)
        return "User registered successfully"

    @app.route("/logout")
    def logout():
        auth_gate().logout(session)
        return redirect(url_for("login"))

    @app.route("/")
    @login_required
    def index():
        relative_dir = request.args.get("dir") or ""
        query = request.args.get("q") or ""
        directory = join_base(base_directory(), relative_dir)
        try:
            entries = list_directory(directory)
        except (NotFoundError, StorageError):
            logger.warning("Unable to read directory %s", directory, exc_info=True)
            return "Unable to read directory", 500
        entries = filter_entries(entries, query)
        rows = [
            {"name": e.name, "is_dir": e.is_dir, "rel": child_of(relative_dir, e.name)}
            for e in entries
        ]
        return render_template_string(
            TPL_INDEX,
            entries=rows,
            relative_dir=relative_dir,
            parent_dir=parent_of(relative_dir),
            query=query,
        )

    @app.route("/view/<path:filename>")
    @login_required
    def view_file(filename):
        return serve_decision(resolve_for_view(base_directory(), filename), "File not found")

    @app.route("/share/<path:filename>")
    @login_required
    def share_file(filename):
        path = join_base(base_directory(), filename)
        try:
            token = share_registry().issue_share(path)
        except NotFoundError:
            return "File not found", 404
        return render_template_string(TPL_SHARED, link=url_for("shared_file", token=token))

    @app.route("/shared/<token>")
    def shared_file(token):
        path = share_registry().resolve(token)
        return serve_decision(classify_file(path), "File not found or not shared")


def register_error_handlers(app: Flask):
    @app.errorhandler(NotFoundError)
    def handle_not_found(e):
        return "File not found", 404

    @app.errorhandler(ConflictError)
    def handle_conflict(e):
        return "User already exists", 400

    @app.errorhandler(StorageError)
    def handle_storage(e):
        logger.error("Storage failure: %s", e, exc_info=e)
        return "Internal server error", 500


def register_cli(app: Flask):
    @app.cli.command("add-user")
    @click.argument("username")
    @click.password_option()
    def add_user(username, password):
        """Register USERNAME without a logged-in session."""
        try:
            app.extensions["auth_gate"].register(username, password)
        except ConflictError:
            raise click.ClickException(f"User already exists: {username}")
        click.echo(f"User '{username}' added")


def main():
    app = create_app()
    host, port = app.config["HOST"], app.config["PORT"]
    logger.info("Server is running on http://%s:%d", host, port)
    logger.info("Serving files from: %s", app.config["BASE_DIRECTORY"])
    app.run(host=host, port=port, threaded=True)


if __name__ == "__main__":
    main()
