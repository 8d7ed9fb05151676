# visitorinfo/__init__.py
import os
import uuid
from pathlib import Path

from dotenv import load_dotenv, find_dotenv
from flask import Flask, g, request
from flask_wtf.csrf import generate_csrf
from werkzeug.middleware.proxy_fix import ProxyFix

from visitorinfo.extensions import db, migrate, csrf, mail

load_dotenv(find_dotenv(), override=False)  # picks up your .env locally


def create_app(config_object="config.Config"):
    app = Flask(
        __name__,
        instance_relative_config=True,
        instance_path=os.environ.get("FLASK_INSTANCE_PATH"),
        template_folder="../templates",
        static_folder="../static",
    )

    Path(app.instance_path).mkdir(parents=True, exist_ok=True)

    # 1) Base config object (config.py at project root)
    app.config.from_object(config_object)

    # 2) Instance overrides (instance/config.py) – safe if missing
    app.config.from_pyfile("config.py", silent=True)

    # 3) Environment overrides (e.g., FLASK_SQLALCHEMY_DATABASE_URI)
    app.config.from_prefixed_env()

    app.logger.setLevel(str(app.config.get("LOG_LEVEL", "INFO")).upper())

    # 4) Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    mail.init_app(app)

    # importing the models registers them on db.metadata
    from visitorinfo import models  # noqa: F401

    with app.app_context():
        db.create_all()

    app.jinja_env.globals.update(csrf_token=generate_csrf)

    # client IP comes from explicit headers (utils.net), keep remote_addr raw
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=0, x_proto=1, x_host=1)

    if app.config.get("REQUEST_TRACE"):
        @app.before_request
        def _trace_in():
            g.reqid = str(uuid.uuid4())[:8]
            app.logger.info(
                "[%s] → %s %s ep=%s",
                g.reqid, request.method, request.path, request.endpoint,
            )

        @app.after_request
        def _trace_out(resp):
            rid = getattr(g, "reqid", "????")
            app.logger.info("[%s] ← %s", rid, resp.status)
            return resp

    @app.route("/healthz")
    def healthz():
        return "ok", 200

    # 5) Blueprints
    from visitorinfo.public.routes import public_bp
    from visitorinfo.api import api_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(api_bp)

    # JSON API is called by the page script with fetch(), no form token
    csrf.exempt(api_bp)

    from visitorinfo.cli import register_cli
    register_cli(app)

    return app
