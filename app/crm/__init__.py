import logging

from dotenv import load_dotenv
from flask import Flask, render_template, request

from app.crm.config import load_config
from app.crm.routes import bp as routes_bp
from app.crm.modules.customer_check.routes import bp as customer_check_bp


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__, template_folder="templates")
    # Raises ConfigurationMissing when the API endpoint is unset; the process must not serve.
    app.config.from_mapping(load_config())

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if not str(app.config["API_ENDPOINT"]).startswith(("http://", "https://")):
            raise RuntimeError("API_ENDPOINT must be an http(s) URL in production.")

    app.register_blueprint(routes_bp)
    app.register_blueprint(customer_check_bp)

    @app.errorhandler(404)
    def _err_404(e):  # type: ignore[no-redef]
        return render_template("errors/404.html"), 404

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        app.logger.exception("Unhandled 500 (path=%s)", request.path)
        return render_template("errors/500.html"), 500

    app.logger.info("Customer API endpoint: %s", app.config["API_ENDPOINT"])
    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
