"""
Название: «Imagebox»
Язык: Python (Flask)
Краткое описание: демонстрационное веб-приложение, загружающее изображение в публичное хранилище
и показывающее его пользователю, плюс статичный макет страницы входа
"""

import hmac
import os
import secrets

from flask import Flask, flash, redirect, request, session, url_for

from config import Config
from routes.pages import register_routes as register_page_routes
from routes.uploads import register_routes as register_upload_routes
from utils.storage import public_storage_url, upload_directory

CSRF_EXPIRED_MESSAGE = "The page has expired. Please refresh and try again."


def create_app(config_overrides=None) -> Flask:
    """Фабрика приложения, собирающая все модули воедино."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    # Гарантируем наличие служебных директорий
    os.makedirs(app.instance_path, exist_ok=True)
    with app.app_context():
        os.makedirs(upload_directory(), exist_ok=True)

    register_page_routes(app)
    register_upload_routes(app)

    def _ensure_csrf_token() -> str:
        token = session.get("csrf_token")
        if not token:
            token = secrets.token_urlsafe(32)
            session["csrf_token"] = token
        return token

    def _is_csrf_valid() -> bool:
        expected = session.get("csrf_token")
        provided = request.headers.get("X-CSRF-Token") or request.form.get("csrf_token")
        if not expected or not provided:
            return False
        return hmac.compare_digest(expected, provided)

    @app.context_processor
    def inject_template_globals():
        return {
            "csrf_token": _ensure_csrf_token(),
            "storage_url": public_storage_url,
        }

    @app.before_request
    def enforce_csrf():
        """Отклоняет изменяющие запросы без действительного токена формы."""
        if request.method in {"GET", "HEAD", "OPTIONS", "TRACE"}:
            return None

        if _is_csrf_valid():
            return None

        flash(CSRF_EXPIRED_MESSAGE, "error")
        return redirect(url_for("image_upload_form"))

    @app.after_request
    def apply_security_headers(response):
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        return response

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}, 200

    return app


if __name__ == "__main__":
    app = create_app()
    is_production = os.environ.get("FLASK_ENV", "").lower() == "production"
    app.run(debug=not is_production)
