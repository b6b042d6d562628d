"""
Программа: «Imagebox» – демонстрационное веб-приложение загрузки изображений.
Модуль: routes/pages.py – маршруты пользовательских страниц.

Назначение модуля:
- Страница-макет входа (только разметка, без обработки на сервере).
- Страница с формой загрузки и отображением результата последней загрузки.
- Выдача файлов из публичного хранилища.
"""

from flask import render_template, send_from_directory

from utils.storage import public_storage_root


def register_routes(app):
    """Регистрирует страницы приложения."""

    @app.get("/")
    def welcome():
        """Декоративная страница входа: форма никуда не отправляется."""
        return render_template("welcome.html")

    @app.get("/image-upload")
    def image_upload_form():
        # Flash-данные (успех, путь или ошибка) читаются шаблоном один раз
        return render_template("image-upload.html")

    @app.get("/storage/<path:filename>")
    def public_storage(filename):
        return send_from_directory(public_storage_root(), filename)
