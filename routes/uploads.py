"""
Программа: «Imagebox» – демонстрационное веб-приложение загрузки изображений.
Модуль: routes/uploads.py – приём загружаемых изображений.

Назначение модуля:
- Проверка поля `image` до любой записи на диск.
- Сохранение файла в публичное хранилище под сгенерированным именем.
- Перенаправление обратно к форме с flash-данными: сообщение и путь либо ошибка поля.
"""

from flask import current_app, flash, redirect, request, url_for
from werkzeug.exceptions import RequestEntityTooLarge

from utils.image_validation import FIELD_NAME, max_size_message, validate_image_upload
from utils.storage import store_public_upload

SUCCESS_MESSAGE = "Image uploaded successfully!"


def _back_to_form():
    return redirect(url_for("image_upload_form"))


def register_routes(app):
    @app.post("/image-upload")
    def image_upload():
        """Обработчик загрузки изображения."""
        image_info, validation_error = validate_image_upload(
            request.files.get(FIELD_NAME),
            max_kilobytes=app.config["MAX_IMAGE_KILOBYTES"],
            allowed_formats=app.config["ALLOWED_IMAGE_FORMATS"],
        )
        if validation_error is not None:
            # Ошибка валидации - ожидаемый исход, а не сбой
            current_app.logger.debug("Загрузка отклонена: %s", validation_error)
            flash(validation_error, "error")
            return _back_to_form()

        # Единственная запись на успешном пути; ошибки файловой системы не перехватываем
        stored_path = store_public_upload(request.files[FIELD_NAME], image_info.extension)

        current_app.logger.info(
            "Изображение %r сохранено как %s (%s, %s байт)",
            image_info.original_name,
            stored_path,
            image_info.mime_type,
            image_info.size,
        )

        flash(SUCCESS_MESSAGE, "success")
        flash(stored_path, "path")
        return _back_to_form()

    @app.errorhandler(RequestEntityTooLarge)
    def handle_request_too_large(error):
        """Тело запроса больше лимита хостинга: для формы это то же нарушение правила max."""
        if request.endpoint != "image_upload":
            return error
        flash(max_size_message(app.config["MAX_IMAGE_KILOBYTES"]), "error")
        return _back_to_form()
