"""
Программа: «Imagebox» – демонстрационное веб-приложение загрузки изображений.
Модуль: config.py – конфигурация приложения.

Назначение модуля:
- Определение базовых параметров приложения Flask (секретный ключ, cookie сессии).
- Настройка публичного хранилища и ограничений загрузки (каталог, максимальный размер, форматы).
"""

import os
import warnings


def _get_env_bool(name: str, default: bool = False) -> bool:
    """Преобразует переменную окружения в bool."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_int(name: str, default: int) -> int:
    """Преобразует переменную окружения в int."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _is_production() -> bool:
    """Определяет production-режим по FLASK_ENV."""
    return os.environ.get("FLASK_ENV", "").strip().lower() == "production"


class Config:
    """Базовая конфигурация приложения."""

    _PRODUCTION = _is_production()

    SECRET_KEY = os.environ.get("SECRET_KEY")
    if not SECRET_KEY:
        if _PRODUCTION:
            raise RuntimeError(
                "SECRET_KEY environment variable is required in production. "
                "Set a strong random value before starting the app."
            )
        SECRET_KEY = "dev-insecure-secret-key"
        warnings.warn(
            "SECRET_KEY is not set. Using insecure development fallback key.",
            RuntimeWarning,
            stacklevel=1,
        )

    SESSION_COOKIE_SECURE = _get_env_bool("SESSION_COOKIE_SECURE", default=_PRODUCTION)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.environ.get("SESSION_COOKIE_SAMESITE", "Lax")

    # Публичное хранилище: всё, что лежит внутри, отдаётся по /storage/<path>
    PUBLIC_STORAGE_ROOT = os.environ.get("PUBLIC_STORAGE_ROOT", "storage/app/public")
    UPLOAD_DIRECTORY = os.environ.get("UPLOAD_DIRECTORY", "uploads").strip("/") or "uploads"

    # Лимит хостинга должен быть больше лимита изображения,
    # иначе слишком большой файл не дойдёт до валидатора
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024
    MAX_IMAGE_KILOBYTES = _get_env_int("MAX_IMAGE_KILOBYTES", 2048)
    ALLOWED_IMAGE_FORMATS = {"jpeg", "png", "gif", "bmp", "webp"}

