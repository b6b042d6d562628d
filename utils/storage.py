"""
Модуль: `utils/storage.py`.
Назначение: Запись файлов в публичное хранилище и построение их публичных URL.
"""

import os
import secrets
import string

from flask import current_app, url_for

_NAME_ALPHABET = string.ascii_letters + string.digits
STORED_NAME_LENGTH = 40


def public_storage_root() -> str:
    """Абсолютный путь к корню публичного хранилища."""
    root = current_app.config["PUBLIC_STORAGE_ROOT"]
    if os.path.isabs(root):
        return root
    return os.path.join(current_app.root_path, root)


def upload_directory() -> str:
    return os.path.join(public_storage_root(), current_app.config["UPLOAD_DIRECTORY"])


def generate_stored_name(extension: str) -> str:
    """Случайное непрозрачное имя файла: коллизии исключаются уникальностью имени, а не блокировками."""
    token = "".join(secrets.choice(_NAME_ALPHABET) for _ in range(STORED_NAME_LENGTH))
    return f"{token}.{extension}"


def store_public_upload(file_storage, extension: str) -> str:
    """Сохраняет файл в каталог загрузок и возвращает путь относительно корня хранилища."""
    directory = upload_directory()
    os.makedirs(directory, exist_ok=True)

    stored_name = generate_stored_name(extension)
    while os.path.exists(os.path.join(directory, stored_name)):
        stored_name = generate_stored_name(extension)

    file_storage.stream.seek(0)
    file_storage.save(os.path.join(directory, stored_name))
    return f"{current_app.config['UPLOAD_DIRECTORY']}/{stored_name}"


def absolute_storage_path(relative_path: str) -> str:
    return os.path.join(public_storage_root(), *relative_path.split("/"))


def public_storage_url(relative_path: str) -> str:
    """URL, по которому сохранённый файл доступен без аутентификации."""
    return url_for("public_storage", filename=relative_path)
