"""
Программа: «Imagebox» – демонстрационное веб-приложение загрузки изображений.
Модуль: utils/image_validation.py – проверка загружаемого изображения.

Назначение модуля:
- Проверка правил поля формы: обязательность, содержимое-изображение, максимальный размер.
- Определение формата, расширения и MIME-типа по содержимому файла, а не по имени.
"""

from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

FIELD_NAME = "image"

FORMAT_TO_EXTENSION = {
    "jpeg": "jpg",
    "png": "png",
    "gif": "gif",
    "bmp": "bmp",
    "webp": "webp",
}

# MPO (многокадровый JPEG с камер и телефонов) остаётся JPEG-файлом
FORMAT_ALIASES = {"mpo": "jpeg"}


@dataclass(frozen=True)
class ImageInfo:
    """Сведения о прошедшем проверку файле (живут только в рамках запроса)."""

    original_name: str
    image_format: str
    extension: str
    mime_type: str
    size: int


def required_message(field: str = FIELD_NAME) -> str:
    return f"The {field} field is required."


def image_message(field: str = FIELD_NAME) -> str:
    return f"The {field} field must be an image."


def max_size_message(max_kilobytes: int, field: str = FIELD_NAME) -> str:
    return f"The {field} field must not be greater than {max_kilobytes} kilobytes."


def _stream_size(file_storage) -> int:
    stream = file_storage.stream
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(0)
    return size


def _detect_format(file_storage) -> str | None:
    """Возвращает формат Pillow в нижнем регистре или None, если это не изображение."""
    file_storage.stream.seek(0)
    try:
        with Image.open(file_storage.stream) as image:
            image.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError):
        return None
    finally:
        file_storage.stream.seek(0)

    # После verify() объект изображения использовать нельзя, открываем заново
    try:
        with Image.open(file_storage.stream) as image:
            image_format = (image.format or "").lower() or None
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError):
        return None
    finally:
        file_storage.stream.seek(0)

    return FORMAT_ALIASES.get(image_format, image_format)


def validate_image_upload(file_storage, max_kilobytes: int, allowed_formats):
    """Проверяет поле `image` по правилам required, image, max.

    Возвращает пару (ImageInfo, None) при успехе или (None, сообщение об ошибке).
    Срабатывает первое нарушенное правило.
    """
    if file_storage is None or not file_storage.filename:
        return None, required_message()

    size = _stream_size(file_storage)
    if size == 0:
        return None, required_message()

    image_format = _detect_format(file_storage)
    if image_format is None or image_format not in allowed_formats:
        return None, image_message()
    extension = FORMAT_TO_EXTENSION.get(image_format)
    if extension is None:
        return None, image_message()

    if size > max_kilobytes * 1024:
        return None, max_size_message(max_kilobytes)

    info = ImageInfo(
        original_name=file_storage.filename,
        image_format=image_format,
        extension=extension,
        mime_type=Image.MIME.get(image_format.upper(), f"image/{image_format}"),
        size=size,
    )
    return info, None
