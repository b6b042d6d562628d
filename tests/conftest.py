import io
import os

import pytest
from PIL import Image

from app import create_app

CSRF_TOKEN = "test-csrf-token"


@pytest.fixture
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "PUBLIC_STORAGE_ROOT": str(tmp_path / "public"),
        }
    )
    yield app


@pytest.fixture
def client(app):
    client = app.test_client()
    with client.session_transaction() as sess:
        sess["csrf_token"] = CSRF_TOKEN
    return client


@pytest.fixture
def upload_dir(app):
    return os.path.join(app.config["PUBLIC_STORAGE_ROOT"], app.config["UPLOAD_DIRECTORY"])


def png_bytes(width=60, height=60):
    """PNG из случайного шума: около 10 КиБ при размере 60x60."""
    image = Image.frombytes("RGB", (width, height), os.urandom(width * height * 3))
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def jpeg_bytes(total_size=None):
    """JPEG; при total_size дополняется хвостом после маркера EOI до нужного размера."""
    image = Image.new("RGB", (64, 64), (200, 30, 30))
    buffer = io.BytesIO()
    image.save(buffer, format="JPEG")
    data = buffer.getvalue()
    if total_size is not None:
        data += b"\0" * (total_size - len(data))
    return data


def post_image(client, content=None, filename="photo.png", csrf_token=CSRF_TOKEN):
    data = {"csrf_token": csrf_token}
    if content is not None:
        data["image"] = (io.BytesIO(content), filename)
    return client.post("/image-upload", data=data, content_type="multipart/form-data")


def flashed(client):
    with client.session_transaction() as sess:
        return list(sess.get("_flashes", []))


def image_bytes(image_format):
    """Небольшое изображение в заданном формате Pillow (PNG, JPEG, GIF, BMP, WEBP, MPO)."""
    image = Image.new("RGB", (32, 32), (20, 120, 220))
    buffer = io.BytesIO()
    if image_format == "MPO":
        # Многокадровый JPEG, как у снимков с камер и телефонов
        second = Image.new("RGB", (32, 32), (220, 120, 20))
        image.save(buffer, format="MPO", save_all=True, append_images=[second])
    else:
        image.save(buffer, format=image_format)
    return buffer.getvalue()
