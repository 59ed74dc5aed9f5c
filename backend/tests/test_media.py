import base64

import pytest

from services.media import MAX_IMAGE_BYTES, MediaError, guess_content_type, image_to_data_url

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def test_png_becomes_data_url():
    url, ct = image_to_data_url(PNG_BYTES, "image/png", "house.png")
    assert ct == "image/png"
    assert url.startswith("data:image/png;base64,")
    assert base64.b64decode(url.split(",", 1)[1]) == PNG_BYTES


def test_content_type_guessed_from_filename():
    assert guess_content_type("application/octet-stream", "photo.jpg") == "image/jpeg"
    assert guess_content_type(None, "logo.PNG") == "image/png"
    assert guess_content_type("image/webp; charset=binary", None) == "image/webp"


def test_rejects_empty_oversized_and_non_image():
    with pytest.raises(MediaError):
        image_to_data_url(b"", "image/png")
    with pytest.raises(MediaError):
        image_to_data_url(b"x" * (MAX_IMAGE_BYTES + 1), "image/png")
    with pytest.raises(MediaError):
        image_to_data_url(b"%PDF-1.4", "application/pdf", "doc.pdf")
