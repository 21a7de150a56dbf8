import io
from PIL import Image, UnidentifiedImageError


def detect_image_mime(data: bytes) -> str:
    """Sniff an image's MIME type from its bytes; octet-stream when Pillow can't read it."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            mime_type = Image.MIME.get(img.format or "")
    except (UnidentifiedImageError, OSError):
        return "application/octet-stream"
    return mime_type or "application/octet-stream"
