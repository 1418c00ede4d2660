from PIL import Image, UnidentifiedImageError
import base64
import binascii
import io


def decode_base64_image(data: str) -> bytes:
    """Decode a base64 payload, tolerating a ``data:image/...;base64,`` prefix."""
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image: {e}")


def ensure_image(contents: bytes) -> str:
    """Verify the bytes are a readable image and return its format name."""
    try:
        image = Image.open(io.BytesIO(contents))
        image.verify()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Unreadable image: {e}")
    return (image.format or "PNG").lower()
