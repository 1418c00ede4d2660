from typing import Optional
import re

_ASSET_PREFIX = re.compile(r"^(\.\./)+assets/")


def normalize_image_path(path: Optional[str]) -> str:
    """Collapse ``../../assets/x.png`` style paths to ``/x.png``."""
    if not path:
        return ""
    return _ASSET_PREFIX.sub("/", path)


def storage_safe_name(value: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "", value)


def file_extension(filename: Optional[str], default: str = "png") -> str:
    if not filename or "." not in filename:
        return default
    return filename.rsplit(".", 1)[-1].lower()
