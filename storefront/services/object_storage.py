from pathlib import Path
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class ObjectStorage:
    """
    Bucketed file store. Objects live under ``<root>/<bucket>/<path>`` and
    are published at ``<base_url>/<bucket>/<path>``.
    """

    def __init__(self, root: str, base_url: str):
        self.root = Path(root).resolve()
        self.base_url = base_url.rstrip("/")

    def _object_path(self, bucket: str, path: str) -> Path:
        target = (self.root / bucket / path).resolve()
        bucket_root = (self.root / bucket).resolve()
        if bucket_root not in target.parents:
            raise ValueError(f"Invalid object path: {path}")
        return target

    def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: Optional[str] = None,
    ) -> str:
        target = self._object_path(bucket, path)
        if target.exists():
            raise FileExistsError(f"Object already exists: {bucket}/{path}")

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

        logger.info(
            f"Uploaded {len(data)} bytes to {bucket}/{path} ({content_type or 'unknown'})"
        )
        return path

    def exists(self, bucket: str, path: str) -> bool:
        return self._object_path(bucket, path).exists()

    def get_public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/{bucket}/{path}"
