import hashlib
import json
import os
import posixpath
from typing import Optional

from ...config import settings
from ...application.ports.object_storage import ObjectStorage, StoredObject

META_SUFFIX = ".meta.json"


class LocalObjectStorage(ObjectStorage):
    """Filesystem object store. Keys map to paths under settings.UPLOAD_DIR,
    with the content type kept in a JSON sidecar next to each object."""

    def __init__(self, root: Optional[str] = None) -> None:
        self.root = os.path.abspath(root or settings.UPLOAD_DIR)

    def _path_for(self, key: str) -> str:
        # Keys are stored verbatim; anything that normalises differently is refused
        if posixpath.normpath(key) != key or key.startswith("/"):
            raise ValueError(f"Invalid object key: {key}")
        path = os.path.abspath(os.path.join(self.root, key))
        if os.path.commonpath([self.root, path]) != self.root or key.endswith(META_SUFFIX):
            raise ValueError(f"Invalid object key: {key}")
        return path

    def put(self, key: str, data: bytes, content_type: str) -> str:
        path = self._path_for(key)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
        with open(path + META_SUFFIX, "w") as f:
            json.dump({"content_type": content_type}, f)
        return key

    def get(self, key: str) -> Optional[StoredObject]:
        try:
            path = self._path_for(key)
        except ValueError:
            return None
        if not os.path.isfile(path):
            return None
        with open(path, "rb") as f:
            data = f.read()
        content_type = "application/octet-stream"
        if os.path.exists(path + META_SUFFIX):
            with open(path + META_SUFFIX) as f:
                content_type = json.load(f).get("content_type", content_type)
        etag = f'"{hashlib.md5(data).hexdigest()}"'
        return StoredObject(key=key, data=data, content_type=content_type, etag=etag)
