from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass
class StoredObject:
    key: str
    data: bytes
    content_type: str
    etag: str


class ObjectStorage(Protocol):
    def put(self, key: str, data: bytes, content_type: str) -> str:
        ...

    def get(self, key: str) -> Optional[StoredObject]:
        ...
