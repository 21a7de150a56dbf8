import posixpath

from fastapi import APIRouter, Depends, HTTPException, Response

from ..dependencies import get_current_user_id, get_object_storage
from ..application.ports.object_storage import ObjectStorage
from ..application.services.medical_test_service import user_key_prefix

router = APIRouter(prefix="/api", tags=["Files"])


def _is_owned_key(key: str, user_id: str) -> bool:
    # The path is already percent-decoded here, so "%2E%2E" arrives as ".."
    if ".." in key.split("/") or posixpath.normpath(key) != key:
        return False
    return key.startswith(user_key_prefix(user_id))


@router.get("/files/{filename:path}")
def get_file(
    filename: str,
    current_user: str = Depends(get_current_user_id),
    storage: ObjectStorage = Depends(get_object_storage),
):
    # Other users' objects are reported exactly like missing ones
    if not _is_owned_key(filename, current_user):
        raise HTTPException(status_code=404, detail="File not found")
    stored = storage.get(filename)
    if stored is None:
        raise HTTPException(status_code=404, detail="File not found")
    return Response(content=stored.data, media_type=stored.content_type, headers={"etag": stored.etag})
