import pytest

from health_ai.infrastructure.storage.local_storage import LocalObjectStorage


def test_put_then_get_keeps_content_type(tmp_path):
    storage = LocalObjectStorage(root=str(tmp_path))
    key = storage.put("medical-tests/u1/1-scan.png", b"\x89PNGdata", "image/png")

    stored = storage.get(key)
    assert stored.data == b"\x89PNGdata"
    assert stored.content_type == "image/png"
    assert stored.etag.startswith('"') and stored.etag.endswith('"')


def test_get_missing_is_none(tmp_path):
    storage = LocalObjectStorage(root=str(tmp_path))
    assert storage.get("medical-tests/u1/nothing.png") is None


def test_keys_cannot_escape_root(tmp_path):
    storage = LocalObjectStorage(root=str(tmp_path / "store"))
    with pytest.raises(ValueError):
        storage.put("../outside.png", b"x", "image/png")
    assert storage.get("../outside.png") is None


@pytest.mark.parametrize("key", [
    "medical-tests/u2/../u1/1-scan.png",
    "medical-tests/u1/./1-scan.png",
    "/medical-tests/u1/1-scan.png",
])
def test_non_normalised_keys_are_refused(tmp_path, key):
    storage = LocalObjectStorage(root=str(tmp_path))
    storage.put("medical-tests/u1/1-scan.png", b"secret", "image/png")
    with pytest.raises(ValueError):
        storage.put(key, b"x", "image/png")
    assert storage.get(key) is None
