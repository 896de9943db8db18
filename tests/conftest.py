from __future__ import annotations

from pathlib import Path

import pytest

from builders import build_archive, simple_object


@pytest.fixture
def object_bytes() -> bytes:
    return simple_object()


@pytest.fixture
def archive_path(tmp_path: Path, object_bytes: bytes) -> Path:
    path = tmp_path / "libfoo.a"
    path.write_bytes(build_archive([("foo.o", object_bytes)]))
    return path
