"""Shared fixtures for depverify tests."""

import io
import tarfile
import zipfile
from pathlib import Path

import pytest


@pytest.fixture
def make_directory(tmp_path):
    """Create a directory holding empty files with the given names."""

    def _make(name: str, files: list[str]) -> Path:
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        for file_name in files:
            (directory / file_name).write_bytes(b"")
        return directory

    return _make


@pytest.fixture
def make_zip(tmp_path):
    """Create a zip distribution; entry names ending in '/' become directories."""

    def _make(name: str, entries: list[str]) -> Path:
        archive = tmp_path / name
        with zipfile.ZipFile(archive, "w") as zf:
            for entry in entries:
                zf.writestr(entry, b"" if entry.endswith("/") else b"content")
        return archive

    return _make


@pytest.fixture
def make_tar(tmp_path):
    """Create a gzipped tar distribution; entry names ending in '/' become directories."""

    def _make(name: str, entries: list[str]) -> Path:
        archive = tmp_path / name
        with tarfile.open(archive, "w:gz") as tf:
            for entry in entries:
                if entry.endswith("/"):
                    info = tarfile.TarInfo(entry.rstrip("/"))
                    info.type = tarfile.DIRTYPE
                    tf.addfile(info)
                else:
                    data = b"content"
                    info = tarfile.TarInfo(entry)
                    info.size = len(data)
                    tf.addfile(info, io.BytesIO(data))
        return archive

    return _make
