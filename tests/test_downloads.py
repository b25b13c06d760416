"""Tests for download destinations and body streaming."""

import io

import pytest
from botocore.exceptions import ReadTimeoutError
from botocore.response import StreamingBody

from cos_tools.core.exceptions import CommandExecutionError, ValidationError
from cos_tools.core.plugin_config import DOWNLOAD_LOCATION, PluginConfig
from cos_tools.objectstorage.downloads import (
    OVERRIDE_HINT,
    resolve_download_path,
    save_body,
)


def body(data: bytes) -> StreamingBody:
    return StreamingBody(io.BytesIO(data), len(data))


class BrokenStream:
    """Yields one chunk, then fails like a dropped connection."""

    def __init__(self):
        self.closed = False

    def iter_chunks(self, chunk_size):
        yield b"partial"
        raise ReadTimeoutError(endpoint_url="https://s3.example.com")

    def close(self):
        self.closed = True


class TestResolveDownloadPath:
    """Test choosing where an object is written."""

    def test_outfile_wins(self, tmp_path):
        destination = resolve_download_path(
            str(tmp_path / "out.bin"), "key.bin", PluginConfig.from_settings()
        )

        assert destination == tmp_path / "out.bin"

    def test_configured_location(self, tmp_path, write_config):
        write_config({DOWNLOAD_LOCATION: str(tmp_path)})

        destination = resolve_download_path(None, "report.txt", PluginConfig.from_settings())

        assert destination == tmp_path / "report.txt"

    def test_invalid_configured_location(self, tmp_path, write_config):
        write_config({DOWNLOAD_LOCATION: str(tmp_path / "missing")})

        with pytest.raises(ValidationError, match="config ddl"):
            resolve_download_path(None, "report.txt", PluginConfig.from_settings())

    def test_key_with_missing_prefix_directory(self, tmp_path, write_config):
        write_config({DOWNLOAD_LOCATION: str(tmp_path)})

        with pytest.raises(ValidationError) as excinfo:
            resolve_download_path(None, "logs/today.txt", PluginConfig.from_settings())

        assert "is invalid" in str(excinfo.value)
        assert OVERRIDE_HINT in str(excinfo.value)

    @pytest.mark.parametrize("name", ["", "folder/"])
    def test_directory_destination(self, tmp_path, name):
        with pytest.raises(ValidationError, match="is a directory"):
            resolve_download_path(
                f"{tmp_path}/{name}", "key", PluginConfig.from_settings()
            )

    def test_existing_file(self, tmp_path):
        existing = tmp_path / "out.bin"
        existing.write_bytes(b"old")
        config = PluginConfig.from_settings()

        with pytest.raises(ValidationError, match="--force"):
            resolve_download_path(str(existing), "key", config)
        assert resolve_download_path(str(existing), "key", config, force=True) == existing


class TestSaveBody:
    """Test streaming a response body to disk."""

    def test_writes_all_chunks(self, tmp_path):
        destination = tmp_path / "out.bin"
        data = b"x" * 3_000_000

        written = save_body(body(data), destination)

        assert written == len(data)
        assert destination.read_bytes() == data

    def test_broken_stream_removes_partial_file(self, tmp_path):
        destination = tmp_path / "out.bin"
        stream = BrokenStream()

        with pytest.raises(CommandExecutionError, match="Error writing"):
            save_body(stream, destination)

        assert not destination.exists()
        assert stream.closed

    def test_unwritable_destination(self, tmp_path):
        with pytest.raises(CommandExecutionError):
            save_body(body(b"data"), tmp_path / "missing" / "out.bin")
