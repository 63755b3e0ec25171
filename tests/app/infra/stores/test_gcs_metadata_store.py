"""Testes do GCSMetadataStore com bucket simulado."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import Forbidden, NotFound

from app.infra.stores.gcs_metadata_store import GCSMetadataStore, metadata_object_name
from utils.errors import StorageUnavailableError


def test_metadata_object_name() -> None:
    assert metadata_object_name("ltest2", "versions.json") == "ltest2/meta/versions.json"


@pytest.mark.asyncio
async def test_read_metadata_downloads_blob() -> None:
    bucket = MagicMock()
    bucket.blob.return_value.download_as_bytes.return_value = b'{"latest":null,"versions":[]}'

    data = await GCSMetadataStore(bucket).read_metadata("ltest2", "versions.json")

    assert data == b'{"latest":null,"versions":[]}'
    bucket.blob.assert_called_once_with("ltest2/meta/versions.json")


@pytest.mark.asyncio
async def test_read_metadata_missing_returns_none() -> None:
    bucket = MagicMock()
    bucket.blob.return_value.download_as_bytes.side_effect = NotFound("no such object")

    assert await GCSMetadataStore(bucket).read_metadata("ltest2", "versions.json") is None


@pytest.mark.asyncio
async def test_read_metadata_other_error_raises() -> None:
    bucket = MagicMock()
    bucket.blob.return_value.download_as_bytes.side_effect = Forbidden("denied")

    with pytest.raises(StorageUnavailableError) as exc_info:
        await GCSMetadataStore(bucket).read_metadata("ltest2", "versions.json")

    assert exc_info.value.backend == "gcs"
    assert exc_info.value.operation == "read_metadata"


@pytest.mark.asyncio
async def test_write_metadata_uploads_json() -> None:
    bucket = MagicMock()

    await GCSMetadataStore(bucket).write_metadata("ltest2", "versions.json", b"{}")

    bucket.blob.assert_called_once_with("ltest2/meta/versions.json")
    bucket.blob.return_value.upload_from_string.assert_called_once_with(
        b"{}", content_type="application/json"
    )


@pytest.mark.asyncio
async def test_write_metadata_failure_raises() -> None:
    bucket = MagicMock()
    bucket.blob.return_value.upload_from_string.side_effect = ConnectionError("reset")

    with pytest.raises(StorageUnavailableError, match="write_metadata"):
        await GCSMetadataStore(bucket).write_metadata("ltest2", "versions.json", b"{}")
