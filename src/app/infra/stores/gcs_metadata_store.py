"""GCS Metadata Store — blobs de metadados por módulo.

Layout dos objetos no bucket: `<modulo>/meta/<chave>`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.protocols.metadata_store import MetadataStoreProtocol
from utils.errors import StorageUnavailableError

if TYPE_CHECKING:
    from google.cloud.storage import Bucket

logger = logging.getLogger(__name__)

METADATA_CONTENT_TYPE = "application/json"


def metadata_object_name(name: str, key: str) -> str:
    """Monta o caminho do objeto de metadados no bucket."""
    return f"{name}/meta/{key}"


class GCSMetadataStore(MetadataStoreProtocol):
    """Metadata Store Gateway usando Google Cloud Storage.

    Args:
        bucket: Bucket GCS já resolvido (client.bucket(nome))
    """

    def __init__(self, bucket: Bucket) -> None:
        self._bucket = bucket

    async def read_metadata(self, name: str, key: str) -> bytes | None:
        return await asyncio.to_thread(self._read_sync, name, key)

    async def write_metadata(self, name: str, key: str, data: bytes) -> None:
        await asyncio.to_thread(self._write_sync, name, key, data)

    def _read_sync(self, name: str, key: str) -> bytes | None:
        from google.api_core.exceptions import NotFound

        blob = self._bucket.blob(metadata_object_name(name, key))
        try:
            return blob.download_as_bytes()
        except NotFound:
            return None
        except Exception as exc:
            logger.error(
                "metadata_read_failed",
                extra={"module_name": name, "key": key, "error_type": type(exc).__name__},
            )
            raise StorageUnavailableError("read_metadata") from exc

    def _write_sync(self, name: str, key: str, data: bytes) -> None:
        blob = self._bucket.blob(metadata_object_name(name, key))
        try:
            blob.upload_from_string(data, content_type=METADATA_CONTENT_TYPE)
        except Exception as exc:
            logger.error(
                "metadata_write_failed",
                extra={"module_name": name, "key": key, "error_type": type(exc).__name__},
            )
            raise StorageUnavailableError("write_metadata") from exc
        logger.debug("metadata_written", extra={"module_name": name, "key": key})
