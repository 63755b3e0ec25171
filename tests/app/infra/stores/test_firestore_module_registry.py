"""Testes do FirestoreModuleRegistry com client Firestore simulado."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.domain.module import ModuleRecord
from app.infra.stores.firestore_module_registry import FirestoreModuleRegistry
from utils.errors import FirestoreUnavailableError, StoreUnavailableError


def _doc(data: dict[str, object] | None) -> SimpleNamespace:
    return SimpleNamespace(exists=data is not None, to_dict=lambda: data)


@pytest.mark.asyncio
async def test_get_module_returns_record() -> None:
    client = MagicMock()
    client.collection.return_value.document.return_value.get.return_value = _doc(
        {
            "name": "ltest2",
            "type": "github",
            "repository": "luca-rand/testing",
            "description": "Move along, just for testing",
            "star_count": 2,
        }
    )

    record = await FirestoreModuleRegistry(client).get_module("ltest2")

    assert record == ModuleRecord(
        name="ltest2",
        repository="luca-rand/testing",
        description="Move along, just for testing",
        star_count=2,
    )
    client.collection.assert_called_with("modules")
    client.collection.return_value.document.assert_called_with("ltest2")


@pytest.mark.asyncio
async def test_get_module_null_description_becomes_empty() -> None:
    client = MagicMock()
    client.collection.return_value.document.return_value.get.return_value = _doc(
        {
            "name": "ltest2",
            "type": "github",
            "repository": "luca-rand/testing",
            "description": None,
            "star_count": 0,
        }
    )

    record = await FirestoreModuleRegistry(client).get_module("ltest2")

    assert record is not None
    assert record.description == ""
    assert record.to_firestore_dict()["description"] == ""


@pytest.mark.asyncio
async def test_get_module_missing_returns_none() -> None:
    client = MagicMock()
    client.collection.return_value.document.return_value.get.return_value = _doc(None)

    assert await FirestoreModuleRegistry(client).get_module("ltest2") is None


@pytest.mark.asyncio
async def test_save_module_sets_document_by_name() -> None:
    client = MagicMock()
    record = ModuleRecord(name="ltest2", repository="luca-rand/testing", star_count=2)

    await FirestoreModuleRegistry(client, modules_collection="registry_modules").save_module(
        record
    )

    client.collection.assert_called_with("registry_modules")
    client.collection.return_value.document.assert_called_with("ltest2")
    client.collection.return_value.document.return_value.set.assert_called_once_with(
        {
            "name": "ltest2",
            "type": "github",
            "repository": "luca-rand/testing",
            "description": "",
            "star_count": 2,
        }
    )


@pytest.mark.asyncio
async def test_count_modules_for_repository_ignores_case() -> None:
    client = MagicMock()
    docs = [
        _doc({"repository": "luca-rand/testing"}),
        _doc({"repository": "Luca-Rand/Testing"}),
        _doc({"repository": "luca-rand/other"}),
        _doc({}),
    ]
    client.collection.return_value.select.return_value.stream.return_value = iter(docs)

    count = await FirestoreModuleRegistry(client).count_modules_for_repository(
        "LUCA-RAND/testing"
    )

    assert count == 2
    client.collection.return_value.select.assert_called_once_with(["repository"])


@pytest.mark.asyncio
async def test_list_builds_reads_builds_collection() -> None:
    client = MagicMock()
    client.collection.return_value.stream.return_value = iter([_doc({"module": "ltest2"})])

    builds = await FirestoreModuleRegistry(client).list_builds()

    assert builds == [{"module": "ltest2"}]
    client.collection.assert_called_with("builds")


@pytest.mark.asyncio
async def test_get_module_failure_raises_store_unavailable() -> None:
    client = MagicMock()
    client.collection.return_value.document.return_value.get.side_effect = RuntimeError("boom")

    with pytest.raises(FirestoreUnavailableError) as exc_info:
        await FirestoreModuleRegistry(client).get_module("ltest2")

    assert isinstance(exc_info.value, StoreUnavailableError)
    assert exc_info.value.backend == "firestore"
    assert exc_info.value.operation == "get_module"


@pytest.mark.asyncio
async def test_save_module_failure_raises_store_unavailable() -> None:
    client = MagicMock()
    client.collection.return_value.document.return_value.set.side_effect = RuntimeError("boom")

    with pytest.raises(FirestoreUnavailableError, match="save_module"):
        await FirestoreModuleRegistry(client).save_module(
            ModuleRecord(name="ltest2", repository="a/b")
        )
