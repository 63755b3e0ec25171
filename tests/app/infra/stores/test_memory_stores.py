"""Testes dos stores em memória."""

from __future__ import annotations

import pytest

from app.domain.module import ModuleRecord
from app.infra.stores.memory_stores import MemoryMetadataStore, MemoryModuleRegistry


class TestMemoryModuleRegistry:
    """Testes do MemoryModuleRegistry."""

    @pytest.mark.asyncio
    async def test_save_and_get_module(self) -> None:
        """Deve salvar e carregar o módulo pelo nome exato."""
        registry = MemoryModuleRegistry()
        record = ModuleRecord(name="ltest2", repository="luca-rand/testing", star_count=2)

        await registry.save_module(record)

        assert await registry.get_module("ltest2") == record
        assert await registry.get_module("LTEST2") is None

    @pytest.mark.asyncio
    async def test_save_is_upsert_by_name(self) -> None:
        """Segundo save com o mesmo nome sobrescreve o registro."""
        registry = MemoryModuleRegistry()
        await registry.save_module(ModuleRecord(name="ltest2", repository="a/b", star_count=1))
        await registry.save_module(ModuleRecord(name="ltest2", repository="a/b", star_count=9))

        loaded = await registry.get_module("ltest2")

        assert loaded is not None
        assert loaded.star_count == 9
        assert await registry.count_modules_for_repository("a/b") == 1

    @pytest.mark.asyncio
    async def test_count_modules_is_case_insensitive(self) -> None:
        registry = MemoryModuleRegistry()
        await registry.save_module(ModuleRecord(name="one", repository="Owner/Repo"))
        await registry.save_module(ModuleRecord(name="two", repository="owner/repo"))
        await registry.save_module(ModuleRecord(name="three", repository="owner/other"))

        assert await registry.count_modules_for_repository("OWNER/REPO") == 2
        assert await registry.count_modules_for_repository("nobody/none") == 0

    @pytest.mark.asyncio
    async def test_returned_record_is_a_copy(self) -> None:
        """Alterar o modelo retornado não altera o store."""
        registry = MemoryModuleRegistry()
        await registry.save_module(ModuleRecord(name="ltest2", repository="a/b"))

        loaded = await registry.get_module("ltest2")
        assert loaded is not None
        loaded.description = "changed"

        reloaded = await registry.get_module("ltest2")
        assert reloaded is not None
        assert reloaded.description == ""

    @pytest.mark.asyncio
    async def test_delete_and_clear(self) -> None:
        registry = MemoryModuleRegistry()
        await registry.save_module(ModuleRecord(name="ltest2", repository="a/b"))

        assert registry.delete_module("ltest2") is True
        assert registry.delete_module("ltest2") is False

        await registry.save_module(ModuleRecord(name="ltest3", repository="a/b"))
        registry.clear()
        assert await registry.get_module("ltest3") is None

    @pytest.mark.asyncio
    async def test_builds_queue_starts_empty(self) -> None:
        assert await MemoryModuleRegistry().list_builds() == []


class TestMemoryMetadataStore:
    """Testes do MemoryMetadataStore."""

    @pytest.mark.asyncio
    async def test_read_missing_returns_none(self) -> None:
        store = MemoryMetadataStore()
        assert await store.read_metadata("ltest2", "versions.json") is None

    @pytest.mark.asyncio
    async def test_write_and_read(self) -> None:
        store = MemoryMetadataStore()
        await store.write_metadata("ltest2", "versions.json", b'{"latest":null,"versions":[]}')

        assert await store.read_metadata("ltest2", "versions.json") == (
            b'{"latest":null,"versions":[]}'
        )
        assert await store.read_metadata("ltest3", "versions.json") is None

    @pytest.mark.asyncio
    async def test_delete_metadata(self) -> None:
        store = MemoryMetadataStore()
        await store.write_metadata("ltest2", "versions.json", b"{}")

        assert store.delete_metadata("ltest2", "versions.json") is True
        assert await store.read_metadata("ltest2", "versions.json") is None
