"""Configuração do pytest para o registry webhook."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from api.validators.github import validate_module_name  # noqa: E402
from app.infra.stores.memory_stores import (  # noqa: E402
    MemoryMetadataStore,
    MemoryModuleRegistry,
)
from app.use_cases.github import RegisterModuleUseCase  # noqa: E402


@pytest.fixture
def registry() -> MemoryModuleRegistry:
    return MemoryModuleRegistry()


@pytest.fixture
def metadata_store() -> MemoryMetadataStore:
    return MemoryMetadataStore()


@pytest.fixture
def use_case(
    registry: MemoryModuleRegistry,
    metadata_store: MemoryMetadataStore,
) -> RegisterModuleUseCase:
    return RegisterModuleUseCase(
        registry=registry,
        metadata_store=metadata_store,
        name_validator=validate_module_name,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Isola nível e handlers do root logger entre testes (app/lifespan reconfiguram)."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
