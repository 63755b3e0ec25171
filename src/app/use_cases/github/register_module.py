"""Use case de registro de módulo a partir de um evento ping do GitHub."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.versions import VERSIONS_METADATA_KEY, VersionsMetadata
from app.protocols.models import RegistrationOutcome
from app.protocols.validator import ValidationError
from app.services.registration_policy import RegistrationPolicy

if TYPE_CHECKING:
    from app.protocols.metadata_store import MetadataStoreProtocol
    from app.protocols.models import PingEvent
    from app.protocols.module_registry import ModuleRegistryProtocol
    from app.protocols.validator import ModuleNameValidatorProtocol

logger = logging.getLogger(__name__)


class RegisterModuleUseCase:
    """Orquestra validação do nome, política de registro e persistência.

    Ordem de escrita: registro do módulo primeiro, metadados depois. Sem
    transação entre os stores: se o processo cair entre as duas escritas,
    o próximo ping aceito inicializa o versions.json que ficou faltando.
    """

    def __init__(
        self,
        registry: ModuleRegistryProtocol,
        metadata_store: MetadataStoreProtocol,
        name_validator: ModuleNameValidatorProtocol,
        policy: RegistrationPolicy | None = None,
    ) -> None:
        self._registry = registry
        self._metadata_store = metadata_store
        self._validate_name = name_validator
        self._policy = policy or RegistrationPolicy(registry)

    async def execute(self, name: str, event: PingEvent) -> RegistrationOutcome:
        """Executa o registro (ou revalidação) do módulo.

        Args:
            name: Nome do módulo recebido no path (pode ser vazio).
            event: Evento ping normalizado.

        Raises:
            StoreUnavailableError: Propagado dos stores, sem tratamento aqui.

        Returns:
            RegistrationOutcome de aceite ou de rejeição classificada.
        """
        try:
            name = self._validate_name(name)
        except ValidationError as exc:
            logger.info("registration_rejected", extra={"reason": exc.error})
            return RegistrationOutcome.reject(exc.error, exc.message)

        decision = await self._policy.decide(name, event)
        if isinstance(decision, RegistrationOutcome):
            return decision

        record = decision.record
        needs_versions = decision.is_new or await self._versions_missing(name)

        await self._registry.save_module(record)
        if needs_versions:
            await self._bootstrap_versions(name)

        logger.info(
            "module_registered",
            extra={
                "module_name": name,
                "repository": record.repository,
                "module_created": decision.is_new,
            },
        )
        return RegistrationOutcome.accept(module=name, repository=record.repository)

    async def _versions_missing(self, name: str) -> bool:
        missing = await self._metadata_store.read_metadata(name, VERSIONS_METADATA_KEY) is None
        if missing:
            # Registro existente sem versions.json: tratado como não inicializado
            logger.warning("versions_metadata_missing", extra={"module_name": name})
        return missing

    async def _bootstrap_versions(self, name: str) -> None:
        await self._metadata_store.write_metadata(
            name,
            VERSIONS_METADATA_KEY,
            VersionsMetadata().to_bytes(),
        )
