"""Política de registro de módulos disparada por eventos ping.

Decide aceite ou rejeição a partir do estado atual do registry, sem
escrever nada. A escrita fica com o use case, e só acontece depois
que todas as checagens passaram.

Regras:
- Nome já registrado para outro repositório: REPOSITORY_MISMATCH.
- Nome novo com o repositório no limite de módulos: REPOSITORY_QUOTA_EXCEEDED.
- Caso contrário: upsert do registro com o repositório em minúsculas.

A checagem de cota não é atômica com a criação; pings simultâneos do
mesmo repositório podem ultrapassar o limite (limite "soft").
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.constants.registry import (
    GITHUB_MODULE_TYPE,
    MAX_MODULES_PER_REPOSITORY,
    MESSAGE_QUOTA_EXCEEDED_TEMPLATE,
    MESSAGE_REPOSITORY_MISMATCH,
)
from app.domain.module import ModuleRecord
from app.protocols.models import RegistrationError, RegistrationOutcome

if TYPE_CHECKING:
    from app.protocols.models import PingEvent
    from app.protocols.module_registry import ModuleRegistryProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegistrationPlan:
    """Escrita aprovada pela política: registro a gravar e se é criação."""

    record: ModuleRecord
    is_new: bool


def build_module_record(name: str, event: PingEvent) -> ModuleRecord:
    """Monta o registro a partir do evento, com repositório normalizado."""
    return ModuleRecord(
        name=name,
        type=GITHUB_MODULE_TYPE,
        repository=event.repository_full_name.lower(),
        description=event.description,
        star_count=event.star_count,
    )


class RegistrationPolicy:
    """Motor de decisão do registro (stateless, uma instância por processo)."""

    def __init__(
        self,
        registry: ModuleRegistryProtocol,
        max_modules_per_repository: int = MAX_MODULES_PER_REPOSITORY,
    ) -> None:
        self._registry = registry
        self._max_modules = max_modules_per_repository

    async def decide(
        self,
        name: str,
        event: PingEvent,
    ) -> RegistrationOutcome | RegistrationPlan:
        """Avalia o ping para o nome já validado.

        Args:
            name: Nome do módulo (validado).
            event: Evento ping normalizado.

        Returns:
            RegistrationOutcome de rejeição, ou RegistrationPlan com a escrita.
        """
        existing = await self._registry.get_module(name)

        if existing is not None:
            if not existing.is_bound_to(event.repository_full_name):
                logger.info(
                    "registration_rejected",
                    extra={
                        "module_name": name,
                        "reason": RegistrationError.REPOSITORY_MISMATCH,
                    },
                )
                return RegistrationOutcome.reject(
                    RegistrationError.REPOSITORY_MISMATCH,
                    MESSAGE_REPOSITORY_MISMATCH,
                )
            return RegistrationPlan(record=build_module_record(name, event), is_new=False)

        count = await self._registry.count_modules_for_repository(event.repository_full_name)
        if count >= self._max_modules:
            logger.info(
                "registration_rejected",
                extra={
                    "module_name": name,
                    "reason": RegistrationError.REPOSITORY_QUOTA_EXCEEDED,
                    "repository_modules": count,
                },
            )
            return RegistrationOutcome.reject(
                RegistrationError.REPOSITORY_QUOTA_EXCEEDED,
                MESSAGE_QUOTA_EXCEEDED_TEMPLATE.format(limit=self._max_modules),
            )

        return RegistrationPlan(record=build_module_record(name, event), is_new=True)
