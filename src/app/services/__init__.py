"""Serviços de aplicação.

Unidades reutilizáveis de decisão (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.registration_policy import (
    RegistrationPlan,
    RegistrationPolicy,
    build_module_record,
)

__all__ = [
    "RegistrationPlan",
    "RegistrationPolicy",
    "build_module_record",
]
