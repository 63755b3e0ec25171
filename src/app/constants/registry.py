"""Constantes do registry de módulos.

Mensagens de erro fazem parte do contrato do webhook e são comparadas
literalmente pelos clientes.
"""

from __future__ import annotations

# Máximo de nomes distintos vinculados a um mesmo repositório
MAX_MODULES_PER_REPOSITORY = 3

# Sintaxe de nome válido: minúsculas, dígitos e underscore, 3 a 40 caracteres
VALID_MODULE_NAME_PATTERN = r"^[a-z0-9_]{3,40}$"

# Provedor de origem gravado em ModuleRecord.type
GITHUB_MODULE_TYPE = "github"

# Evento do GitHub tratado por este pipeline
PING_EVENT = "ping"

MESSAGE_MISSING_NAME = "no module name specified"
MESSAGE_INVALID_NAME = "module name is not valid"
MESSAGE_REPOSITORY_MISMATCH = "module name is registered to a different repository"
MESSAGE_QUOTA_EXCEEDED_TEMPLATE = "max number of modules for one repository ({limit}) has been reached"
MESSAGE_MALFORMED_PAYLOAD = "malformed webhook payload"
MESSAGE_STORE_UNAVAILABLE = "storage backend unavailable"
MESSAGE_NOT_PING_EVENT = "not a ping event"
