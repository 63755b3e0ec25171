"""App — coração do sistema: casos de uso, políticas e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (registro de módulos)
- services/: política de registro (decisão, sem IO direto)
- domain/: modelos persistidos (ModuleRecord, VersionsMetadata)
- infra/: implementações concretas de IO (Firestore, GCS, memória)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados
- constants/: constantes e mensagens do contrato

Padrão: app executa; api adapta; utils apoia.
"""
