"""Endpoints de health check para Cloud Run.

`/ready` só verifica os backends cloud configurados; backends em memória
aparecem como `skipped` e não bloqueiam a prontidão.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_registry_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "registry-webhook"
CHECK_TIMEOUT_SECONDS = 3.0
READY_STATUSES = frozenset({"ok", "degraded", "skipped"})


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de um backend."""

    status: Literal["ok", "degraded", "failed", "skipped"]
    backend: str
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "backend": self.backend,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: registry (Firestore) e metadados (GCS)."""
    settings = get_registry_settings()
    state = request.app.state

    if settings.registry_backend == "firestore":
        registry_task = _check_firestore(getattr(state, "firestore_client", None))
    else:
        registry_task = _skipped(settings.registry_backend)

    if settings.metadata_backend == "gcs":
        metadata_task = _check_metadata_bucket(getattr(state, "metadata_bucket", None))
    else:
        metadata_task = _skipped(settings.metadata_backend)

    registry_check, metadata_check = await asyncio.gather(registry_task, metadata_task)
    ready = registry_check.status in READY_STATUSES and metadata_check.status in READY_STATUSES

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "registry": registry_check.as_dict(),
            "metadata": metadata_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _skipped(backend: str) -> DependencyCheck:
    return DependencyCheck(status="skipped", backend=backend)


async def _check_firestore(firestore_client: Any | None) -> DependencyCheck:
    if firestore_client is None:
        return DependencyCheck(status="failed", backend="firestore", error="not_configured")
    started_at = time.perf_counter()
    try:
        exists = await asyncio.wait_for(
            asyncio.to_thread(_read_firestore_health_doc, firestore_client),
            timeout=CHECK_TIMEOUT_SECONDS,
        )
    except TimeoutError:
        return DependencyCheck(status="failed", backend="firestore", error="timeout")
    except Exception as exc:
        logger.warning(
            "readiness_firestore_check_failed",
            extra={"error_type": type(exc).__name__},
        )
        return DependencyCheck(status="failed", backend="firestore", error=type(exc).__name__)
    latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
    # Documento de health ausente: Firestore responde, mas o seed do startup falhou
    status = "ok" if exists else "degraded"
    return DependencyCheck(status=status, backend="firestore", latency_ms=latency_ms)


def _read_firestore_health_doc(firestore_client: Any) -> bool:
    doc = firestore_client.collection("_health").document("check").get()
    return bool(getattr(doc, "exists", False))


async def _check_metadata_bucket(bucket: Any | None) -> DependencyCheck:
    if bucket is None:
        return DependencyCheck(status="failed", backend="gcs", error="not_configured")
    started_at = time.perf_counter()
    try:
        exists = await asyncio.wait_for(
            asyncio.to_thread(bucket.exists),
            timeout=CHECK_TIMEOUT_SECONDS,
        )
    except TimeoutError:
        return DependencyCheck(status="failed", backend="gcs", error="timeout")
    except Exception as exc:
        logger.warning("readiness_gcs_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", backend="gcs", error=type(exc).__name__)
    if not exists:
        return DependencyCheck(status="failed", backend="gcs", error="bucket_not_found")
    latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
    return DependencyCheck(status="ok", backend="gcs", latency_ms=latency_ms)
