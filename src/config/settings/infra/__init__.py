"""Agregador de settings de infraestrutura GCP.

Re-exporta todas as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.firestore import (
    FirestoreSettings,
    get_firestore_settings,
)
from config.settings.infra.gcs import (
    GCSSettings,
    get_gcs_settings,
)

__all__ = [
    # Firestore
    "FirestoreSettings",
    # GCS
    "GCSSettings",
    "get_firestore_settings",
    "get_gcs_settings",
]
