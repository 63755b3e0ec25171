"""Testes de config.settings (base, registry, firestore, gcs)."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    FirestoreSettings,
    GCSSettings,
    RegistrySettings,
)
from config.settings.base.core import _load_base_from_env
from config.settings.base.registry import _load_registry_from_env
from config.settings.infra.firestore import _load_firestore_from_env
from config.settings.infra.gcs import _load_gcs_from_env


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_default_values(self) -> None:
        settings = BaseSettings()

        assert settings.environment == "development"
        assert settings.service_name == "registry-webhook"
        assert settings.is_development
        assert settings.validate() == []

    def test_immutable(self) -> None:
        settings = BaseSettings()

        with pytest.raises(AttributeError):
            settings.environment = "production"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGING", "staging"), ("qualquer", "development")],
    )
    def test_environment_aliases(
        self,
        monkeypatch: pytest.MonkeyPatch,
        raw: str,
        expected: str,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert _load_base_from_env().environment == expected

    def test_gcp_project_falls_back_to_google_cloud_project(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("GCP_PROJECT", raising=False)
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "registry-prod")
        assert _load_base_from_env().gcp_project == "registry-prod"

    def test_empty_service_name_is_invalid(self) -> None:
        assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.delenv("DEBUG", raising=False)

        settings = _load_base_from_env()

        assert settings.log_level == "WARNING"
        assert settings.effective_log_level == "WARNING"

    def test_debug_forces_debug_level(self) -> None:
        assert BaseSettings(debug=True, log_level="ERROR").effective_log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        assert BaseSettings(log_level="VERBOSE").validate() == ["LOG_LEVEL inválido: VERBOSE"]


class TestRegistrySettings:
    """Testes para RegistrySettings."""

    def test_memory_is_valid_in_development(self) -> None:
        assert RegistrySettings().validate(BaseSettings()) == []

    def test_memory_forbidden_outside_development(self) -> None:
        base = BaseSettings(environment="production", gcp_project="registry-prod")

        errors = RegistrySettings().validate(base)

        assert "REGISTRY_BACKEND=memory proibido em staging/production" in errors
        assert "METADATA_BACKEND=memory proibido em staging/production" in errors

    def test_firestore_requires_gcp_project(self) -> None:
        errors = RegistrySettings(registry_backend="firestore").validate(BaseSettings())
        assert errors == ["REGISTRY_BACKEND=firestore requer GCP_PROJECT configurado"]

    def test_invalid_backend_names(self) -> None:
        settings = RegistrySettings(
            registry_backend="redis",  # type: ignore[arg-type]
            metadata_backend="s3",  # type: ignore[arg-type]
        )

        errors = settings.validate(BaseSettings())

        assert "REGISTRY_BACKEND inválido: redis" in errors
        assert "METADATA_BACKEND inválido: s3" in errors

    def test_defaults_follow_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REGISTRY_BACKEND", raising=False)
        monkeypatch.delenv("METADATA_BACKEND", raising=False)

        monkeypatch.setenv("ENVIRONMENT", "production")
        assert _load_registry_from_env() == RegistrySettings("firestore", "gcs")

        monkeypatch.setenv("ENVIRONMENT", "development")
        assert _load_registry_from_env() == RegistrySettings("memory", "memory")

    def test_explicit_backends_override_defaults(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("REGISTRY_BACKEND", "FIRESTORE")
        monkeypatch.setenv("METADATA_BACKEND", "gcs")

        assert _load_registry_from_env() == RegistrySettings("firestore", "gcs")


class TestInfraSettings:
    """Testes para FirestoreSettings e GCSSettings."""

    def test_firestore_defaults(self) -> None:
        settings = FirestoreSettings()

        assert settings.collection_modules == "modules"
        assert settings.collection_builds == "builds"

    def test_firestore_project_fallback(self) -> None:
        assert FirestoreSettings().validate(gcp_project="registry-prod") == []
        assert FirestoreSettings().validate(gcp_project="") == [
            "FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado"
        ]

    def test_firestore_collections_must_differ(self) -> None:
        settings = FirestoreSettings(collection_modules="modules", collection_builds="modules")

        assert settings.validate(gcp_project="registry-prod") == [
            "Módulos e builds precisam de collections distintas"
        ]

    def test_firestore_effective_project(self) -> None:
        assert FirestoreSettings(project_id="fs-proj").effective_project("gcp") == "fs-proj"
        assert FirestoreSettings().effective_project("gcp") == "gcp"

    def test_firestore_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIRESTORE_COLLECTION_MODULES", "registry_modules")

        assert _load_firestore_from_env().collection_modules == "registry_modules"

    def test_gcs_bucket_required_only_for_gcs_backend(self) -> None:
        assert GCSSettings().validate("memory") == []
        assert GCSSettings().validate("gcs") == ["GCS_BUCKET_METADATA deve estar configurado"]
        assert GCSSettings(bucket_metadata="registry-meta").validate("gcs") == []

    def test_gcs_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GCS_BUCKET_METADATA", "registry-meta")

        assert _load_gcs_from_env().bucket_metadata == "registry-meta"
