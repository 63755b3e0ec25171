"""Use cases do webhook GitHub."""

from app.use_cases.github.register_module import RegisterModuleUseCase

__all__ = ["RegisterModuleUseCase"]
