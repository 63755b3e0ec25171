"""Builders de resposta do webhook GitHub."""

from .registration import (
    build_error_response,
    build_info_response,
    build_registration_body,
    build_registration_response,
)

__all__ = [
    "build_error_response",
    "build_info_response",
    "build_registration_body",
    "build_registration_response",
]
