"""Shared presentation module."""

from payment_lifecycle.shared.presentation.exception_handlers import register_exception_handlers
from payment_lifecycle.shared.presentation.api_response import APIResponse

__all__ = ["register_exception_handlers", "APIResponse"]
