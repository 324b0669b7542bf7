"""Service layer."""

from .greeting_service import DEFAULT_GREETING, GreetingService

__all__ = ["DEFAULT_GREETING", "GreetingService"]
