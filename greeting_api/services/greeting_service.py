"""Greeting formatting rules and persistence mediation."""

from __future__ import annotations

import logging
from typing import List, Optional

from greeting_api.application.interfaces import GreetingRepositoryInterface
from greeting_api.domain.models import Greeting

logger = logging.getLogger(__name__)

DEFAULT_GREETING = "Hello World"


def _has_text(value: Optional[str]) -> bool:
    return value is not None and value != ""


class GreetingService:
    """Compose greeting messages and delegate storage to a repository."""

    def __init__(self, repository: GreetingRepositoryInterface) -> None:
        self._repository = repository

    @staticmethod
    def default_greeting() -> str:
        return DEFAULT_GREETING

    @classmethod
    def format_greeting(
        cls,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> str:
        """Return a greeting for the supplied name parts.

        Both parts win over either alone and the first name wins over the
        last name. Missing and empty values are treated the same.
        """

        if _has_text(first_name) and _has_text(last_name):
            return f"Hello {first_name} {last_name}"
        if _has_text(first_name):
            return f"Hello {first_name}"
        if _has_text(last_name):
            return f"Hello {last_name}"
        return cls.default_greeting()

    @classmethod
    def compose_message(cls, name: Optional[str] = None) -> str:
        """Return ``Hello {name}``, or the default greeting when no name is given."""

        if _has_text(name):
            return f"Hello {name}"
        return cls.default_greeting()

    async def create_and_store(self, name: Optional[str] = None) -> Greeting:
        message = self.compose_message(name)
        greeting = await self._repository.save(message)
        logger.info("Stored greeting id=%s", greeting.id)
        return greeting

    async def fetch_by_id(self, greeting_id: int) -> Optional[Greeting]:
        return await self._repository.find_by_id(greeting_id)

    async def fetch_all(self) -> List[Greeting]:
        return await self._repository.find_all()
