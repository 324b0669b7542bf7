from abc import ABC, abstractmethod
from typing import List, Optional

from greeting_api.domain.models import Greeting


class GreetingRepositoryInterface(ABC):
    """Persistence contract for greetings"""

    @abstractmethod
    async def save(self, message: str) -> Greeting:
        """Store a new greeting and return it with its assigned id"""

    @abstractmethod
    async def find_by_id(self, greeting_id: int) -> Optional[Greeting]:
        """Return the greeting with ``greeting_id`` or ``None``"""

    @abstractmethod
    async def find_all(self) -> List[Greeting]:
        """Return every stored greeting"""
