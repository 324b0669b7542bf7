"""SQLAlchemy persistence adapters."""

from .repositories_sqlalchemy import (
    MAX_GREETING_ID,
    MIN_GREETING_ID,
    Base,
    GreetingEntity,
    SQLAlchemyGreetingRepository,
    init_models,
)

__all__ = [
    "MAX_GREETING_ID",
    "MIN_GREETING_ID",
    "Base",
    "GreetingEntity",
    "SQLAlchemyGreetingRepository",
    "init_models",
]
