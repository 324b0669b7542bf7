import logging
from typing import List, Optional

from sqlalchemy import BigInteger, Column, Integer, Text, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine
from sqlalchemy.orm import declarative_base

from greeting_api.application.interfaces import GreetingRepositoryInterface
from greeting_api.domain.exceptions import StorageError
from greeting_api.domain.models import Greeting

logger = logging.getLogger(__name__)

Base = declarative_base()

# Signed 64-bit range of the primary key column.
MIN_GREETING_ID = -(2**63)
MAX_GREETING_ID = 2**63 - 1


class GreetingEntity(Base):
    """SQLAlchemy entity for greetings"""

    __tablename__ = "greetings"

    # SQLite only autoincrements an INTEGER primary key.
    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    message = Column(Text, nullable=False)


class SQLAlchemyGreetingRepository(GreetingRepositoryInterface):
    """SQLAlchemy implementation of the greeting store"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, message: str) -> Greeting:
        db_greeting = GreetingEntity(message=message)
        self.session.add(db_greeting)
        try:
            await self.session.commit()
            await self.session.refresh(db_greeting)
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.exception("Failed to persist greeting")
            raise StorageError("save") from exc
        return Greeting.model_validate(db_greeting)

    async def find_by_id(self, greeting_id: int) -> Optional[Greeting]:
        if not MIN_GREETING_ID <= greeting_id <= MAX_GREETING_ID:
            return None
        try:
            result = await self.session.execute(
                select(GreetingEntity).where(GreetingEntity.id == greeting_id)
            )
        except SQLAlchemyError as exc:
            raise StorageError("find_by_id") from exc
        db_greeting = result.scalar_one_or_none()
        return Greeting.model_validate(db_greeting) if db_greeting else None

    async def find_all(self) -> List[Greeting]:
        try:
            result = await self.session.execute(
                select(GreetingEntity).order_by(GreetingEntity.id)
            )
        except SQLAlchemyError as exc:
            raise StorageError("find_all") from exc
        rows = result.scalars().all()
        return [Greeting.model_validate(row) for row in rows]


async def init_models(engine: AsyncEngine) -> None:
    """Create database tables if they do not exist"""

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
