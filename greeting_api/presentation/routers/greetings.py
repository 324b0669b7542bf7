"""Greeting resource endpoints under ``/api/greetings``."""

from __future__ import annotations

from typing import Annotated, Any, Callable, List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from greeting_api.config.dependencies import get_database_session
from greeting_api.domain.models import Greeting
from greeting_api.infrastructure.persistence.repositories_sqlalchemy import (
    MAX_GREETING_ID,
    MIN_GREETING_ID,
    SQLAlchemyGreetingRepository,
)
from greeting_api.presentation.dtos import (
    GreetingCreatedResponse,
    GreetingMessageResponse,
    GreetingNameRequest,
)
from greeting_api.services.greeting_service import GreetingService
from greeting_api.telemetry import record_greeting_operation

router = APIRouter(prefix="/api/greetings", tags=["greetings"])


def get_greeting_service(
    session: Annotated[AsyncSession, Depends(get_database_session)],
) -> GreetingService:
    """Wire session -> repository -> service for the current request"""

    return GreetingService(SQLAlchemyGreetingRepository(session))


ServiceDep = Annotated[GreetingService, Depends(get_greeting_service)]
GreetingIdPath = Annotated[int, Path(ge=MIN_GREETING_ID, le=MAX_GREETING_ID)]
FirstNameQuery = Annotated[Optional[str], Query(alias="firstName")]
LastNameQuery = Annotated[Optional[str], Query(alias="lastName")]


async def get_greeting(
    first_name: FirstNameQuery = None,
    last_name: LastNameQuery = None,
) -> GreetingMessageResponse:
    """Return a greeting built from the optional name query parameters"""

    message = GreetingService.format_greeting(first_name, last_name)
    return GreetingMessageResponse(message=message)


async def create_greeting(
    payload: GreetingNameRequest,
    service: ServiceDep,
) -> GreetingCreatedResponse:
    """Persist a greeting for ``payload.name``"""

    greeting = await service.create_and_store(payload.name)
    record_greeting_operation("create", "stored")
    return GreetingCreatedResponse(id=greeting.id, content=greeting.message)


async def list_greetings(service: ServiceDep) -> List[Greeting]:
    """Return every stored greeting in id order"""

    return await service.fetch_all()


async def get_greeting_by_id(greeting_id: GreetingIdPath, service: ServiceDep) -> Any:
    """Return one stored greeting, or an empty 404"""

    greeting = await service.fetch_by_id(greeting_id)
    if greeting is None:
        record_greeting_operation("lookup", "missing")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    record_greeting_operation("lookup", "found")
    return greeting


async def update_greeting(
    greeting_id: GreetingIdPath,
    payload: GreetingNameRequest,
) -> GreetingMessageResponse:
    """Report the message a greeting would be updated to.

    Nothing is written: the stored greeting keeps its original message.
    """

    message = GreetingService.compose_message(payload.name)
    record_greeting_operation("update", "placeholder")
    return GreetingMessageResponse(
        message=(
            f"Greeting ID {greeting_id} updated to: {message} "
            "(update logic placeholder)"
        )
    )


async def delete_greeting(greeting_id: GreetingIdPath) -> Response:
    """Acknowledge a delete request without removing the stored greeting."""

    record_greeting_operation("delete", "placeholder")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# "/all" must precede "/{greeting_id}" or it would be parsed as an id.
ROUTES: tuple[tuple[str, str, Callable[..., Any], dict[str, Any]], ...] = (
    ("GET", "", get_greeting, {"response_model": GreetingMessageResponse}),
    (
        "POST",
        "",
        create_greeting,
        {
            "response_model": GreetingCreatedResponse,
            "status_code": status.HTTP_201_CREATED,
        },
    ),
    ("GET", "/all", list_greetings, {"response_model": List[Greeting]}),
    (
        "GET",
        "/{greeting_id}",
        get_greeting_by_id,
        {
            "response_model": Greeting,
            "responses": {status.HTTP_404_NOT_FOUND: {"description": "Greeting not found"}},
        },
    ),
    ("PUT", "/{greeting_id}", update_greeting, {"response_model": GreetingMessageResponse}),
    (
        "DELETE",
        "/{greeting_id}",
        delete_greeting,
        {
            "status_code": status.HTTP_204_NO_CONTENT,
            "response_class": Response,
        },
    ),
)


def register_routes(target: APIRouter) -> None:
    for method, path, endpoint, options in ROUTES:
        target.add_api_route(path, endpoint, methods=[method], **options)


register_routes(router)
