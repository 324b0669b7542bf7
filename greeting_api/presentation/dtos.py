from typing import Optional

from pydantic import BaseModel


class GreetingNameRequest(BaseModel):
    """Request DTO carrying an optional name, used by create and update"""

    name: Optional[str] = None


class GreetingMessageResponse(BaseModel):
    """Response DTO wrapping a single message"""

    message: str


class GreetingCreatedResponse(BaseModel):
    """Response DTO for a newly stored greeting"""

    message: str = "Greeting created and saved"
    id: int
    content: str
