from pydantic import BaseModel, ConfigDict


class Greeting(BaseModel):
    """A persisted greeting message"""

    id: int
    message: str

    model_config = ConfigDict(from_attributes=True)
