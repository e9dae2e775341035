from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class CommandType(str, Enum):
    JOIN = "join"
    CHAT = "chat"
    JOKE = "joke"
    MEMBERS = "members"
    PRIV = "priv"
    NAME = "name"


class JoinRequest(BaseModel):
    type: Literal["join"] = "join"
    name: str


class ChatRequest(BaseModel):
    type: Literal["chat"] = "chat"
    text: str


class JokeRequest(BaseModel):
    type: Literal["joke"] = "joke"


class MembersRequest(BaseModel):
    type: Literal["members"] = "members"


class PrivRequest(BaseModel):
    type: Literal["priv"] = "priv"
    text: str


class NameRequest(BaseModel):
    type: Literal["name"] = "name"
    text: str


CommandRequest = Annotated[
    Union[JoinRequest, ChatRequest, JokeRequest, MembersRequest, PrivRequest, NameRequest],
    Field(discriminator="type"),
]


class OutboundMessage(BaseModel):
    name: Optional[str] = None
    type: str
    text: str

    def to_json(self) -> str:
        # notices carry no sender, so the field is left out entirely
        return self.model_dump_json(exclude_none=True)

    @classmethod
    def note(cls, text: str) -> "OutboundMessage":
        return cls(type="note", text=text)
