import asyncio
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    # Identifier shared by every stored entity
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def collection_name(cls) -> str:
        # Automatic collection name generation
        return cls.__name__.lower() + "s"

    def to_dict(self) -> dict[str, Any]:
        # Serialize object to a JSON-ready dictionary; merged values are not re-checked
        return self.model_dump(mode="json", by_alias=True, warnings=False)

    def __repr__(self) -> str:
        """String representation of the object for easier debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class InMemoryStorage:
    """
    Process-wide holder of every entity collection.
    Nothing is persisted: a new instance always starts empty.
    """

    def __init__(self) -> None:
        self._collections: dict[str, list[Base]] = {}
        # Guards read-modify-write sequences (uniqueness check + insert)
        self.lock = asyncio.Lock()

    def collection(self, model: type[Base]) -> list[Base]:
        return self._collections.setdefault(model.collection_name(), [])


storage = InMemoryStorage()
