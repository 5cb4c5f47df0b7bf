from dataclasses import dataclass
from typing import TypeVar

from pydantic import TypeAdapter
from slicey.serializers.serializer import Serializer

T = TypeVar("T")


@dataclass
class PydanticSerializer(Serializer[T]):
    type_adapter: TypeAdapter[T]
    indent: int | None = None

    def serialize(self, obj: T) -> bytes:
        result = self.type_adapter.dump_json(obj, indent=self.indent)
        return result

    def deserialize(self, data: bytes) -> T:
        result = self.type_adapter.validate_json(data)
        return result
