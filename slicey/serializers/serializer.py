from abc import ABC, abstractmethod
from typing import TypeVar, Generic

from slicey.constants import SLICEY_SERIALIZER
from slicey.util import get_impl

T = TypeVar("T")


class Serializer(Generic[T], ABC):
    """Abstract serializer for converting claims and results to/from bytes"""

    @abstractmethod
    def serialize(self, obj: T) -> bytes:
        """Serialize an object to bytes

        Args:
            obj: The object to serialize

        Returns:
            bytes: The serialized representation
        """

    @abstractmethod
    def deserialize(self, data: bytes) -> T:
        """Deserialize bytes back to an object

        Args:
            data: The serialized bytes

        Returns:
            T: The deserialized object
        """


def get_default_serializer(obj_type) -> Serializer:
    from pydantic import TypeAdapter
    from slicey.serializers.pydantic_serializer import PydanticSerializer

    serializer_class = get_impl(SLICEY_SERIALIZER, Serializer, PydanticSerializer)
    return serializer_class(TypeAdapter(obj_type))
