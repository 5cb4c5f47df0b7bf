"""
Serializers package for slicey.

This package contains serializer implementations for converting claims and run
results to and from JSON.
"""

from .serializer import Serializer, get_default_serializer
from .pydantic_serializer import PydanticSerializer

__all__ = [
    'Serializer',
    'get_default_serializer',
    'PydanticSerializer',
]
