import importlib
import logging
import os
from typing import TypeVar

T = TypeVar("T")
_LOGGER = logging.getLogger(__name__)


def import_from(qual_name: str):
    """Import a class, function or variable given as 'package.module.name'

    Example:
        >>> import_from('slicey.runner.Runner')
        <class 'slicey.runner.Runner'>
    """
    module_name, _, attr_name = qual_name.rpartition(".")
    module = importlib.import_module(module_name)
    return getattr(module, attr_name)


def _check_subclass(impl_type, base_type: type, source: str):
    if not (isinstance(impl_type, type) and issubclass(impl_type, base_type)):
        raise TypeError(f"{source} must name a subclass of {base_type.__name__}, got {impl_type!r}")


def get_impl(key: str, base_type: type[T], default_type: type) -> type[T]:
    """Get the implementation of base_type named by the environment variable key.

    Args:
        key: Environment variable holding a fully qualified class name
        base_type: The type the implementation must extend
        default_type: Used when the variable is unset or empty

    Raises:
        TypeError: If the chosen type does not extend base_type
    """
    qual_name = os.getenv(key)
    if not qual_name:
        _check_subclass(default_type, base_type, "default")
        return default_type
    impl_type = import_from(qual_name)
    _check_subclass(impl_type, base_type, key)
    _LOGGER.debug(f"Using {qual_name} for {key}")
    return impl_type
