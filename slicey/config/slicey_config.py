from abc import ABC, abstractmethod

from slicey.constants import SLICEY_CONFIG
from slicey.runner import Runner
from slicey.util import get_impl


class SliceyConfig(ABC):
    """Configuration object for slicey"""

    @abstractmethod
    def get_runners(self) -> dict[str, Runner]:
        """Get runners keyed by puzzle identifier"""

    @abstractmethod
    def is_strict(self) -> bool:
        """Whether part 2 must find exactly one non-overlapping claim"""


_config: SliceyConfig | None = None


def get_config() -> SliceyConfig:
    global _config
    if _config is None:
        from slicey.config.default_slicey_config import DefaultSliceyConfig

        config_type = get_impl(SLICEY_CONFIG, SliceyConfig, DefaultSliceyConfig)
        _config = config_type()
    return _config


def set_config(config: SliceyConfig | None):
    global _config
    _config = config
