from dataclasses import dataclass

from slicey.config.slicey_config import SliceyConfig
from slicey.runner import Runner, create_runners


@dataclass
class DefaultSliceyConfig(SliceyConfig):
    """Configuration object for slicey"""
    strict: bool = False

    def get_runners(self) -> dict[str, Runner]:
        return create_runners(strict=self.strict)

    def is_strict(self) -> bool:
        return self.strict
