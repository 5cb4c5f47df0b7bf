from slicey.config.slicey_config import SliceyConfig, get_config, set_config
from slicey.config.default_slicey_config import DefaultSliceyConfig

__all__ = [
    'SliceyConfig',
    'DefaultSliceyConfig',
    'get_config',
    'set_config',
]
