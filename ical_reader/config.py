import logging
from yaml import load, SafeLoader

from .constants import TEXT


class DeserializerConfig:
    log_level = None
    default_type = TEXT
    type_mappings = {}

    def __init__(self, **kwargs):
        self.type_mappings = dict(self.type_mappings)
        for k, v in kwargs.items():
            if v is not None:
                setattr(self, k, v)


def load_config(path):
    """Read a YAML config file, e.g.::

        log_level: DEBUG
        default_type: TEXT
        type_mappings:
          X-WR-TIMEZONE: TEXT
          X-PRIORITY: INTEGER
    """
    with open(path, 'r') as f:
        raw = load(f, Loader=SafeLoader) or {}

    config = DeserializerConfig(
        log_level=raw.get('log_level'),
        default_type=raw.get('default_type'),
        type_mappings=raw.get('type_mappings'),
    )
    if config.log_level:
        logging.basicConfig(level=config.log_level)
    logging.info(f"config :: loaded {path} ({len(config.type_mappings)} type mappings).")
    return config
