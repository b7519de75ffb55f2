from tailsort.config.loader import ConfigFile, load_config, parse_config
from tailsort.config.resolve import resolve_options, resolve_write_mode

__all__ = [
    "ConfigFile",
    "load_config",
    "parse_config",
    "resolve_options",
    "resolve_write_mode",
]
