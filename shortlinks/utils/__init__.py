from shortlinks.utils.config import ClientConfig, app_env, app_name, app_prefix, load_config
from shortlinks.utils.helpers import as_utc, parse_timestamp, format_timestamp
from shortlinks.utils.logging import initialize_logging


__all__ = [
    'ClientConfig',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'as_utc',
    'parse_timestamp',
    'format_timestamp',
    'initialize_logging',
]
