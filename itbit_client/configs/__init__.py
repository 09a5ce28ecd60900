from .config_reader import ConfigReader, DEFAULT_SETTINGS  # noqa: F401
from .account_reader import AccountReader  # noqa: F401
