import logging
import os
from typing import Optional

from dotenv import load_dotenv

LOG = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LINGOTAG_CONFIG"


def load_env_file(env_path: str = ".env") -> bool:
    """
    Load environment variables from a .env file using python-dotenv.

    Parameters:
    - env_path (str): The path to the .env file. Default is '.env'.

    Returns:
    - bool: True if the file was successfully loaded, False otherwise.
    """
    if not os.path.isfile(env_path):
        LOG.debug("No '%s' file provided.", env_path)
        return False

    if load_dotenv(dotenv_path=env_path, override=False):
        LOG.info("Environment variables from '%s' loaded successfully.", env_path)
        return True
    LOG.warning("No environment variables loaded from '%s'.", env_path)
    return False


def default_config_path() -> Optional[str]:
    return os.getenv(CONFIG_ENV_VAR) or None
