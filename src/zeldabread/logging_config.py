import logging
import os
from typing import Mapping, Optional

LOG_LEVEL_ENV = "ZB_LOG_LEVEL"


def level_for(verbosity: int = 0, env: Optional[Mapping[str, str]] = None) -> int:
    """Map a ``-v`` count to a logging level.

    0 gives WARNING, 1 INFO, 2 or more DEBUG. A valid level name in
    ZB_LOG_LEVEL wins over the count; an unknown name is ignored.
    """
    env = os.environ if env is None else env
    name = env.get(LOG_LEVEL_ENV)
    if name:
        level = logging.getLevelName(name.strip().upper())
        if isinstance(level, int):
            return level
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbosity: int = 0, env: Optional[Mapping[str, str]] = None) -> int:
    """Configure the root logger for the CLI and return the level used."""
    level = level_for(verbosity, env)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
    return level
