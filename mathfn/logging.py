import logging
import os
from logging import getLogger

log = getLogger("mathfn")
logging.basicConfig(format="[mathfn] %(message)s")

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def has_env(varname, value="true"):
    """
    Check environment variable is set.
    """
    return os.environ.get(varname, "").lower() == value


def level_from_env(default=logging.CRITICAL) -> int:
    """
    Logging level selected by the DEBUG and MATHFN_LOG environment variables.

    DEBUG=true forces debug messages. Otherwise MATHFN_LOG may be one of
    debug, info, warning or error. Logging is silent by default.
    """
    if has_env("DEBUG"):
        return logging.DEBUG
    return LEVELS.get(os.environ.get("MATHFN_LOG", "").lower(), default)


log.setLevel(level_from_env())
