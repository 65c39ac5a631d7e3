from pwnlib.log import getLogger as _getLogger
from pwnlib.log import install_default_handler

__all__ = ["getLogger", "install_default_handler"]


def getLogger(name: str):
    """
    Return a pwntools logger for one of our modules.

    It lives below the 'pwnlib' logger so that context.log_level and the
    pwntools console handler (see install_default_handler) apply to it.
    """
    return _getLogger(f"pwnlib.mastermind.{name}")
