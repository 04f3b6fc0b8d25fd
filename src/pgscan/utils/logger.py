"""Logger lookup for pgscan.

Every pgscan logger lives under the "pgscan" namespace, so a host
application can raise scanner verbosity with one call:

    >>> import logging
    >>> logging.getLogger("pgscan").setLevel(logging.DEBUG)

Scanners log scan start and finish, quoted-identifier transitions and
recorded errors at DEBUG; token tracing is enabled through ScanConfig.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for name inside the pgscan namespace.

    Names already under "pgscan" are used as given; anything else is
    prefixed with "pgscan.".

    Example:
        >>> get_logger("pgscan.lexer.standby").name
        'pgscan.lexer.standby'
        >>> get_logger("walreceiver").name
        'pgscan.walreceiver'
    """
    if not (name == "pgscan" or name.startswith("pgscan.")):
        name = f"pgscan.{name}"
    return logging.getLogger(name)
