from __future__ import annotations

import os
from typing import List, Mapping, Optional

from .errors import ConfigurationError
from .log import get_logger
from .policy import parse_allowlist
from .rules import build_host_resolver_rules_flag

logger = get_logger(__name__)

ALLOWLIST_ENV = "BROWSER_ALLOWED_HOSTS"


def get_network_isolation_args(
    environ: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """Return the browser arguments that block all hosts except the allowlist.

    The allowlist is read from ``BROWSER_ALLOWED_HOSTS`` on every call.
    Raises ConfigurationError listing every bad entry if any entry is
    invalid; the browser must not be launched in that case.
    """
    env = os.environ if environ is None else environ
    result = parse_allowlist(env.get(ALLOWLIST_ENV))
    if not result.is_valid:
        raise ConfigurationError(ALLOWLIST_ENV, result.errors)

    logger.info(
        "Network isolation enabled with %d allowed host pattern(s)",
        len(result.patterns),
    )
    return [build_host_resolver_rules_flag(result.patterns)]
