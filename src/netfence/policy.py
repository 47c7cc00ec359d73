from __future__ import annotations

import re
from typing import List, Optional

from .errors import PatternValidationError
from .log import get_logger
from .models import HOST_PATTERN_REGEX, ParseResult

logger = get_logger(__name__)

_HOST_PATTERN_RE = re.compile(HOST_PATTERN_REGEX)


def parse_allowlist(raw: Optional[str]) -> ParseResult:
    """Split a comma-separated allowlist into validated host patterns.

    Blank input means "no exceptions" and is valid. Bad entries are
    reported in ``errors`` and left out of ``patterns``; parsing carries on
    with the remaining entries.
    """
    if raw is None or not raw.strip():
        return ParseResult()

    patterns: List[str] = []
    errors: List[str] = []
    for part in raw.split(","):
        entry = part.strip()
        if not entry:
            continue
        try:
            patterns.append(validate_host_pattern(entry))
        except PatternValidationError as exc:
            logger.debug("Rejected allowlist entry %r: %s", exc.entry, exc.reason)
            errors.append(str(exc))

    return ParseResult(patterns=patterns, is_valid=not errors, errors=errors)


def normalize_entry(value: str) -> str:
    return value.strip().lower()


def validate_host_pattern(entry: str) -> str:
    """Return the normalized pattern, or raise PatternValidationError."""
    original = entry.strip()
    pattern = normalize_entry(entry)
    if _HOST_PATTERN_RE.fullmatch(pattern):
        return pattern
    raise PatternValidationError(original, _explain(pattern))


def _explain(pattern: str) -> str:
    if "://" in pattern:
        return "protocols are not allowed, use a bare hostname"
    if "/" in pattern:
        return "paths are not allowed"
    if ":" in pattern:
        return "ports are not allowed"
    wildcards = pattern.count("*")
    if wildcards > 1:
        return "only one wildcard is allowed"
    if wildcards == 1 and not pattern.startswith("*."):
        return "wildcard must be a leading '*.'"
    return "expected a hostname, IP address or '*.' wildcard domain"
