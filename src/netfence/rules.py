from __future__ import annotations

from typing import Sequence

HOST_RESOLVER_RULES_FLAG = "--host-resolver-rules"
BLOCK_ALL_RULE = "MAP * ~NOTFOUND"
RULE_SEPARATOR = ", "


def build_host_resolver_rules_flag(patterns: Sequence[str]) -> str:
    """Block every host, then exclude each pattern in the order given."""
    rules = [BLOCK_ALL_RULE]
    rules.extend(f"EXCLUDE {pattern}" for pattern in patterns)
    return f"{HOST_RESOLVER_RULES_FLAG}={RULE_SEPARATOR.join(rules)}"
