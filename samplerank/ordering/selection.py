"""Choosing which configuration applies to a session."""

from typing import Iterable, Optional

from .criteria import OrderingConfiguration


def select_configuration(
    configs: Iterable[OrderingConfiguration],
    session_type: Optional[str] = None,
) -> Optional[OrderingConfiguration]:
    """
    Pick the configuration for a session.

    A configuration scoped to ``session_type`` wins. Otherwise the first
    configuration flagged as default is used. Returns None when neither exists.
    """
    configs = list(configs)

    if session_type is not None:
        for config in configs:
            if config.scope is not None and config.scope.session_type == session_type:
                return config

    for config in configs:
        if config.is_default and (config.scope is None or config.scope.matches(session_type)):
            return config

    return None
