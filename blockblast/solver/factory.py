"""
Strategy Factory Module - Name-based registry of solver strategies.

Strategies register themselves at import time with @register_strategy;
settings and the CLI refer to them by their `name` attribute.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from .base import SolverStrategy

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "exhaustive"

_registry: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Raises:
        ValueError: If another class already uses the same name
    """
    existing = _registry.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Strategy name already registered: {cls.name}")
    _registry[cls.name] = cls
    return cls


def get_default_strategy_name() -> str:
    """The "exhaustive" strategy when registered, else the first one."""
    if DEFAULT_STRATEGY in _registry:
        return DEFAULT_STRATEGY
    return next(iter(_registry), "")


def create_strategy(name: Optional[str] = None, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Strategy name, None for the default
        **kwargs: Passed to the strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If no strategy has that name
    """
    name = name or get_default_strategy_name()
    try:
        cls = _registry[name]
    except KeyError:
        available = ", ".join(_registry) or "none"
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None
    logger.debug(f"Using strategy '{name}'")
    return cls(**kwargs)


def get_strategy_names() -> List[str]:
    return list(_registry)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name and description of each strategy, for menus and --help."""
    return [
        {"name": name, "description": cls.description}
        for name, cls in _registry.items()
    ]
