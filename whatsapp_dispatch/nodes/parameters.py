"""
Parameter resolution helpers.

The host resolves node parameters per item (expressions may differ between
items). Nodes receive that lookup as a callable with the signature
``get_parameter(name, item_index, default)``.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

ParameterResolver = Callable[[str, int, Any], Any]


def static_parameters(values: Mapping[str, Any]) -> ParameterResolver:
    """Resolver returning the same parameter values for every item."""

    def get_parameter(name: str, item_index: int, default: Any = None) -> Any:
        return values.get(name, default)

    return get_parameter


def per_item_parameters(values: Sequence[Mapping[str, Any]]) -> ParameterResolver:
    """Resolver reading the parameters of item ``i`` from ``values[i]``."""

    def get_parameter(name: str, item_index: int, default: Any = None) -> Any:
        return values[item_index].get(name, default)

    return get_parameter
