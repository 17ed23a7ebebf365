"""
Per-item context management using contextvars for automatic propagation.

The send node sets the provider and item index once per input item; every
logger obtained through get_logger() picks them up without manual
parameter passing.
"""

from contextvars import ContextVar

_provider_context: ContextVar[str | None] = ContextVar("api_provider", default=None)
_item_context: ContextVar[int | None] = ContextVar("item_index", default=None)


def set_item_context(
    api_provider: str | None = None,
    item_index: int | None = None,
) -> None:
    """
    Set the item context for the current async context.

    Args:
        api_provider: Provider identifier of the item being processed
        item_index: Position of the item in the input list
    """
    if api_provider is not None:
        _provider_context.set(api_provider)
    if item_index is not None:
        _item_context.set(item_index)


def get_current_provider_context() -> str | None:
    """Get the current provider identifier, or None if not set."""
    return _provider_context.get()


def get_current_item_context() -> int | None:
    """Get the current item index, or None if not set."""
    return _item_context.get()


def clear_item_context() -> None:
    """
    Clear the item context.

    Called by the send node after each batch so later log lines are not
    attributed to the last processed item.
    """
    _provider_context.set(None)
    _item_context.set(None)


def get_context_info() -> dict[str, str | int | None]:
    """
    Get current context information for debugging.

    Returns:
        Dictionary with current api_provider and item_index
    """
    return {
        "api_provider": get_current_provider_context(),
        "item_index": get_current_item_context(),
    }
