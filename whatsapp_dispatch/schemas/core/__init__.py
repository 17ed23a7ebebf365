"""Core types shared by every provider."""

from .types import ApiProvider, ErrorCode, MessageType

__all__ = ["ApiProvider", "ErrorCode", "MessageType"]
