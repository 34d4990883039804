"""Callback interface for send results."""

from typing import Any, Dict, Protocol


class Callback(Protocol):
    def success(self, message: Dict[str, Any]) -> None: ...
    def failure(self, message: Dict[str, Any], error: Exception) -> None: ...


class NullCallback:
    def success(self, message: Dict[str, Any]) -> None:
        pass

    def failure(self, message: Dict[str, Any], error: Exception) -> None:
        pass
