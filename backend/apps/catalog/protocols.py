from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.catalog.models import Product


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]: ...

    def list(self, **filters) -> Iterable["Product"]: ...

    def list_by_category(self, category: str) -> Iterable["Product"]: ...

    def search(self, value: str) -> Iterable["Product"]: ...


class CacheBackendProtocol(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any, timeout: Optional[int] = ...) -> None: ...
