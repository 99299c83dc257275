"""Protocol for namespace resolution during path evaluation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NamespaceResolver(Protocol):
    """Protocol that path evaluators use to resolve prefixed names."""

    def get_namespace_uri(self, prefix: str) -> str | None:
        """Return the URI bound to prefix, or None."""
        ...

    def get_prefix(self, uri: str) -> str | None:
        """Return a prefix bound to uri, or None."""
        ...

    def get_prefixes(self, uri: str) -> list[str]:
        """Return every prefix bound to uri."""
        ...
