"""Dual HashMap namespace table: prefix -> URI and URI -> prefix."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from nscontext.config import NamespaceBinding


class NamespaceContext:
    """Prefix/URI lookups for resolving qualified names in path expressions.

    prefix_to_uri: prefix -> namespace URI
    uri_to_prefix: namespace URI -> most recently registered prefix

    Both tables are last-write-wins. Registering a URI under a second prefix
    replaces its entry in uri_to_prefix while the first prefix keeps its
    entry in prefix_to_uri. Rebinding a prefix drops the old URI from
    uri_to_prefix if that URI still pointed at the prefix.
    """

    def __init__(self) -> None:
        self.prefix_to_uri: dict[str, str] = {}
        self.uri_to_prefix: dict[str, str] = {}

    def add_prefix_mapping(self, prefix: str, uri: str) -> None:
        previous = self.prefix_to_uri.get(prefix)
        if previous is not None and self.uri_to_prefix.get(previous) == prefix:
            # the old URI no longer has this prefix
            del self.uri_to_prefix[previous]
        self.prefix_to_uri[prefix] = uri
        self.uri_to_prefix[uri] = prefix

    def add_binding(self, binding: NamespaceBinding) -> None:
        self.add_prefix_mapping(binding.prefix, binding.uri)

    @property
    def prefix_uri_map(self) -> Mapping[str, str]:
        """Read-only live view of the prefix -> URI table."""
        return MappingProxyType(self.prefix_to_uri)

    def bindings(self) -> list[NamespaceBinding]:
        """Return the prefix table as bindings, in registration order."""
        return [NamespaceBinding(prefix=p, uri=u) for p, u in self.prefix_to_uri.items()]

    def get_namespace_uri(self, prefix: str) -> str | None:
        """Look up the URI for a prefix. Returns None if unbound."""
        return self.prefix_to_uri.get(prefix)

    def get_prefix(self, uri: str) -> str | None:
        """Look up the prefix for a URI. Returns None if unbound."""
        return self.uri_to_prefix.get(uri)

    def get_prefixes(self, uri: str) -> list[str]:
        # TODO: track every prefix per URI; uri_to_prefix only keeps the latest.
        return []

    def __len__(self) -> int:
        return len(self.prefix_to_uri)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self.prefix_to_uri
