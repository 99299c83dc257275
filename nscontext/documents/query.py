"""Resolve prefixed names in ElementTree path expressions."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from nscontext.registry.resolver import NamespaceResolver

# Quoted literals and {uri} blocks are copied through unchanged
_OPAQUE_RE = re.compile(r"""('[^']*'|"[^"]*"|\{[^}]*\})""")

# prefix:local, where local may be a wildcard
_QNAME_RE = re.compile(r"(?<![\w.\-])([A-Za-z_][\w.\-]*):([A-Za-z_][\w.\-]*|\*)")


class UnboundPrefixError(LookupError):
    """A prefixed name used a prefix with no namespace binding."""

    def __init__(self, prefix: str) -> None:
        super().__init__(f"Namespace prefix '{prefix}' is not bound")
        self.prefix = prefix


def _resolve(prefix: str, resolver: NamespaceResolver) -> str:
    uri = resolver.get_namespace_uri(prefix)
    if uri is None:
        raise UnboundPrefixError(prefix)
    return uri


def expand_qname(name: str, resolver: NamespaceResolver) -> str:
    """Expand prefix:local to {uri}local. Unprefixed names are returned as is."""
    if name.startswith("{") or ":" not in name:
        return name
    prefix, local = name.split(":", 1)
    return f"{{{_resolve(prefix, resolver)}}}{local}"


def expand_path(path: str, resolver: NamespaceResolver) -> str:
    """Expand every prefixed name in a path expression to Clark notation."""

    def _sub(match: re.Match) -> str:
        return f"{{{_resolve(match.group(1), resolver)}}}{match.group(2)}"

    parts = _OPAQUE_RE.split(path)
    # Odd indices are the captured opaque segments
    for i in range(0, len(parts), 2):
        parts[i] = _QNAME_RE.sub(_sub, parts[i])
    return "".join(parts)


def find_all(root: ET.Element, path: str, resolver: NamespaceResolver) -> list[ET.Element]:
    """Evaluate a prefixed path against root."""
    return root.findall(expand_path(path, resolver))


def display_name(tag: str, resolver: NamespaceResolver) -> str:
    """Re-display a {uri}local tag using the prefix bound to its URI."""
    if not tag.startswith("{"):
        return tag
    uri, local = tag[1:].split("}", 1)
    prefix = resolver.get_prefix(uri)
    if prefix is None:
        return tag
    if not prefix:
        return local
    return f"{prefix}:{local}"
