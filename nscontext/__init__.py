"""nscontext - Namespace prefix resolution for XPath evaluation."""

from nscontext.registry.namespace_context import NamespaceContext
from nscontext.registry.resolver import NamespaceResolver

__version__ = "0.1.0"
__all__ = ["NamespaceContext", "NamespaceResolver"]
