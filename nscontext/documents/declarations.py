"""Read xmlns declarations from XML documents into a NamespaceContext."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from typing import IO, Iterable

from nscontext.config import LoadConfig, NamespaceBinding
from nscontext.registry.namespace_context import NamespaceContext

logger = logging.getLogger(__name__)


def read_declarations(source: str | os.PathLike | IO[bytes], root_only: bool = True) -> list[NamespaceBinding]:
    """Return the namespace declarations of a document in document order.

    With root_only, only declarations on the document element are read.
    The default namespace is reported with the prefix "".
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as f:
            return read_declarations(f, root_only=root_only)

    bindings: list[NamespaceBinding] = []
    events = ("start", "start-ns") if root_only else ("start-ns",)
    for event, item in ET.iterparse(source, events=events):
        if event == "start":
            # start-ns events for an element arrive before its start event
            break
        prefix, uri = item
        bindings.append(NamespaceBinding(prefix=prefix, uri=uri))
    return bindings


def populate_context(
    context: NamespaceContext,
    bindings: Iterable[NamespaceBinding],
    include_default: bool = True,
) -> int:
    """Register bindings in order. Returns the number registered."""
    added = 0
    for binding in bindings:
        if not binding.prefix and not include_default:
            continue
        context.add_binding(binding)
        logger.debug(f"Bound {binding.prefix or '(default)'} -> {binding.uri}")
        added += 1
    return added


def load_context(config: LoadConfig) -> NamespaceContext:
    """Build one NamespaceContext from every document in config.paths.

    Later documents overwrite earlier bindings for the same prefix or URI.
    """
    context = NamespaceContext()
    for path in config.paths:
        try:
            bindings = read_declarations(path, root_only=config.root_only)
        except (ET.ParseError, OSError) as e:
            logger.warning(f"Failed to read namespace declarations from {path}: {e}")
            continue
        added = populate_context(context, bindings, include_default=config.include_default)
        logger.debug(f"{path}: {added} bindings")
    return context
