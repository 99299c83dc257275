"""JSON serialisation of a NamespaceContext."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from nscontext import __version__
from nscontext.config import ContextResult, LoadConfig
from nscontext.registry.namespace_context import NamespaceContext


def build_result(config: LoadConfig, context: NamespaceContext) -> ContextResult:
    """Build the ContextResult for a loaded context."""
    bindings = context.bindings()
    return ContextResult(
        version="1.0",
        metadata={
            "sources": [str(Path(p).resolve()) for p in config.paths],
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "nscontext_version": __version__,
            "root_only": config.root_only,
        },
        stats={
            "bindings": len(bindings),
            "namespaces": len({b.uri for b in bindings}),
        },
        bindings=[{"prefix": b.prefix, "uri": b.uri} for b in bindings],
    )


def write_output(result: ContextResult, output_path: str) -> None:
    """Write the result to a JSON file."""
    data = asdict(result)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)
