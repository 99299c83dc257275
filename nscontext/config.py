"""Core data types and configuration for nscontext."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class NamespaceBinding:
    """A prefix and the namespace URI it stands for."""
    prefix: str
    uri: str


@dataclass
class LoadConfig:
    paths: list[str] = field(default_factory=list)
    root_only: bool = True
    include_default: bool = True
    verbose: bool = False
    quiet: bool = False


@dataclass
class ContextResult:
    version: str = "1.0"
    metadata: dict[str, Any] = field(default_factory=dict)
    stats: dict[str, Any] = field(default_factory=dict)
    bindings: list[dict[str, str]] = field(default_factory=list)
