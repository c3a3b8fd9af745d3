"""Utility helpers for jsonfs."""

from .deep_merge import NodeKind, deep_merge, node_kind

__all__ = ["NodeKind", "deep_merge", "node_kind"]
