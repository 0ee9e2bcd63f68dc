"""Symbol tree input: reflection kinds, deserialization and URL assignment."""

from reflection.deserialize import ReflectionError, load_project
from reflection.kinds import ReflectionKind
from reflection.models import ReflectionJSON, SymbolNode, UrlMapping
from reflection.urls import assign_urls

__all__ = [
    "ReflectionError",
    "ReflectionJSON",
    "ReflectionKind",
    "SymbolNode",
    "UrlMapping",
    "assign_urls",
    "load_project",
]
