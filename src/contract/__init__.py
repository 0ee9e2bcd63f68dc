"""Stable contract surface for link-mapping documents.

Treat these exports as the authoritative boundary with the link rewriter
that consumes the generated document.
"""

from contract.artifacts import (
    DEFAULT_NAMESPACES,
    LINK_MAPPING_DOC_SPEC,
    LINK_MAPPING_JSON,
    LINK_MAPPING_VERSION,
    LinkMappingDocSpec,
)


def __getattr__(name: str) -> object:
    if name in {"LegacyLinkMapping", "LinkMapping", "LinkMappingDoc"}:
        from contract.models import LegacyLinkMapping, LinkMapping, LinkMappingDoc

        return {
            "LegacyLinkMapping": LegacyLinkMapping,
            "LinkMapping": LinkMapping,
            "LinkMappingDoc": LinkMappingDoc,
        }[name]

    if name in {"ValidationMessage", "ValidationResult", "validate_link_mapping_doc"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_link_mapping_doc,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_link_mapping_doc": validate_link_mapping_doc,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "DEFAULT_NAMESPACES",
    "LINK_MAPPING_DOC_SPEC",
    "LINK_MAPPING_JSON",
    "LINK_MAPPING_VERSION",
    "LegacyLinkMapping",
    "LinkMapping",
    "LinkMappingDoc",
    "LinkMappingDocSpec",
    "ValidationMessage",
    "ValidationResult",
    "validate_link_mapping_doc",
]
