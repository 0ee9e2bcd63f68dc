"""Validation helpers for link-mapping documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError

from contract.artifacts import LINK_MAPPING_DOC_SPEC, LINK_MAPPING_VERSION
from contract.models import LegacyLinkMapping, LinkMapping

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class ValidationMessage:
    path: Path
    message: str
    index: int | None = None

    def location(self) -> str:
        if self.index is None:
            return str(self.path)
        return f"{self.path}:{LINK_MAPPING_DOC_SPEC.mappings_key}[{self.index}]"

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "index": self.index,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)
    mapping_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_link_mapping_doc(
    path: Path,
    *,
    allow_legacy: bool = False,
    strict_version: bool = False,
) -> ValidationResult:
    """Check a written link-mapping document against the output contract.

    Args:
        path: Document to validate.
        allow_legacy: Accept records without ``defaultLabel``.
        strict_version: Treat a missing ``version`` key as an error rather
            than a warning.
    """
    result = ValidationResult()

    if not path.exists():
        result.errors.append(
            ValidationMessage(path=path, message="Link-mapping file does not exist.")
        )
        return result

    if not path.is_file():
        result.errors.append(
            ValidationMessage(path=path, message="Link-mapping path is not a file.")
        )
        return result

    try:
        raw = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        result.errors.append(
            ValidationMessage(path=path, message=f"Invalid JSON: {exc}.")
        )
        return result

    if not isinstance(raw, dict):
        result.errors.append(
            ValidationMessage(path=path, message="Expected JSON object at top level.")
        )
        return result

    unknown = sorted(set(raw) - set(LINK_MAPPING_DOC_SPEC.keys))
    if unknown:
        result.errors.append(
            ValidationMessage(
                path=path, message=f"Unknown top-level keys: {', '.join(unknown)}."
            )
        )

    _check_version(path, raw, result, strict_version=strict_version)
    _check_namespaces(path, raw.get(LINK_MAPPING_DOC_SPEC.namespaces_key), result)

    key = LINK_MAPPING_DOC_SPEC.mappings_key
    mappings = raw.get(key)
    if not isinstance(mappings, list):
        result.errors.append(
            ValidationMessage(
                path=path,
                message=f"Expected a list under '{key}'.",
            )
        )
        return result

    _check_mappings(path, mappings, result, allow_legacy=allow_legacy)
    return result


def _check_version(
    path: Path,
    raw: dict[str, Any],
    result: ValidationResult,
    *,
    strict_version: bool,
) -> None:
    key = LINK_MAPPING_DOC_SPEC.version_key
    if key not in raw:
        message = f"Missing version; defaulted to {LINK_MAPPING_VERSION}."
        target = result.errors if strict_version else result.warnings
        target.append(ValidationMessage(path=path, message=message))
        return

    version = raw[key]
    if isinstance(version, bool) or version != LINK_MAPPING_VERSION:
        result.errors.append(
            ValidationMessage(
                path=path,
                message=(
                    "Version mismatch: "
                    f"expected {LINK_MAPPING_VERSION}, got {version!r}."
                ),
            )
        )


def _check_namespaces(path: Path, namespaces: object, result: ValidationResult) -> None:
    if (
        not isinstance(namespaces, list)
        or not namespaces
        or not all(isinstance(tag, str) and tag for tag in namespaces)
    ):
        result.errors.append(
            ValidationMessage(
                path=path,
                message="Expected a non-empty list of namespace strings.",
            )
        )


def _check_mappings(
    path: Path,
    mappings: list[Any],
    result: ValidationResult,
    *,
    allow_legacy: bool,
) -> None:
    seen: dict[tuple[str, str], int] = {}
    for index, data in enumerate(mappings):
        try:
            record: LegacyLinkMapping = LinkMapping.model_validate(data)
        except ValidationError as exc:
            try:
                record = LegacyLinkMapping.model_validate(data)
            except ValidationError:
                result.errors.append(
                    ValidationMessage(
                        path=path,
                        index=index,
                        message=f"Schema validation failed: {exc}.",
                    )
                )
                continue
            if not allow_legacy:
                result.errors.append(
                    ValidationMessage(
                        path=path,
                        index=index,
                        message="Record is missing defaultLabel (legacy shape).",
                    )
                )
                continue

        pair = (record.link_destination, record.relative_url)
        if pair in seen:
            result.errors.append(
                ValidationMessage(
                    path=path,
                    index=index,
                    message=(
                        f"Duplicate mapping {pair[0]!r} -> {pair[1]!r} "
                        f"(first at index {seen[pair]})."
                    ),
                )
            )
            continue
        seen[pair] = index
        result.mapping_count += 1


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_link_mapping_doc",
]
