"""Reflection kind flags as they appear in TypeDoc JSON documents."""

from __future__ import annotations

from enum import IntEnum


class ReflectionKind(IntEnum):
    """Numeric kind tags carried by every reflection in the JSON model."""

    PROJECT = 0x1
    MODULE = 0x2
    NAMESPACE = 0x4
    ENUM = 0x8
    ENUM_MEMBER = 0x10
    VARIABLE = 0x20
    FUNCTION = 0x40
    CLASS = 0x80
    INTERFACE = 0x100
    CONSTRUCTOR = 0x200
    PROPERTY = 0x400
    METHOD = 0x800
    CALL_SIGNATURE = 0x1000
    INDEX_SIGNATURE = 0x2000
    CONSTRUCTOR_SIGNATURE = 0x4000
    PARAMETER = 0x8000
    TYPE_LITERAL = 0x10000
    TYPE_PARAMETER = 0x20000
    ACCESSOR = 0x40000
    GET_SIGNATURE = 0x80000
    SET_SIGNATURE = 0x100000
    TYPE_ALIAS = 0x200000
    REFERENCE = 0x400000
    DOCUMENT = 0x800000


# Kinds rendered on a page of their own, keyed to the output directory.
PAGE_DIRECTORIES: dict[ReflectionKind, str] = {
    ReflectionKind.MODULE: "modules",
    ReflectionKind.NAMESPACE: "modules",
    ReflectionKind.CLASS: "classes",
    ReflectionKind.INTERFACE: "interfaces",
    ReflectionKind.ENUM: "enums",
    ReflectionKind.FUNCTION: "functions",
    ReflectionKind.TYPE_ALIAS: "types",
    ReflectionKind.VARIABLE: "variables",
}


__all__ = ["PAGE_DIRECTORIES", "ReflectionKind"]
