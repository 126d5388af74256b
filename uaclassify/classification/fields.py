"""Field specs - how a captured substring becomes a named output field.

A rule lists one field spec per capture slot. Rule tables encode a spec as
either a bare field name or a 2, 3 or 4 element list; decode_field_spec()
turns that encoding into one of six concrete spec types, resolving
transform and mapping names up front so that nothing is looked up by name
while matching.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from uaclassify.classification.mappings import MAPPING_KEYWORD, MAPPING_TABLES, MappingTable
from uaclassify.classification.transforms import (
    TRANSFORMS,
    TransformFunction,
    is_transform,
    near_miss,
    resolve_transform,
)
from uaclassify.core.models import SENTINEL, RuleSetError

# "/body/flags" form used by rule tables written for PCRE-style engines
_DELIMITED_PATTERN = re.compile(r"^/(?P<body>.*)/(?P<flags>[a-z]*)$", re.DOTALL)

# Flags of the delimited form; g and u have no effect on a single search
_PATTERN_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}
_IGNORED_FLAGS = frozenset("gu")

# $1 and ${1} back-references
_DOLLAR_REFERENCE = re.compile(r"\$(?:\{(\d+)\}|(\d+))")

FieldEncoding = str | list[Any] | tuple[Any, ...]


def compile_pattern(source: str) -> re.Pattern[str]:
    """Compile a rule pattern, case-insensitively.

    A pattern written as ``/body/flags`` has its delimiters stripped, so a
    literal slash at both ends must be escaped (``\\/mobile\\/``).

    Raises:
        RuleSetError: If the pattern is not a string, not a valid regex or
            carries an unsupported flag.
    """
    if not isinstance(source, str):
        raise RuleSetError(f"Pattern must be a string, got {type(source).__name__}")

    body = source
    flags = re.IGNORECASE
    delimited = _DELIMITED_PATTERN.match(source)
    if delimited:
        body = delimited.group("body")
        for flag in delimited.group("flags"):
            if flag in _PATTERN_FLAGS:
                flags |= _PATTERN_FLAGS[flag]
            elif flag not in _IGNORED_FLAGS:
                raise RuleSetError(f"Unsupported flag '{flag}' in pattern {source!r}")

    try:
        return re.compile(body, flags)
    except re.error as e:
        raise RuleSetError(f"Invalid regex {source!r}: {e}") from e


def pattern_source(pattern: re.Pattern[str]) -> str:
    """Rule-table text of a compiled pattern, delimited when it needs extra flags."""
    extra = "".join(
        letter for letter, flag in _PATTERN_FLAGS.items() if letter != "i" and pattern.flags & flag
    )
    if not extra:
        return pattern.pattern
    return f"/{pattern.pattern}/i{extra}"


def convert_template(template: str) -> str:
    """Rewrite $1 / ${1} back-references into Python's \\g<1> form."""
    return _DOLLAR_REFERENCE.sub(lambda m: rf"\g<{m.group(1) or m.group(2)}>", template)


def _check_template(search: re.Pattern[str], template: str) -> None:
    # Expand the template against a dummy match with the same groups so that
    # bad escapes and group references fail now rather than while matching
    names = {index: name for name, index in search.groupindex.items()}
    dummy = "".join(
        f"(?P<{names[i]}>)" if i in names else "()" for i in range(1, search.groups + 1)
    )
    try:
        re.compile(dummy).match("").expand(template)  # type: ignore[union-attr]
    except (re.error, IndexError) as e:
        raise RuleSetError(f"Invalid replacement template {template!r}: {e}") from e


@dataclass(frozen=True)
class FieldSpec(ABC):
    """Instruction for turning one capture into one field value."""

    name: str

    @abstractmethod
    def resolve(self, capture: str | None) -> str:
        """Compute the field value from the capture consumed by this spec."""

    @abstractmethod
    def encode(self) -> FieldEncoding:
        """Convert the spec back to its rule-table encoding."""


@dataclass(frozen=True)
class CopyField(FieldSpec):
    """Assign the capture verbatim."""

    def resolve(self, capture: str | None) -> str:
        return capture if capture else SENTINEL

    def encode(self) -> FieldEncoding:
        return self.name


@dataclass(frozen=True)
class LiteralField(FieldSpec):
    """Assign a constant; the capture slot is consumed but ignored."""

    value: str

    def resolve(self, capture: str | None) -> str:
        return self.value

    def encode(self) -> FieldEncoding:
        return [self.name, self.value]


@dataclass(frozen=True)
class TransformField(FieldSpec):
    """Assign transform(capture).

    When the capture is absent and the transform does not accept missing
    values, the token itself is assigned, as for a literal.
    """

    transform: TransformFunction

    def resolve(self, capture: str | None) -> str:
        if capture is None and not self.transform.accepts_missing:
            return self.transform.name
        return self.transform(capture)

    def encode(self) -> FieldEncoding:
        return [self.name, self.transform.name]


@dataclass(frozen=True)
class SubstituteField(FieldSpec):
    """Assign the capture with every match of a regex replaced."""

    search: re.Pattern[str]
    replacement: str
    source_replacement: str = ""

    def substitute(self, capture: str) -> str:
        return self.search.sub(self.replacement, capture)

    def resolve(self, capture: str | None) -> str:
        if not capture:
            return SENTINEL
        return self.substitute(capture)

    def encode(self) -> FieldEncoding:
        return [self.name, pattern_source(self.search), self.source_replacement or self.replacement]


@dataclass(frozen=True)
class MappedField(FieldSpec):
    """Assign the mapping-table label for the capture."""

    table: MappingTable

    def resolve(self, capture: str | None) -> str:
        if not capture:
            return SENTINEL
        return self.table.lookup(capture)

    def encode(self) -> FieldEncoding:
        return [self.name, MAPPING_KEYWORD, self.table.name]


@dataclass(frozen=True)
class SubstituteTransformField(FieldSpec):
    """Assign transform(substitution of the capture)."""

    substitution: SubstituteField
    transform: TransformFunction

    def resolve(self, capture: str | None) -> str:
        if not capture:
            return SENTINEL
        return self.transform(self.substitution.substitute(capture))

    def encode(self) -> FieldEncoding:
        return [*self.substitution.encode(), self.transform.name]


def _require_strings(encoding: list[Any] | tuple[Any, ...]) -> None:
    for element in encoding:
        if not isinstance(element, str):
            raise RuleSetError(
                f"Field spec elements must be strings, got {type(element).__name__} "
                f"in {list(encoding)!r}"
            )
    if not encoding[0]:
        raise RuleSetError(f"Field spec has an empty field name: {list(encoding)!r}")


def _build_substitute(search_source: str, template: str) -> tuple[re.Pattern[str], str]:
    search = compile_pattern(search_source)
    replacement = convert_template(template)
    _check_template(search, replacement)
    return search, replacement


def decode_field_spec(
    encoding: FieldEncoding,
    transforms: Mapping[str, TransformFunction] = TRANSFORMS,
    mappings: Mapping[str, MappingTable] = MAPPING_TABLES,
    strict_transforms: bool = False,
) -> FieldSpec:
    """Decode one field spec from its rule-table encoding.

    Args:
        encoding: A field name, or a 2/3/4 element list.
        transforms: Registry used to resolve transform names.
        mappings: Tables available to mapping lookups.
        strict_transforms: Reject 2-element tokens that differ from a
            registered transform name only by case.

    Returns:
        The decoded FieldSpec.

    Raises:
        RuleSetError: If the encoding is malformed or references an
            unknown mapping table or transform.
    """
    if isinstance(encoding, str):
        if not encoding:
            raise RuleSetError("Field spec has an empty field name")
        return CopyField(encoding)

    if not isinstance(encoding, (list, tuple)):
        raise RuleSetError(f"Field spec must be a string or list, got {type(encoding).__name__}")

    arity = len(encoding)
    if arity not in (2, 3, 4):
        raise RuleSetError(f"Field spec must have 2, 3 or 4 elements, got {arity}: {list(encoding)!r}")

    _require_strings(encoding)
    name = encoding[0]

    if arity == 2:
        token = encoding[1]
        if is_transform(token, transforms):
            return TransformField(name, resolve_transform(token, transforms))
        if strict_transforms:
            registered = near_miss(token, transforms)
            if registered:
                raise RuleSetError(
                    f"Field '{name}': token '{token}' looks like transform '{registered}'"
                )
        return LiteralField(name, token)

    if arity == 3:
        if encoding[1] == MAPPING_KEYWORD:
            table_name = encoding[2]
            if table_name not in mappings:
                raise RuleSetError(f"Field '{name}': unknown mapping table '{table_name}'")
            return MappedField(name, mappings[table_name])
        search, replacement = _build_substitute(encoding[1], encoding[2])
        return SubstituteField(name, search, replacement, source_replacement=encoding[2])

    token = encoding[3]
    try:
        transform = resolve_transform(token, transforms)
    except KeyError as e:
        raise RuleSetError(f"Field '{name}': {e.args[0]}") from None
    search, replacement = _build_substitute(encoding[1], encoding[2])
    substitution = SubstituteField(name, search, replacement, source_replacement=encoding[2])
    return SubstituteTransformField(name, substitution, transform)
