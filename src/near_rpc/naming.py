"""
Key-naming conversion between the wire (snake_case) and memory (camelCase).

Conversion applies to structural object keys only. String values such as
hashes, public keys and account ids are never touched, and keys that are not
in the expected source convention (variant tags like ``FunctionCall``,
``SuccessValue``) pass through unchanged in both directions.
"""

import re

from typing import Any, Callable, NamedTuple

KeyConverter = Callable[[str], str]

_SNAKE_RE = re.compile(r"^[a-z][a-z0-9]*(?:_[a-z][a-z0-9]*)+$")
_CAMEL_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
_UPPER_RE = re.compile(r"([A-Z])")


def to_camel(name: str) -> str:
    """`block_hash` → `blockHash`; anything else is returned as is.

    Every segment after the first must start with a letter, otherwise the
    underscore could not be restored by `to_snake`.
    """
    if not _SNAKE_RE.match(name):
        return name
    head, *rest = name.split("_")
    return head + "".join(word[:1].upper() + word[1:] for word in rest)


def to_snake(name: str) -> str:
    """`blockHash` → `block_hash`; anything else is returned as is."""
    if not _CAMEL_RE.match(name):
        return name
    return _UPPER_RE.sub(lambda m: "_" + m.group(1).lower(), name)


def translate_keys(value: Any, convert: KeyConverter) -> Any:
    """Return a copy of `value` with `convert` applied to every object key."""
    if isinstance(value, dict):
        return {
            (convert(k) if isinstance(k, str) else k): translate_keys(v, convert)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [translate_keys(v, convert) for v in value]
    return value


def _identity(name: str) -> str:
    return name


class NamingStrategy(NamedTuple):
    """How keys are renamed on the way out (`encode_key`) and in (`decode_key`)."""

    encode_key: KeyConverter
    decode_key: KeyConverter

    def to_wire(self, value: Any) -> Any:
        return translate_keys(value, self.encode_key)

    def from_wire(self, value: Any) -> Any:
        return translate_keys(value, self.decode_key)


# NEAR nodes speak snake_case; models are addressed by camelCase aliases.
SNAKE_CASE = NamingStrategy(encode_key=to_snake, decode_key=to_camel)

IDENTITY = NamingStrategy(encode_key=_identity, decode_key=_identity)

__all__ = [
    "IDENTITY",
    "KeyConverter",
    "NamingStrategy",
    "SNAKE_CASE",
    "to_camel",
    "to_snake",
    "translate_keys",
]
