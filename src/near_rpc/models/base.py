from typing import Any, Callable, List, Sequence, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict

from ..naming import to_camel

T = TypeVar("T")


class WireModel(BaseModel):
    """Immutable base for every request and response shape.

    Attributes are snake_case; the camelCase alias is what decoded payloads
    carry once the naming strategy has run over them. Either name validates.
    Unknown wire fields are ignored so newer nodes don't break older clients.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def decode_by_trial(value: Any, attempts: Sequence[Callable[[Any], T]], what: str) -> T:
    """Return the result of the first attempt that accepts `value`.

    Attempts run in order; each rejects a shape by raising ValueError (pydantic
    ValidationError included) or TypeError. When none accepts, a ValueError
    naming every rejection is raised.
    """
    rejections: List[str] = []
    for attempt in attempts:
        try:
            return attempt(value)
        except (ValueError, TypeError) as e:
            rejections.append(f"{attempt.__name__}: {e}")
    raise ValueError(f"no {what} shape matched {value!r} ({'; '.join(rejections)})")


def single_key_object(value: Any) -> Tuple[str, Any]:
    """Unpack a `{"Tag": payload}` object, or raise ValueError."""
    if not isinstance(value, dict) or len(value) != 1:
        raise ValueError("expected an object with exactly one key")
    ((tag, payload),) = value.items()
    return tag, payload
