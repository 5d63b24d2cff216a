from enum import Enum
from typing import Optional, Union

from pydantic import model_validator

from .base import WireModel


class Finality(str, Enum):
    """How settled the queried chain state must be."""

    FINAL = "final"
    OPTIMISTIC = "optimistic"


BlockId = Union[int, str]


class BlockReference(WireModel):
    """Pins a call to one point of the chain: a height, a hash or a finality."""

    block_height: Optional[int] = None
    block_hash: Optional[str] = None
    finality: Optional[Finality] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "BlockReference":
        given = [v for v in (self.block_height, self.block_hash, self.finality) if v is not None]
        if len(given) != 1:
            raise ValueError("BlockReference needs exactly one of block_height, block_hash, finality")
        return self

    @classmethod
    def from_height(cls, height: int) -> "BlockReference":
        return cls(block_height=height)

    @classmethod
    def from_hash(cls, block_hash: str) -> "BlockReference":
        return cls(block_hash=block_hash)

    @classmethod
    def from_finality(cls, finality: Finality) -> "BlockReference":
        return cls(finality=finality)

    @classmethod
    def coerce(cls, value: Union["BlockReference", Finality, int, str]) -> "BlockReference":
        """Accept a reference, a height, a finality or a hash (in that order)."""
        if isinstance(value, BlockReference):
            return value
        if isinstance(value, Finality):
            return cls.from_finality(value)
        if isinstance(value, bool):
            raise TypeError("a bool is not a block reference")
        if isinstance(value, int):
            return cls.from_height(value)
        if isinstance(value, str):
            try:
                return cls.from_finality(Finality(value))
            except ValueError:
                return cls.from_hash(value)
        raise TypeError(f"cannot use {type(value).__name__} as a block reference")

    def to_wire_value(self) -> BlockId:
        """The single scalar this reference travels as."""
        if self.block_height is not None:
            return self.block_height
        if self.block_hash is not None:
            return self.block_hash
        assert self.finality is not None
        return self.finality.value
