"""JSON value model implementation."""

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union
from ..types import ValueKind


_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class JsonValue:
    """Base class of all JSON value variants."""

    @property
    def kind(self) -> ValueKind:
        raise NotImplementedError

    @property
    def is_scalar(self) -> bool:
        """True for null, booleans, numbers and strings."""
        return self.kind not in (ValueKind.ARRAY, ValueKind.OBJECT)

    def to_python(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class JsonNull(JsonValue):
    """JSON null."""

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NULL

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class JsonBool(JsonValue):
    """JSON boolean."""

    value: bool

    @property
    def kind(self) -> ValueKind:
        return ValueKind.BOOL

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class JsonNumber(JsonValue):
    """
    JSON number.

    The number is kept as the text it was written with, so formatting never
    changes its precision or exponent notation.
    """

    text: str

    def __post_init__(self):
        """Validate number text after initialization."""
        if not isinstance(self.text, str) or not _NUMBER_RE.fullmatch(self.text):
            raise ValueError(f"Not a JSON number: {self.text!r}")

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NUMBER

    @property
    def is_integer(self) -> bool:
        return not any(c in self.text for c in ".eE")

    def to_python(self) -> Union[int, Decimal]:
        if self.is_integer:
            return int(self.text)
        return Decimal(self.text)


@dataclass(frozen=True)
class JsonString(JsonValue):
    """JSON string."""

    value: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.STRING

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonArray(JsonValue):
    """Ordered sequence of JSON values."""

    items: Tuple[JsonValue, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def kind(self) -> ValueKind:
        return ValueKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> JsonValue:
        return self.items[index]

    def to_python(self) -> List[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class JsonObject(JsonValue):
    """
    Ordered mapping of string keys to JSON values.

    Members are stored as a tuple of (key, value) pairs in insertion order.
    The order is significant for layout and is never sorted.
    """

    members: Tuple[Tuple[str, JsonValue], ...] = ()
    _index: Dict[str, JsonValue] = field(default_factory=dict, init=False,
                                         repr=False, compare=False)

    def __post_init__(self):
        """Validate member keys after initialization."""
        members = tuple((key, value) for key, value in self.members)
        index = {}
        for key, value in members:
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
            if key in index:
                raise ValueError(f"Duplicate object key: {key!r}")
            index[key] = value
        object.__setattr__(self, "members", members)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, JsonValue]]) -> "JsonObject":
        """
        Build an object from possibly repeated (key, value) pairs.

        A repeated key keeps the position of its first occurrence and takes
        the value of its last one.

        Args:
            pairs: Iterable of (key, value) pairs

        Returns:
            JsonObject with unique keys
        """
        collected: Dict[str, JsonValue] = {}
        for key, value in pairs:
            collected[key] = value
        return cls(tuple(collected.items()))

    @property
    def kind(self) -> ValueKind:
        return ValueKind.OBJECT

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.members)

    def __getitem__(self, key: str) -> JsonValue:
        return self._index[key]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def keys(self) -> List[str]:
        return [key for key, _ in self.members]

    def items(self) -> Tuple[Tuple[str, JsonValue], ...]:
        return self.members

    def get(self, key: str, default: Optional[JsonValue] = None) -> Optional[JsonValue]:
        return self._index.get(key, default)

    def to_python(self) -> Dict[str, Any]:
        return {key: value.to_python() for key, value in self.members}


def to_value(obj: Any) -> JsonValue:
    """
    Convert plain Python data into the JSON value model.

    Args:
        obj: None, bool, int, float, Decimal, str, list, tuple, dict or JsonValue

    Returns:
        Equivalent JsonValue tree

    Raises:
        ValueError: For non-finite numbers
        TypeError: For unsupported types or non-string keys
    """
    if isinstance(obj, JsonValue):
        return obj
    if obj is None:
        return JsonNull()
    # bool is a subclass of int, so it must be checked first
    if isinstance(obj, bool):
        return JsonBool(obj)
    if isinstance(obj, int):
        return JsonNumber(str(obj))
    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise ValueError(f"Out of range float values are not JSON compliant: {obj!r}")
        return JsonNumber(repr(obj))
    if isinstance(obj, Decimal):
        if not obj.is_finite():
            raise ValueError(f"Out of range decimal values are not JSON compliant: {obj!r}")
        return JsonNumber(str(obj))
    if isinstance(obj, str):
        return JsonString(obj)
    if isinstance(obj, (list, tuple)):
        return JsonArray(tuple(to_value(item) for item in obj))
    if isinstance(obj, dict):
        for key in obj:
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
        return JsonObject(tuple((key, to_value(value)) for key, value in obj.items()))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
