"""
Funko figure record: validated fields plus JSON (de)serialization.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping


class ValidationError(ValueError):
    """Raised when a Funko field holds a value outside its allowed range."""


class FunkoType(Enum):
    POP = "Pop!"
    POP_RIDES = "Pop! Rides"
    VINYL_SODA = "Vinyl Soda"
    VINYL_GOLD = "Vinyl Gold"


class FunkoGenre(Enum):
    ANIMATION = "Animation"
    FILMS_AND_TV = "Films & TV"
    VIDEOGAMES = "Videogames"
    SPORTS = "Sports"
    MUSIC = "Music"
    ANIME = "Anime"


# Python attribute -> key used in the stored JSON
JSON_FIELDS = {
    "id": "id",
    "name": "name",
    "description": "description",
    "type": "type",
    "genre": "genre",
    "franchise": "franchise",
    "franchise_number": "franchiseNumber",
    "is_exclusive": "isExclusive",
    "special_features": "specialFeatures",
    "market_value": "marketValue",
}

BOOL_STRINGS = {"true": True, "false": False}


def check_name(value: Any, field: str, allow_empty: bool = False) -> str:
    """
    Ensure value can be used as a single path segment (user or Funko id).

    Raises:
        ValidationError: not a string, empty, "." / "..", or contains a separator
    """
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {field}: {value!r}")
    if value == "" and allow_empty:
        return value
    if value in ("", ".", "..") or "/" in value or "\\" in value or "\0" in value:
        raise ValidationError(f"Invalid {field}: {value!r}")
    return value


def _coerce_enum(enum_cls, value: Any, field: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        pass
    # Accept member names too (e.g. "FILMS_AND_TV" from the command line)
    if isinstance(value, str):
        key = value.strip().upper().replace(" ", "_").replace("!", "")
        if key in enum_cls.__members__:
            return enum_cls[key]
    raise ValidationError(f"Invalid {field}: {value}")


@dataclass
class Funko:
    id: str
    name: str
    description: str
    type: FunkoType
    genre: FunkoGenre
    franchise: str
    franchise_number: int
    is_exclusive: bool
    special_features: str
    market_value: float

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        # Empty id only for the blank() template
        check_name(self.id, "ID", allow_empty=True)
        self.type = _coerce_enum(FunkoType, self.type, "Type")
        self.genre = _coerce_enum(FunkoGenre, self.genre, "Genre")

        number = self.franchise_number
        if isinstance(number, float) and number.is_integer():
            number = int(number)
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise ValidationError(f"Invalid Franchise Number: {self.franchise_number}")
        self.franchise_number = number

        value = self.market_value
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or not math.isfinite(value)
            or value < 0
        ):
            raise ValidationError(f"Invalid Market Value: {self.market_value}")

        if not isinstance(self.is_exclusive, bool):
            raise ValidationError(f"Invalid Exclusive: {self.is_exclusive}")

    @classmethod
    def blank(cls) -> "Funko":
        """Placeholder instance, meant to be filled in with parse()."""
        return cls("", "", "", FunkoType.POP, FunkoGenre.ANIMATION, "", 0, False, "", 0)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Funko":
        return cls.blank().parse(data)

    def parse(self, data: Mapping[str, Any]) -> "Funko":
        """
        Populate this instance from a deserialized JSON record.

        Applies the same validation as construction and returns self, so a
        template created with blank() can be reused while loading files.

        Raises:
            ValidationError: not an object, a field is missing or out of range
        """
        if not isinstance(data, Mapping):
            raise ValidationError(f"Funko record must be an object, got {type(data).__name__}")

        missing = [key for key in JSON_FIELDS.values() if key not in data]
        if missing:
            raise ValidationError(f"Missing fields: {', '.join(missing)}")

        values = {attr: data[key] for attr, key in JSON_FIELDS.items()}
        exclusive = values["is_exclusive"]
        if isinstance(exclusive, str) and exclusive.strip().lower() in BOOL_STRINGS:
            values["is_exclusive"] = BOOL_STRINGS[exclusive.strip().lower()]

        # Validate before touching self so a bad record leaves it unchanged
        candidate = Funko(**values)
        for attr in JSON_FIELDS:
            setattr(self, attr, getattr(candidate, attr))
        return self

    def to_json(self) -> Dict[str, Any]:
        """Plain field map with the ten stored fields."""
        data = {}
        for attr, key in JSON_FIELDS.items():
            value = getattr(self, attr)
            data[key] = value.value if isinstance(value, Enum) else value
        return data
