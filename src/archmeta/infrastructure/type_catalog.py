"""Default semantic type catalog.

Implements the TypeSystem port for the common semantic field types.
Each entry maps a type name to a structural kind, an optional rule
add-on and a sampler. Samplers draw from a random.Random seeded by the
catalog seed and the type name, so every call for one type yields the
same value and that value passes the type's own rule.
"""

from __future__ import annotations

import random
import string
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from functools import partial
from types import MappingProxyType
from typing import TYPE_CHECKING

from archmeta.domain.model.enums import TargetKind
from archmeta.domain.model.type_descriptor import TypeDescriptor

if TYPE_CHECKING:
    from archmeta.domain.model.type_ref import TypeRef

_WORDS = (
    "alpha", "bravo", "delta", "ember", "falcon", "granite", "harbor", "indigo",
    "juniper", "kestrel", "lumen", "meadow", "nova", "orchid", "pebble", "quartz",
)  # fmt: skip

_EPOCH = date(2020, 1, 1)
_PHONE_PATTERN = r".pattern(/^\+?[0-9 ()-]{7,20}$/)"


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Catalog row for one semantic type.

    Attributes:
        structural_kind: Base rule kind
        sampler: Draws a sample value from a seeded generator
        add_on: Extra rule clauses, None if none
    """

    structural_kind: str
    sampler: Callable[[random.Random], object]
    add_on: str | None = None


def _word(rng: random.Random) -> str:
    return rng.choice(_WORDS)


def _sentence(rng: random.Random) -> str:
    words = [rng.choice(_WORDS) for _ in range(rng.randint(4, 8))]
    return " ".join(words).capitalize() + "."


def _integer(rng: random.Random) -> int:
    return rng.randint(1, 1000)


def _number(rng: random.Random) -> float:
    return round(rng.uniform(1, 1000), 2)


def _boolean(rng: random.Random) -> bool:
    return rng.random() < 0.5


def _date(rng: random.Random) -> str:
    return (_EPOCH + timedelta(days=rng.randint(0, 3650))).isoformat()


def _datetime(rng: random.Random) -> str:
    start = datetime(_EPOCH.year, _EPOCH.month, _EPOCH.day)
    return (start + timedelta(seconds=rng.randint(0, 3650 * 86400))).isoformat()


def _email(rng: random.Random) -> str:
    return f"{rng.choice(_WORDS)}.{rng.randint(1, 99)}@example.com"


def _url(rng: random.Random) -> str:
    return f"https://www.example.com/{rng.choice(_WORDS)}/{rng.randint(1, 999)}"


def _uuid(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def _phone(rng: random.Random) -> str:
    return f"+1 555 {rng.randint(100, 999)} {rng.randint(1000, 9999)}"


def _password(rng: random.Random) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(rng.choice(alphabet) for _ in range(12))


BUILTIN_ENTRIES: Mapping[str, CatalogEntry] = MappingProxyType(
    {
        "string": CatalogEntry("string", _word),
        "text": CatalogEntry("string", _sentence),
        "password": CatalogEntry("string", _password),
        "integer": CatalogEntry("number", _integer, ".integer()"),
        "number": CatalogEntry("number", _number),
        "float": CatalogEntry("number", _number),
        "boolean": CatalogEntry("boolean", _boolean),
        "date": CatalogEntry("date", _date),
        "datetime": CatalogEntry("date", _datetime, ".iso()"),
        "email": CatalogEntry("string", _email, ".email()"),
        "url": CatalogEntry("string", _url, ".uri()"),
        "uuid": CatalogEntry("string", _uuid, ".guid()"),
        "phone": CatalogEntry("string", _phone, _PHONE_PATTERN),
    }
)


class TypeCatalog:
    """TypeSystem adapter over a fixed table of semantic types.

    Lookup is case-insensitive. Object references resolve to an
    ``object`` descriptor with an empty sample. Entries are fixed at
    construction; register() is meant for setup before the engine runs.
    """

    def __init__(
        self,
        seed: int = 0,
        entries: Mapping[str, CatalogEntry] | None = None,
    ) -> None:
        """Initialize catalog.

        Args:
            seed: Seed mixed into every sampler
            entries: Type table. Uses BUILTIN_ENTRIES if None.

        Raises:
            ValueError: If seed is negative
        """
        if seed < 0:
            raise ValueError(f"seed must be >= 0, got {seed}")

        self._seed = seed
        self._descriptors: dict[str, TypeDescriptor] = {}
        for name, entry in (BUILTIN_ENTRIES if entries is None else entries).items():
            self._descriptors[name.lower()] = TypeDescriptor(
                structural_kind=entry.structural_kind,
                mock_generator=partial(self._sample, name.lower(), entry.sampler),
                constraint_add_on=entry.add_on,
            )
        self._object = TypeDescriptor(structural_kind="object", mock_generator=dict)

    @property
    def seed(self) -> int:
        """Seed mixed into every sampler."""
        return self._seed

    @property
    def names(self) -> frozenset[str]:
        """Known type names (lower case)."""
        return frozenset(self._descriptors)

    def resolve(self, type_ref: TypeRef) -> TypeDescriptor | None:
        """Describe a semantic type. Returns None if unknown."""
        if type_ref.kind is TargetKind.OBJECT:
            return self._object
        if type_ref.kind is TargetKind.UNKNOWN:
            return None
        return self._descriptors.get(type_ref.name.lower())

    def register(self, name: str, descriptor: TypeDescriptor) -> None:
        """Add a type to the catalog.

        Raises:
            ValueError: If name is empty or already known
        """
        if not name:
            raise ValueError("type name must not be empty")
        key = name.lower()
        if key in self._descriptors:
            raise ValueError(f"type '{name}' already exists in catalog")
        self._descriptors[key] = descriptor

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._descriptors

    def _sample(self, name: str, sampler: Callable[[random.Random], object]) -> object:
        return sampler(random.Random(f"{self._seed}:{name}"))
