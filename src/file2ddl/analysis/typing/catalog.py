"""Type catalogs.

A catalog is the ordered, immutable list of candidate storage types for one
database dialect. Each candidate carries an explicit rank (lower = more
specific) and a recognizer predicate. Ranks are tags declared by the
catalog, not positions in a list: reordering catalog entries never changes
how two ranks compare.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any

from file2ddl.analysis.typing.recognizers import RECOGNIZER_FACTORIES, RECOGNIZERS, Recognizer
from file2ddl.core.errors import ConfigurationError


class CatalogError(ConfigurationError):
    """Error building a type catalog."""

    def __init__(self, dialect: str, message: str):
        self.dialect = dialect
        self.message = message
        super().__init__(f"{dialect}: {message}")


@total_ordering
@dataclass(frozen=True)
class TypeRank:
    """Totally ordered promotion tag. Lower is more specific."""

    level: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TypeRank):
            return NotImplemented
        return self.level < other.level

    def __int__(self) -> int:
        return self.level


@dataclass(frozen=True)
class TypeCandidate:
    """A candidate storage type.

    ``max_length`` is set only for bounded-length text, whose column results
    report the longest value seen.
    """

    name: str
    rank: TypeRank
    recognizer: Recognizer = field(repr=False, compare=False)
    max_length: int | None = None
    fallback: bool = False
    compatible_with: tuple[str, ...] = ()

    @property
    def is_bounded_text(self) -> bool:
        return self.max_length is not None

    def matches(self, value: str) -> bool:
        return self.recognizer(value)


class TypeCatalog:
    """Immutable, rank-ordered set of candidate types for a dialect."""

    def __init__(self, dialect: str, candidates: Sequence[TypeCandidate]):
        self.dialect = dialect
        self._candidates = tuple(sorted(candidates, key=lambda c: c.rank))
        self._validate()
        self._by_rank = {c.rank: c for c in self._candidates}
        self._by_name = {c.name: c for c in self._candidates}
        self._bounded = next((c for c in self._candidates if c.is_bounded_text), None)

    def _validate(self) -> None:
        if not self._candidates:
            raise CatalogError(self.dialect, "catalog has no types")

        ranks = [c.rank for c in self._candidates]
        if len(set(ranks)) != len(ranks):
            raise CatalogError(self.dialect, "type ranks must be unique")

        names = [c.name for c in self._candidates]
        if len(set(names)) != len(names):
            raise CatalogError(self.dialect, "type names must be unique")

        fallbacks = [c for c in self._candidates if c.fallback]
        if len(fallbacks) != 1:
            raise CatalogError(self.dialect, "exactly one fallback type is required")
        if fallbacks[0] is not self._candidates[-1]:
            raise CatalogError(self.dialect, "the fallback type must have the highest rank")

        bounded = [c for c in self._candidates if c.is_bounded_text]
        if len(bounded) > 1:
            raise CatalogError(self.dialect, "at most one bounded text type is allowed")
        for candidate in bounded:
            if candidate.max_length is not None and candidate.max_length <= 0:
                raise CatalogError(self.dialect, f"{candidate.name}: max_length must be positive")

    @classmethod
    def from_config(cls, dialect: str, config: Mapping[str, Any]) -> TypeCatalog:
        """Build a catalog from a parsed dialect YAML document.

        Expected shape::

            types:
              - name: smallint
                rank: 1
                recognizer: smallint
                compatible_with: [smallint, integer, text]
              - name: varchar
                rank: 7
                recognizer: bounded_text
                max_length: 64000
              - name: text
                rank: 8
                recognizer: any
                fallback: true

        Raises:
            CatalogError: If an entry is malformed or names an unknown recognizer
        """
        entries = config.get("types")
        if not isinstance(entries, list):
            raise CatalogError(dialect, "'types' must be a list")

        candidates = []
        for entry in entries:
            try:
                name = str(entry["name"])
                rank = TypeRank(int(entry["rank"]))
                key = entry["recognizer"]
                max_length = entry.get("max_length")
                if max_length is not None:
                    max_length = int(max_length)
            except (KeyError, TypeError, ValueError) as e:
                raise CatalogError(dialect, f"invalid type entry {entry!r}: {e}") from e

            if key in RECOGNIZER_FACTORIES:
                if max_length is None:
                    raise CatalogError(dialect, f"{name}: recognizer '{key}' requires max_length")
                recognizer = RECOGNIZER_FACTORIES[key](max_length)
            elif key in RECOGNIZERS:
                recognizer = RECOGNIZERS[key]
            else:
                raise CatalogError(dialect, f"{name}: unknown recognizer '{key}'")

            candidates.append(
                TypeCandidate(
                    name=name,
                    rank=rank,
                    recognizer=recognizer,
                    max_length=max_length,
                    fallback=bool(entry.get("fallback", False)),
                    compatible_with=tuple(entry.get("compatible_with", [name])),
                )
            )

        return cls(dialect, candidates)

    def __iter__(self) -> Iterator[TypeCandidate]:
        return iter(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    @property
    def most_specific(self) -> TypeRank:
        return self._candidates[0].rank

    @property
    def fallback(self) -> TypeRank:
        return self._candidates[-1].rank

    @property
    def bounded_text(self) -> TypeCandidate | None:
        """The bounded-length text candidate, if this dialect has one."""
        return self._bounded

    def candidate(self, rank: TypeRank) -> TypeCandidate:
        return self._by_rank[rank]

    def by_name(self, name: str) -> TypeCandidate:
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"{self.dialect} has no type named '{name}'") from None

    def names(self) -> list[str]:
        return [c.name for c in self._candidates]

    def compatible_types(self, name: str) -> tuple[str, ...]:
        """Types that can store every value of ``name``, most specific first."""
        return self.by_name(name).compatible_with

    def infer_rank(self, value: str) -> TypeRank:
        """Rank of the most specific candidate that accepts ``value``."""
        for candidate in self._candidates:
            if candidate.matches(value):
                return candidate.rank
        return self.fallback
