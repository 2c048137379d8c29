"""Controlled vocabulary for Singapore subjects and education levels.

Each table maps a canonical term to the aliases, abbreviations and exam-level
variants that denote it. Two strings "share a vocabulary group" when both can
be tied, by substring in either direction, to forms of the same canonical entry.

The tables are plain immutable data so they can be inspected and extended
(see VocabularyTables.extend) without touching the matching logic.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

AliasTable = Mapping[str, Tuple[str, ...]]

SUBJECT_ALIASES: AliasTable = MappingProxyType({
    "mathematics": (
        "math",
        "maths",
        "e maths",
        "a maths",
        "elementary mathematics",
        "additional mathematics",
        "h1 math",
        "h2 math",
        "h1 maths",
        "h2 maths",
    ),
    "science": ("sciences", "combined science", "integrated science"),
    "physics": ("phys", "h1 physics", "h2 physics"),
    "chemistry": ("chem", "h1 chemistry", "h2 chemistry"),
    "biology": ("bio", "h1 biology", "h2 biology"),
    "english": (
        "eng",
        "english language",
        "english literature",
        "h1 english",
        "h2 english",
    ),
    "chinese": (
        "mandarin",
        "higher chinese",
        "h1 chinese",
        "h2 chinese",
        "hcl",
        "cl",
        "mother tongue",
    ),
    "malay": ("higher malay", "h1 malay", "h2 malay"),
    "tamil": ("higher tamil", "h1 tamil", "h2 tamil"),
    "general paper": ("gp", "h1 gp", "knowledge and inquiry", "ki"),
    "economics": (
        "econs",
        "econ",
        "h1 economics",
        "h2 economics",
        "h1 econs",
        "h2 econs",
    ),
    "geography": ("geog", "geo", "h1 geography", "h2 geography"),
    "history": ("hist", "h1 history", "h2 history"),
    "literature": ("lit", "english literature", "h1 literature", "h2 literature"),
    "accounting": (
        "acc",
        "accounts",
        "accountancy",
        "h1 accounting",
        "h2 accounting",
    ),
    "computing": ("comp", "computer science", "cs", "h1 computing", "h2 computing"),
    "art": ("h1 art", "h2 art", "visual arts"),
    "music": ("h1 music", "h2 music"),
})

LEVEL_ALIASES: AliasTable = MappingProxyType({
    "primary school": (
        "pri",
        "primary",
        "p1",
        "p2",
        "p3",
        "p4",
        "p5",
        "p6",
        "primary 1",
        "primary 2",
        "primary 3",
        "primary 4",
        "primary 5",
        "primary 6",
        "primary 1-3",
        "primary 4-6",
    ),
    "secondary school": (
        "sec",
        "secondary",
        "s1",
        "s2",
        "s3",
        "s4",
        "s5",
        "secondary 1",
        "secondary 2",
        "secondary 3",
        "secondary 4",
        "secondary 5",
        "secondary 1-2",
        "secondary 3-4",
        "o level",
        "o-level",
        "n level",
        "n-level",
    ),
    "junior college": (
        "jc",
        "jc1",
        "jc2",
        "j1",
        "j2",
        "junior college 1",
        "junior college 2",
        "jc 1-2",
        "a level",
        "a-level",
    ),
    "pre-school": (
        "preschool",
        "kindergarten",
        "k1",
        "k2",
        "nursery",
        "pre school",
    ),
    "ib": ("international baccalaureate", "ib diploma", "ibdp"),
    "igcse": ("international gcse", "cambridge igcse"),
    "diploma": ("polytechnic", "poly", "dip"),
})


def _merge(base: AliasTable, extra: Optional[Mapping[str, Iterable[str]]]) -> AliasTable:
    merged: Dict[str, Tuple[str, ...]] = dict(base)
    for canonical, aliases in (extra or {}).items():
        forms = list(merged.get(canonical, ()))
        for alias in aliases:
            if alias != canonical and alias not in forms:
                forms.append(alias)
        merged[canonical] = tuple(forms)
    return MappingProxyType(merged)


@dataclass(frozen=True)
class VocabularyTables:
    """The subject and level alias tables used by the fuzzy matcher."""

    subjects: AliasTable = field(default_factory=lambda: SUBJECT_ALIASES)
    levels: AliasTable = field(default_factory=lambda: LEVEL_ALIASES)

    def groups(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        """Yield (canonical, all forms) for every subject entry, then every level entry."""
        for table in (self.subjects, self.levels):
            for canonical, variants in table.items():
                yield canonical, (canonical,) + tuple(variants)

    def extend(
        self,
        subjects: Optional[Mapping[str, Iterable[str]]] = None,
        levels: Optional[Mapping[str, Iterable[str]]] = None,
    ) -> "VocabularyTables":
        """Return new tables with extra aliases merged in.

        New canonical terms are added; aliases for existing canonical terms are
        appended after the built-in ones. Aliases are expected to be normalized.
        """
        return VocabularyTables(
            subjects=_merge(self.subjects, subjects),
            levels=_merge(self.levels, levels),
        )

    def canonical_terms(self, text: str) -> Tuple[str, ...]:
        """Canonical entries that normalized ``text`` can be tied to, in table order."""
        return tuple(
            canonical for canonical, forms in self.groups() if _relates_to_any(text, forms)
        )

    def shares_group(self, a: str, b: str) -> bool:
        """Whether normalized ``a`` and ``b`` relate to forms of the same canonical entry.

        Subject and level tables are both consulted, and either is sufficient.
        """
        for _, forms in self.groups():
            if _relates_to_any(a, forms) and _relates_to_any(b, forms):
                return True
        return False


def _relates_to_any(text: str, forms: Tuple[str, ...]) -> bool:
    """Substring relation in either direction between ``text`` and any form."""
    return any(form in text or text in form for form in forms)


DEFAULT_VOCABULARY = VocabularyTables()


def shares_vocabulary_group(a: str, b: str, tables: VocabularyTables = DEFAULT_VOCABULARY) -> bool:
    """Module-level shortcut for ``tables.shares_group(a, b)``."""
    return tables.shares_group(a, b)
