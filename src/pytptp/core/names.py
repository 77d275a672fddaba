"""Names, identifiers and the closed vocabularies of the TPTP language.

Every closed vocabulary is an ``Enum`` subclass of :class:`Named` whose
members carry their canonical TPTP spelling. The longest-first lookup
table used by the parser lives next to the vocabularies so that adding a
member keeps both directions consistent.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import cache
from typing import Generic, List, Optional, Tuple, Type, TypeVar, Union


_LOWER_WORD = re.compile(r"[a-z][A-Za-z0-9_]*\Z")
_UPPER_WORD = re.compile(r"[A-Z][A-Za-z0-9_]*\Z")


def _is_ascii_print(c: str) -> bool:
    return " " <= c <= "~"


def is_valid_atom(text: str) -> bool:
    """Check that text is a non-empty printable ASCII string."""
    return bool(text) and all(map(_is_ascii_print, text))


def is_valid_var(text: str) -> bool:
    """Check that text is an upper word: ``[A-Z][A-Za-z0-9_]*``."""
    return _UPPER_WORD.match(text) is not None


def is_valid_distinct_object(text: str) -> bool:
    """Check that text is a (possibly empty) printable ASCII string."""
    return all(map(_is_ascii_print, text))


def is_valid_reserved(text: str) -> bool:
    """Check that text is a lower word: ``[a-z][A-Za-z0-9_]*``."""
    return _LOWER_WORD.match(text) is not None


@dataclass(frozen=True)
class Atom:
    """A user-defined symbol, written as a lower word or single-quoted."""
    text: str

    def __post_init__(self):
        if not is_valid_atom(self.text):
            raise ValueError(f"Invalid atom: {self.text!r}")

    def __add__(self, other: "Atom") -> "Atom":
        return Atom(self.text + other.text)

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class Var:
    """A logical variable."""
    text: str

    def __post_init__(self):
        if not is_valid_var(self.text):
            raise ValueError(f"Invalid variable: {self.text!r}")

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class DistinctObject:
    """A double-quoted symbol, unequal to any other distinct object.

    Consumers are expected to honour the inequality; the library only
    stores the text.
    """
    text: str = ""

    def __post_init__(self):
        if not is_valid_distinct_object(self.text):
            raise ValueError(f"Invalid distinct object: {self.text!r}")

    def __add__(self, other: "DistinctObject") -> "DistinctObject":
        return DistinctObject(self.text + other.text)

    def __str__(self):
        return self.text


class Named(Enum):
    """A closed vocabulary whose members have canonical TPTP names."""

    @property
    def canonical(self) -> str:
        """The name of the member as it is spelled in TPTP."""
        return self.value

    @classmethod
    def from_canonical(cls, text: str):
        """Look up the member spelled ``text``, or None."""
        return _canonical_index(cls).get(text)


N = TypeVar("N", bound=Named)


@cache
def _canonical_index(cls):
    return {member.canonical: member for member in cls}


@cache
def name_table(cls: Type[N]) -> List[Tuple[str, N]]:
    """(name, member) pairs of a vocabulary, longest name first.

    Trying the names in this order guarantees that a name which is a
    prefix of another one is never matched in place of the longer one.
    """
    pairs = [(member.canonical, member) for member in cls]
    return sorted(pairs, key=lambda pair: len(pair[0]), reverse=True)


S = TypeVar("S")


@dataclass(frozen=True)
class Standard(Generic[S]):
    """An identifier from the TPTP specification."""
    value: S

    def __str__(self):
        return self.value.canonical


@dataclass(frozen=True)
class Extended:
    """An identifier outside the standard vocabulary, e.g. a prover extension."""
    text: str

    def __str__(self):
        return self.text


Reserved = Union[Standard, Extended]


def extended(cls: Type[N], text: str) -> Reserved:
    """Wrap ``text`` as a reserved identifier of the vocabulary ``cls``.

    Returns ``Standard(member)`` if ``text`` is the canonical name of a
    member and ``Extended(text)`` otherwise, so an ``Extended`` value never
    shadows a standard one.
    """
    member = cls.from_canonical(text)
    if member is not None:
        return Standard(member)
    return Extended(text)


# A name is either a reserved identifier, written with a leading ``$``,
# or an atom defined by the user.
Name = Union[Standard, Extended, Atom]


def is_reserved(name: Name) -> bool:
    return isinstance(name, (Standard, Extended))


def standard(name: Name) -> Optional[Named]:
    """The vocabulary member behind a standard name, or None."""
    if isinstance(name, Standard):
        return name.value
    return None


class Language(Named):
    """The TPTP language a unit is written in."""
    CNF = "cnf"
    FOF = "fof"
    TFF = "tff"
    QMF = "qmf"


class Function(Named):
    """Standard arithmetic function symbols."""
    UMINUS = "uminus"
    SUM = "sum"
    DIFFERENCE = "difference"
    PRODUCT = "product"
    QUOTIENT = "quotient"
    QUOTIENT_E = "quotient_e"
    QUOTIENT_T = "quotient_t"
    QUOTIENT_F = "quotient_f"
    REMAINDER_E = "remainder_e"
    REMAINDER_T = "remainder_t"
    REMAINDER_F = "remainder_f"
    FLOOR = "floor"
    CEILING = "ceiling"
    TRUNCATE = "truncate"
    ROUND = "round"
    TO_INT = "to_int"
    TO_RAT = "to_rat"
    TO_REAL = "to_real"


class Predicate(Named):
    """Standard predicate symbols."""
    TAUTOLOGY = "true"
    FALSUM = "false"
    DISTINCT = "distinct"
    LESS = "less"
    LESSEQ = "lesseq"
    GREATER = "greater"
    GREATEREQ = "greatereq"
    IS_INT = "is_int"
    IS_RAT = "is_rat"


class Sign(Named):
    """Polarity of a literal, spelled as the (in)equality sign."""
    POSITIVE = "="
    NEGATIVE = "!="


class Quantifier(Named):
    FORALL = "!"
    EXISTS = "?"


class Connective(Named):
    """Binary logical connectives."""
    CONJUNCTION = "&"
    DISJUNCTION = "|"
    IMPLICATION = "=>"
    EQUIVALENCE = "<=>"
    EXCLUSIVE_OR = "<~>"
    NEGATED_CONJUNCTION = "~&"
    NEGATED_DISJUNCTION = "~|"
    REVERSED_IMPLICATION = "<="

    @property
    def is_associative(self) -> bool:
        return self in (Connective.CONJUNCTION, Connective.DISJUNCTION)


def is_associative(connective: Connective) -> bool:
    """Check whether a connective is associative (``&`` and ``|``)."""
    return connective.is_associative


class Modality(Named):
    NECESSARY = "#box"
    POSSIBLE = "#dia"


class Role(Named):
    """The role of a formula in a problem or derivation."""
    AXIOM = "axiom"
    HYPOTHESIS = "hypothesis"
    DEFINITION = "definition"
    ASSUMPTION = "assumption"
    LEMMA = "lemma"
    THEOREM = "theorem"
    COROLLARY = "corollary"
    CONJECTURE = "conjecture"
    NEGATED_CONJECTURE = "negated_conjecture"
    PLAIN = "plain"
    FI_DOMAIN = "fi_domain"
    FI_FUNCTORS = "fi_functors"
    FI_PREDICATES = "fi_predicates"
    UNKNOWN = "unknown"
