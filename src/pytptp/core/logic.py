"""Terms, literals, clauses and formulas of the TPTP languages.

First-order formulas are generic over the annotation attached to each
quantified variable:

- ``Unsorted`` for FOF,
- ``Sorted[Name]`` for monomorphic TFF0,
- ``Sorted[Union[QuantifiedSort, TFF1Sort]]`` for polymorphic TFF1.

The functions at the bottom of the module convert between these modes.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Generic, Iterable, Optional, Sequence, Tuple, TypeVar, Union

from .names import (
    Connective, DistinctObject, Language, Modality, Name, Predicate,
    Quantifier, Sign, Standard, Var,
)
from .sorts import SortApplication, TFF1Sort, monomorphize_tff1_sort


def _freeze(obj, *fields):
    for name in fields:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


# Numbers

@dataclass(frozen=True)
class IntegerConstant:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class RationalConstant:
    """A rational number, stored as written (not reduced)."""
    numerator: int
    denominator: int

    def __post_init__(self):
        if self.denominator <= 0:
            raise ValueError(f"Expected positive denominator, got {self.denominator}")

    def __str__(self):
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class RealConstant:
    """A real number; the ``Decimal`` keeps the coefficient and exponent as parsed."""
    value: Decimal

    def __str__(self):
        return str(self.value)


Number = Union[IntegerConstant, RationalConstant, RealConstant]


# Terms

@dataclass(frozen=True)
class FunctionTerm:
    """Application of a function symbol; a constant has no arguments."""
    name: Name
    arguments: Tuple["Term", ...] = ()

    def __post_init__(self):
        _freeze(self, "arguments")


@dataclass(frozen=True)
class VariableTerm:
    var: Var


@dataclass(frozen=True)
class NumberTerm:
    number: Number


@dataclass(frozen=True)
class DistinctTerm:
    object: DistinctObject


Term = Union[FunctionTerm, VariableTerm, NumberTerm, DistinctTerm]


# Literals and clauses

@dataclass(frozen=True)
class PredicateLiteral:
    """Application of a predicate symbol; a proposition has no arguments."""
    name: Name
    arguments: Tuple[Term, ...] = ()

    def __post_init__(self):
        _freeze(self, "arguments")


@dataclass(frozen=True)
class Equality:
    """Equality (positive sign) or inequality (negative sign) of two terms."""
    left: Term
    sign: Sign
    right: Term


Literal = Union[PredicateLiteral, Equality]

SignedLiteral = Tuple[Sign, Literal]

FALSUM = PredicateLiteral(Standard(Predicate.FALSUM))


@dataclass(frozen=True)
class Clause:
    """A non-empty disjunction of signed literals."""
    literals: Tuple[SignedLiteral, ...]

    def __post_init__(self):
        _freeze(self, "literals")
        if not self.literals:
            raise ValueError("Clause must contain at least one literal")

    def __add__(self, other: "Clause") -> "Clause":
        return Clause(self.literals + other.literals)

    def __len__(self):
        return len(self.literals)

    def __iter__(self):
        return iter(self.literals)


def unit_clause(literal: SignedLiteral) -> Clause:
    return Clause((literal,))


def clause(literals: Iterable[SignedLiteral]) -> Clause:
    """Build a clause; the empty clause is represented by ``$false``."""
    literals = tuple(literals)
    if literals:
        return Clause(literals)
    return unit_clause((Sign.POSITIVE, FALSUM))


# Annotations of quantified variables

@dataclass(frozen=True)
class Unsorted:
    """The annotation of a variable in an unsorted formula."""


A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Sorted(Generic[A]):
    """An optional sort annotation; ``None`` defaults to ``$i``."""
    sort: Optional[A] = None


@dataclass(frozen=True)
class QuantifiedSort:
    """The ``$tType`` annotation of a variable ranging over sorts."""


# First-order formulas

@dataclass(frozen=True)
class Atomic:
    literal: Literal


@dataclass(frozen=True)
class Negated(Generic[A]):
    formula: "FirstOrder[A]"


@dataclass(frozen=True)
class Connected(Generic[A]):
    left: "FirstOrder[A]"
    connective: Connective
    right: "FirstOrder[A]"


@dataclass(frozen=True)
class Quantified(Generic[A]):
    quantifier: Quantifier
    variables: Tuple[Tuple[Var, A], ...]
    formula: "FirstOrder[A]"

    def __post_init__(self):
        _freeze(self, "variables")
        if not self.variables:
            raise ValueError("Quantified formula must bind at least one variable")


FirstOrder = Union[Atomic, Negated[A], Connected[A], Quantified[A]]

UnsortedFirstOrder = FirstOrder[Unsorted]
MonomorphicFirstOrder = FirstOrder[Sorted[Name]]
SortedFirstOrder = MonomorphicFirstOrder
PolymorphicFirstOrder = FirstOrder[Sorted[Union[QuantifiedSort, TFF1Sort]]]


def quantified(quantifier: Quantifier,
               variables: Sequence[Tuple[Var, A]],
               formula: FirstOrder) -> FirstOrder:
    """Quantify a formula, dropping the quantifier if no variables are bound."""
    if variables:
        return Quantified(quantifier, tuple(variables), formula)
    return formula


def map_annotations(function: Callable[[A], B], formula: FirstOrder) -> FirstOrder:
    """Replace every variable annotation ``a`` in a formula by ``function(a)``."""
    if isinstance(formula, Atomic):
        return formula
    if isinstance(formula, Negated):
        return Negated(map_annotations(function, formula.formula))
    if isinstance(formula, Connected):
        return Connected(map_annotations(function, formula.left),
                         formula.connective,
                         map_annotations(function, formula.right))
    if isinstance(formula, Quantified):
        variables = tuple((v, function(a)) for v, a in formula.variables)
        return Quantified(formula.quantifier, variables,
                          map_annotations(function, formula.formula))
    raise TypeError(f"Expected first-order formula, got {formula!r}")


def traverse_annotations(function: Callable[[A], Optional[B]],
                         formula: FirstOrder) -> Optional[FirstOrder]:
    """Like :func:`map_annotations`, but fails with None as soon as
    ``function`` returns None for some annotation."""
    if isinstance(formula, Atomic):
        return formula
    if isinstance(formula, Negated):
        inner = traverse_annotations(function, formula.formula)
        return None if inner is None else Negated(inner)
    if isinstance(formula, Connected):
        left = traverse_annotations(function, formula.left)
        if left is None:
            return None
        right = traverse_annotations(function, formula.right)
        if right is None:
            return None
        return Connected(left, formula.connective, right)
    if isinstance(formula, Quantified):
        variables = []
        for var, annotation in formula.variables:
            converted = function(annotation)
            if converted is None:
                return None
            variables.append((var, converted))
        inner = traverse_annotations(function, formula.formula)
        if inner is None:
            return None
        return Quantified(formula.quantifier, tuple(variables), inner)
    raise TypeError(f"Expected first-order formula, got {formula!r}")


def sort_first_order(formula: UnsortedFirstOrder) -> SortedFirstOrder:
    """Convert an unsorted formula to a sorted one with all sorts omitted."""
    return map_annotations(lambda _: Sorted(None), formula)


def unsort_first_order(formula: MonomorphicFirstOrder) -> Optional[UnsortedFirstOrder]:
    """Convert a sorted formula to an unsorted one.

    Fails if any quantified variable carries an explicit sort.
    """
    def unsort(annotation):
        return Unsorted() if annotation.sort is None else None
    return traverse_annotations(unsort, formula)


def polymorphize_first_order(formula: MonomorphicFirstOrder) -> PolymorphicFirstOrder:
    """Embed a monomorphic formula into the polymorphic representation."""
    def polymorphize(annotation):
        if annotation.sort is None:
            return Sorted(None)
        return Sorted(SortApplication(annotation.sort))
    return map_annotations(polymorphize, formula)


def monomorphize_first_order(formula: PolymorphicFirstOrder) -> Optional[MonomorphicFirstOrder]:
    """Convert a polymorphic formula to the monomorphic representation.

    Fails if the formula quantifies over sorts or uses a sort constructor
    applied to arguments.
    """
    def monomorphize(annotation):
        if annotation.sort is None:
            return Sorted(None)
        if isinstance(annotation.sort, QuantifiedSort):
            return None
        name = monomorphize_tff1_sort(annotation.sort)
        return None if name is None else Sorted(name)
    return traverse_annotations(monomorphize, formula)


def reassociate(formula: FirstOrder) -> FirstOrder:
    """Left-nest chains of associative connectives.

    The grammar groups ``p & q & r`` as ``p & (q & r)``; this rewrites
    it to ``(p & q) & r``.
    """
    if isinstance(formula, Atomic):
        return formula
    if isinstance(formula, Negated):
        return Negated(reassociate(formula.formula))
    if isinstance(formula, Quantified):
        return Quantified(formula.quantifier, formula.variables,
                          reassociate(formula.formula))
    if isinstance(formula, Connected):
        left, connective, right = formula.left, formula.connective, formula.right
        while isinstance(right, Connected) and right.connective == connective \
                and connective.is_associative:
            left = Connected(left, connective, right.left)
            right = right.right
        return Connected(reassociate(left), connective, reassociate(right))
    raise TypeError(f"Expected first-order formula, got {formula!r}")


# Quantified modal formulas

@dataclass(frozen=True)
class ModalAtomic:
    literal: Literal


@dataclass(frozen=True)
class ModalNegated:
    formula: "QuantifiedModal"


@dataclass(frozen=True)
class ModalConnected:
    left: "QuantifiedModal"
    connective: Connective
    right: "QuantifiedModal"


@dataclass(frozen=True)
class ModalQuantified:
    quantifier: Quantifier
    variables: Tuple[Var, ...]
    formula: "QuantifiedModal"

    def __post_init__(self):
        _freeze(self, "variables")
        if not self.variables:
            raise ValueError("Quantified formula must bind at least one variable")


@dataclass(frozen=True)
class Modaled:
    """A formula under a modal operator, e.g. ``#box: p``."""
    modality: Modality
    formula: "QuantifiedModal"


QuantifiedModal = Union[ModalAtomic, ModalNegated, ModalConnected, ModalQuantified, Modaled]


# Formulas tagged with their language

@dataclass(frozen=True)
class CNF:
    formula: Clause
    language = Language.CNF


@dataclass(frozen=True)
class FOF:
    formula: UnsortedFirstOrder
    language = Language.FOF


@dataclass(frozen=True)
class TFF0:
    formula: MonomorphicFirstOrder
    language = Language.TFF


@dataclass(frozen=True)
class TFF1:
    formula: PolymorphicFirstOrder
    language = Language.TFF


@dataclass(frozen=True)
class QMF:
    formula: QuantifiedModal
    language = Language.QMF


Formula = Union[CNF, FOF, TFF0, TFF1, QMF]


def formula_language(formula: Formula) -> Language:
    return formula.language
