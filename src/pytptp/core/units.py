"""Declarations, units and the TPTP and TSTP documents built from them."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .annotations import SZS, Annotation, UnitName
from .logic import Formula, _freeze
from .names import Atom, Language, Reserved
from .sorts import AnyType


@dataclass(frozen=True)
class SortDeclaration:
    """Introduction of a sort constructor, e.g. ``list: $tType > $tType``."""
    name: Atom
    arity: int

    def __post_init__(self):
        if self.arity < 0:
            raise ValueError(f"Expected non-negative arity, got {self.arity}")


@dataclass(frozen=True)
class Typing:
    """Type assignment of a symbol, e.g. ``f: $int > $int``."""
    name: Atom
    type: AnyType


@dataclass(frozen=True)
class FormulaDeclaration:
    role: Reserved
    formula: Formula


Declaration = Union[SortDeclaration, Typing, FormulaDeclaration]


def declaration_language(declaration: Declaration) -> Language:
    if isinstance(declaration, FormulaDeclaration):
        return declaration.formula.language
    return Language.TFF


@dataclass(frozen=True)
class Include:
    """An ``include`` directive with an optional selection of unit names."""
    file: Atom
    selection: Optional[Tuple[UnitName, ...]] = None

    def __post_init__(self):
        if self.selection is not None:
            _freeze(self, "selection")
            if not self.selection:
                raise ValueError("Include selection must name at least one unit")


@dataclass(frozen=True)
class Unit:
    """A named, annotated logical unit such as ``fof(ax1, axiom, p)``."""
    name: UnitName
    declaration: Declaration
    annotation: Optional[Annotation] = None

    @property
    def language(self) -> Language:
        return declaration_language(self.declaration)


AnyUnit = Union[Include, Unit]


@dataclass(frozen=True)
class TPTP:
    """A TPTP problem: a sequence of units."""
    units: Tuple[AnyUnit, ...] = ()

    def __post_init__(self):
        _freeze(self, "units")

    def __add__(self, other: "TPTP") -> "TPTP":
        return TPTP(self.units + other.units)

    def __len__(self):
        return len(self.units)

    def __iter__(self):
        return iter(self.units)


@dataclass(frozen=True)
class TSTP:
    """A TSTP transcript: the SZS summary of a prover run and its output units."""
    szs: SZS = SZS()
    units: Tuple[AnyUnit, ...] = ()

    def __post_init__(self):
        _freeze(self, "units")

    def __len__(self):
        return len(self.units)

    def __iter__(self):
        return iter(self.units)
