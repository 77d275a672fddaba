"""Annotations of TSTP units: sources, parents, useful info and SZS values."""

from dataclasses import dataclass
from functools import cache
from typing import Optional, Tuple, Union

from .logic import Formula, Number, Term, _freeze
from .names import Atom, Named, Reserved, Var


UnitName = Union[Atom, int]


class Intro(Named):
    """The ways a formula can be introduced into a derivation."""
    BY_DEFINITION = "definition"
    BY_AXIOM_OF_CHOICE = "axiom_of_choice"
    BY_TAUTOLOGY = "tautology"
    BY_ASSUMPTION = "assumption"


class SZSOntology(Named):
    """An SZS vocabulary, with a short code and an ontology name per member.

    The short code is the canonical name used inside annotations
    (``status(thm)``); the ontology name is used in SZS comment lines
    (``% SZS status Theorem for ...``).
    """

    @property
    def canonical(self) -> str:
        return self.value[0]

    @property
    def ontology(self) -> str:
        return self.value[1]

    @classmethod
    def from_ontology(cls, text: str):
        """Look up the member whose ontology name is ``text``, or None."""
        for name, member in ontology_table(cls):
            if name == text:
                return member
        return None


@cache
def ontology_table(cls):
    """(ontology name, member) pairs of an SZS vocabulary, longest name first."""
    return sorted(((member.ontology, member) for member in cls),
                  key=lambda pair: len(pair[0]), reverse=True)


class Success(SZSOntology):
    """SZS success statuses."""
    SUC = ("suc", "Success")
    UNP = ("unp", "UnsatisfiabilityPreserving")
    SAP = ("sap", "SatisfiabilityPreserving")
    ESA = ("esa", "EquiSatisfiable")
    SAT = ("sat", "Satisfiable")
    FSA = ("fsa", "FinitelySatisfiable")
    THM = ("thm", "Theorem")
    EQV = ("eqv", "Equivalent")
    TAC = ("tac", "TautologousConclusion")
    WEC = ("wec", "WeakerConclusion")
    ETH = ("eth", "EquivalentTheorem")
    TAU = ("tau", "Tautology")
    WTC = ("wtc", "WeakerTautologousConclusion")
    WTH = ("wth", "WeakerTheorem")
    CAX = ("cax", "ContradictoryAxioms")
    SCA = ("sca", "SatisfiableConclusionContradictoryAxioms")
    TCA = ("tca", "TautologousConclusionContradictoryAxioms")
    WCA = ("wca", "WeakerConclusionContradictoryAxioms")
    CUP = ("cup", "CounterUnsatisfiabilityPreserving")
    CSP = ("csp", "CounterSatisfiabilityPreserving")
    ECS = ("ecs", "EquiCounterSatisfiable")
    CSA = ("csa", "CounterSatisfiable")
    CTH = ("cth", "CounterTheorem")
    CEQ = ("ceq", "CounterEquivalent")
    UNC = ("unc", "UnsatisfiableConclusion")
    WCC = ("wcc", "WeakerCounterConclusion")
    ECT = ("ect", "EquivalentCounterTheorem")
    FUN = ("fun", "FinitelyUnsatisfiable")
    UNS = ("uns", "Unsatisfiable")
    WUC = ("wuc", "WeakerUnsatisfiableConclusion")
    WCT = ("wct", "WeakerCounterTheorem")
    SCC = ("scc", "SatisfiableCounterConclusionContradictoryAxioms")
    UCA = ("uca", "UnsatisfiableConclusionContradictoryAxioms")
    NOC = ("noc", "NoConsequence")


class NoSuccess(SZSOntology):
    """SZS statuses reporting that no solution was found."""
    NOS = ("nos", "NoSuccess")
    OPN = ("opn", "Open")
    UNK = ("unk", "Unknown")
    ASS = ("ass", "Assumed")
    STP = ("stp", "Stopped")
    ERR = ("err", "Error")
    OSE = ("ose", "OSError")
    INE = ("ine", "InputError")
    USE = ("use", "UsageError")
    SYE = ("sye", "SyntaxError")
    SEE = ("see", "SemanticError")
    TYE = ("tye", "TypeError")
    FOR = ("for", "Forced")
    USR = ("usr", "User")
    RSO = ("rso", "ResourceOut")
    TMO = ("tmo", "Timeout")
    MMO = ("mmo", "MemoryOut")
    GUP = ("gup", "GaveUp")
    INC = ("inc", "Incomplete")
    IAP = ("iap", "Inappropriate")
    INP = ("inp", "InProgress")
    NTT = ("ntt", "NotTried")
    NTY = ("nty", "NotTriedYet")


class Dataform(SZSOntology):
    """SZS dataforms of solutions output by a prover."""
    LDA = ("LDa", "LogicalData")
    SLN = ("Sln", "Solution")
    PRF = ("Prf", "Proof")
    DER = ("Der", "Derivation")
    REF = ("Ref", "Refutation")
    CRF = ("CRf", "CNFRefutation")
    INT = ("Int", "Interpretation")
    MOD = ("Mod", "Model")
    PIN = ("Pin", "PartialInterpretation")
    PMO = ("PMo", "PartialModel")
    SIN = ("SIn", "StrictlyPartialInterpretation")
    SMO = ("SMo", "StrictlyPartialModel")
    DIN = ("DIn", "DomainInterpretation")
    DMO = ("DMo", "DomainModel")
    DPI = ("DPI", "DomainPartialInterpretation")
    DPM = ("DPM", "DomainPartialModel")
    DSI = ("DSI", "DomainStrictlyPartialInterpretation")
    DSM = ("DSM", "DomainStrictlyPartialModel")
    FIN = ("FIn", "FiniteInterpretation")
    FMO = ("FMo", "FiniteModel")
    FPI = ("FPI", "FinitePartialInterpretation")
    FPM = ("FPM", "FinitePartialModel")
    FSI = ("FSI", "FiniteStrictlyPartialInterpretation")
    FSM = ("FSM", "FiniteStrictlyPartialModel")
    HIN = ("HIn", "HerbrandInterpretation")
    HMO = ("HMo", "HerbrandModel")
    TIN = ("TIn", "FormulaInterpretation")
    TMO = ("TMo", "FormulaModel")
    TPI = ("TPI", "FormulaPartialInterpretation")
    TSI = ("TSI", "FormulaStrictlyPartialInterpretation")
    TSM = ("TSM", "FormulaStrictlyPartialModel")
    SAT = ("Sat", "Saturation")
    LOF = ("Lof", "ListOfFormulae")
    LTH = ("Lth", "ListOfTHF")
    LTF = ("Ltf", "ListOfTFF")
    LFO = ("Lfo", "ListOfFOF")
    LCN = ("Lcn", "ListOfCNF")
    NSO = ("NSo", "NotASolution")
    ASS = ("Ass", "Assurance")
    IPR = ("IPr", "IncompleteProof")
    IIN = ("IIn", "IncompleteInterpretation")
    NON = ("Non", "None")


SZSStatus = Union[NoSuccess, Success]


@dataclass(frozen=True)
class SZS:
    """The SZS status and dataform reported in a TSTP transcript."""
    status: Optional[SZSStatus] = None
    dataform: Optional[Dataform] = None

    def __add__(self, other: "SZS") -> "SZS":
        """Combine two summaries, keeping the first status and dataform."""
        return SZS(self.status if self.status is not None else other.status,
                   self.dataform if self.dataform is not None else other.dataform)


# Expressions and useful info

@dataclass(frozen=True)
class Logical:
    """A formula embedded in an annotation, e.g. ``$fof(p)``."""
    formula: Formula


@dataclass(frozen=True)
class TermExpression:
    """A term embedded in an annotation, e.g. ``$fot(f(X))``."""
    term: Term


Expression = Union[Logical, TermExpression]


@dataclass(frozen=True)
class Description:
    text: Atom


@dataclass(frozen=True)
class Iquote:
    text: Atom


@dataclass(frozen=True)
class Status:
    status: Reserved


@dataclass(frozen=True)
class Assumptions:
    names: Tuple[UnitName, ...]

    def __post_init__(self):
        _freeze(self, "names")
        if not self.names:
            raise ValueError("Assumptions must name at least one unit")


@dataclass(frozen=True)
class NewSymbols:
    name: Atom
    symbols: Tuple[Union[Var, Atom], ...]

    def __post_init__(self):
        _freeze(self, "symbols")


@dataclass(frozen=True)
class Refutation:
    name: Atom


@dataclass(frozen=True)
class ExpressionInfo:
    expression: Expression


@dataclass(frozen=True)
class Bind:
    var: Var
    expression: Expression


@dataclass(frozen=True)
class Application:
    """A general function-style record, e.g. ``splitting(3, [1, 2])``."""
    name: Atom
    infos: Tuple["Info", ...] = ()

    def __post_init__(self):
        _freeze(self, "infos")


@dataclass(frozen=True)
class InfoNumber:
    number: Number


@dataclass(frozen=True)
class Infos:
    infos: Tuple["Info", ...] = ()

    def __post_init__(self):
        _freeze(self, "infos")


Info = Union[Description, Iquote, Status, Assumptions, NewSymbols, Refutation,
             ExpressionInfo, Bind, Application, InfoNumber, Infos]


# Sources

@dataclass(frozen=True)
class UnknownSource:
    pass


@dataclass(frozen=True)
class UnitSource:
    """Reference to another unit by its name."""
    name: UnitName


@dataclass(frozen=True)
class File:
    name: Atom
    unit: Optional[UnitName] = None


@dataclass(frozen=True)
class Theory:
    name: Atom
    infos: Optional[Tuple[Info, ...]] = None


@dataclass(frozen=True)
class Creator:
    name: Atom
    infos: Optional[Tuple[Info, ...]] = None


@dataclass(frozen=True)
class Introduced:
    intro: Reserved
    infos: Optional[Tuple[Info, ...]] = None


@dataclass(frozen=True)
class Inference:
    """A unit derived by an inference rule from its parents."""
    rule: Atom
    infos: Tuple[Info, ...]
    parents: Tuple["Parent", ...]

    def __post_init__(self):
        _freeze(self, "infos", "parents")


Source = Union[UnknownSource, UnitSource, File, Theory, Creator, Introduced, Inference]


@dataclass(frozen=True)
class Parent:
    source: Source
    infos: Tuple[Info, ...] = ()

    def __post_init__(self):
        _freeze(self, "infos")


Annotation = Tuple[Source, Optional[Tuple[Info, ...]]]
