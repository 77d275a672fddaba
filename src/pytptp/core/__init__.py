"""Data model of TPTP problems and TSTP derivations."""

from .names import (
    Atom, Var, DistinctObject, Named, Standard, Extended, Reserved, Name,
    Language, Function, Predicate, Sign, Quantifier, Connective, Modality, Role,
    extended, is_reserved, standard, is_associative, name_table,
    is_valid_atom, is_valid_var, is_valid_distinct_object, is_valid_reserved,
)
from .sorts import (
    Sort, SortVariable, SortApplication, TFF1Sort, Type, TFF1Type, AnyType,
    tff1_type, monomorphize_tff1_sort,
)
from .logic import (
    IntegerConstant, RationalConstant, RealConstant, Number,
    FunctionTerm, VariableTerm, NumberTerm, DistinctTerm, Term,
    PredicateLiteral, Equality, Literal, SignedLiteral, FALSUM,
    Clause, unit_clause, clause,
    Unsorted, Sorted, QuantifiedSort,
    Atomic, Negated, Connected, Quantified, FirstOrder, quantified,
    map_annotations, traverse_annotations,
    sort_first_order, unsort_first_order,
    polymorphize_first_order, monomorphize_first_order, reassociate,
    ModalAtomic, ModalNegated, ModalConnected, ModalQuantified, Modaled,
    QuantifiedModal,
    CNF, FOF, TFF0, TFF1, QMF, Formula, formula_language,
)
from .annotations import (
    UnitName, Intro, Success, NoSuccess, Dataform, SZSStatus, SZS,
    Logical, TermExpression, Expression,
    Description, Iquote, Status, Assumptions, NewSymbols, Refutation,
    ExpressionInfo, Bind, Application, InfoNumber, Infos, Info,
    UnknownSource, UnitSource, File, Theory, Creator, Introduced, Inference,
    Source, Parent, Annotation,
)
from .units import (
    SortDeclaration, Typing, FormulaDeclaration, Declaration,
    declaration_language, Include, Unit, AnyUnit, TPTP, TSTP,
)

__all__ = [
    # Names
    'Atom', 'Var', 'DistinctObject', 'Named', 'Standard', 'Extended',
    'Reserved', 'Name', 'Language', 'Function', 'Predicate', 'Sign',
    'Quantifier', 'Connective', 'Modality', 'Role',
    'extended', 'is_reserved', 'standard', 'is_associative', 'name_table',
    'is_valid_atom', 'is_valid_var', 'is_valid_distinct_object',
    'is_valid_reserved',
    # Sorts
    'Sort', 'SortVariable', 'SortApplication', 'TFF1Sort', 'Type',
    'TFF1Type', 'AnyType', 'tff1_type', 'monomorphize_tff1_sort',
    # Logic
    'IntegerConstant', 'RationalConstant', 'RealConstant', 'Number',
    'FunctionTerm', 'VariableTerm', 'NumberTerm', 'DistinctTerm', 'Term',
    'PredicateLiteral', 'Equality', 'Literal', 'SignedLiteral', 'FALSUM',
    'Clause', 'unit_clause', 'clause',
    'Unsorted', 'Sorted', 'QuantifiedSort',
    'Atomic', 'Negated', 'Connected', 'Quantified', 'FirstOrder', 'quantified',
    'map_annotations', 'traverse_annotations',
    'sort_first_order', 'unsort_first_order',
    'polymorphize_first_order', 'monomorphize_first_order', 'reassociate',
    'ModalAtomic', 'ModalNegated', 'ModalConnected', 'ModalQuantified',
    'Modaled', 'QuantifiedModal',
    'CNF', 'FOF', 'TFF0', 'TFF1', 'QMF', 'Formula', 'formula_language',
    # Annotations
    'UnitName', 'Intro', 'Success', 'NoSuccess', 'Dataform', 'SZSStatus', 'SZS',
    'Logical', 'TermExpression', 'Expression',
    'Description', 'Iquote', 'Status', 'Assumptions', 'NewSymbols',
    'Refutation', 'ExpressionInfo', 'Bind', 'Application', 'InfoNumber',
    'Infos', 'Info',
    'UnknownSource', 'UnitSource', 'File', 'Theory', 'Creator', 'Introduced',
    'Inference', 'Source', 'Parent', 'Annotation',
    # Units
    'SortDeclaration', 'Typing', 'FormulaDeclaration', 'Declaration',
    'declaration_language', 'Include', 'Unit', 'AnyUnit', 'TPTP', 'TSTP',
]
