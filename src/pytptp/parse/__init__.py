"""Parsers for the TPTP and TSTP languages."""

from .exception import ParseError
from .parser import (
    parse_atom, parse_var, parse_distinct_object,
    parse_function, parse_predicate, parse_sort, parse_tff1_sort, parse_type,
    parse_number, parse_term, parse_literal, parse_clause,
    parse_unsorted_first_order, parse_monomorphic_first_order,
    parse_polymorphic_first_order, parse_quantified_modal, parse_formula,
    parse_unit, parse_tptp, parse_tstp, parse_szs,
    parse_intro, parse_info, parse_parent, parse_source, parse_annotation,
)
from .szs import read_szs_comment

__all__ = [
    'ParseError',
    # Names and sorts
    'parse_atom', 'parse_var', 'parse_distinct_object',
    'parse_function', 'parse_predicate', 'parse_sort', 'parse_tff1_sort',
    'parse_type',
    # Terms and formulas
    'parse_number', 'parse_term', 'parse_literal', 'parse_clause',
    'parse_unsorted_first_order', 'parse_monomorphic_first_order',
    'parse_polymorphic_first_order', 'parse_quantified_modal', 'parse_formula',
    # Documents
    'parse_unit', 'parse_tptp', 'parse_tstp', 'parse_szs', 'read_szs_comment',
    # Annotations
    'parse_intro', 'parse_info', 'parse_parent', 'parse_source',
    'parse_annotation',
]
