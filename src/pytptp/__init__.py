"""
pytptp: Parser and data model for the TPTP and TSTP languages.

pytptp reads the problem and derivation formats of the TPTP library
into immutable Python values. It supports:

- Clause normal form (CNF) and first-order form (FOF)
- Typed first-order form, monomorphic (TFF0) and polymorphic (TFF1)
- Quantified modal formulas (QMF)
- Inference annotations and the SZS status lines of prover output

Basic usage:
    >>> from pytptp import parse_tptp
    >>> problem = parse_tptp("fof(ax1, axiom, ! [X] : (p(X) => q(X))).")
    >>> unit = problem.units[0]
    >>> unit.language
    <Language.FOF: 'fof'>
"""

__version__ = "0.1.0"

from pytptp.core import *  # noqa: F401,F403
from pytptp.core import __all__ as _core_all
from pytptp.parse import (
    ParseError,
    parse_formula, parse_unit, parse_tptp, parse_tstp, parse_szs,
)

__all__ = [
    # Version
    "__version__",

    # Parsing
    "ParseError",
    "parse_formula", "parse_unit", "parse_tptp", "parse_tstp", "parse_szs",
] + list(_core_all)
