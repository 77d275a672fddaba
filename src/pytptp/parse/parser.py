"""Grammar of the TPTP and TSTP languages.

Each production is a function taking an :class:`~pytptp.parse.lexer.Input`
and returning the parsed value. The ``parse_*`` functions at the bottom
apply a production to a whole string and raise
:class:`~pytptp.parse.exception.ParseError` if it does not match.

Besides the official grammar, redundant parentheses are accepted around
terms, literals, subclauses, subformulas and sorts.
"""

import logging
from decimal import Decimal
from functools import partial

from pytptp.core.annotations import (
    SZS, Application, Assumptions, Bind, Creator, Description, ExpressionInfo,
    File, Inference, InfoNumber, Infos, Introduced, Intro, Iquote, Logical,
    NewSymbols, Parent, Refutation, Status, Success, TermExpression, Theory,
    UnitSource, UnknownSource,
)
from pytptp.core.logic import (
    CNF, FOF, QMF, TFF0, TFF1, Atomic, Connected, DistinctTerm, Equality,
    FunctionTerm, IntegerConstant, ModalAtomic, ModalConnected, ModalNegated,
    ModalQuantified, Modaled, Negated, NumberTerm, PredicateLiteral,
    Quantified, QuantifiedSort, RationalConstant, RealConstant, Sorted,
    Unsorted, VariableTerm, monomorphize_first_order, unit_clause,
)
from pytptp.core.names import (
    Atom, Connective, DistinctObject, Function, Language, Modality, Predicate,
    Quantifier, Role, Sign, Var, extended,
)
from pytptp.core.sorts import Sort, SortApplication, SortVariable, tff1_type
from pytptp.core.units import (
    TPTP, TSTP, FormulaDeclaration, Include, SortDeclaration, Typing, Unit,
)

from .lexer import (
    Failure, Input, bracket_list, bracket_list1, char, choice, comma, enum,
    integer, labeled, lexeme, lower_word, maybe_comma, op, optional,
    optional_parens, parens, quoted, run, scientific, sep_by1, signed,
    skip_line, skip_space, skip_whitespace, token, upper_word,
)
from .szs import read_szs_comment

logger = logging.getLogger(__name__)

RESERVED_MARKER = "$"
QUANTIFIED_SORT = "$tType"
TYPE_QUANTIFIER = "!>"


def tagged(inp, tag, parser):
    """A parenthesized production introduced by a keyword, e.g. ``file(...)``."""
    token(inp, tag)
    return parens(inp, parser)


# Names

def atom(inp):
    def p(i):
        text = lexeme(i, lambda j: choice(j, lambda k: quoted(k, "'"), lower_word))
        if not text:
            i.fail("non-empty atom")
        return Atom(text)
    return labeled(inp, "atom", p)


def var(inp):
    return labeled(inp, "var", lambda i: Var(lexeme(i, upper_word)))


def distinct_object(inp):
    return labeled(inp, "distinct object",
                   lambda i: DistinctObject(lexeme(i, lambda j: quoted(j, '"'))))


def reserved(inp, cls):
    return labeled(inp, "reserved", lambda i: extended(cls, lexeme(i, lower_word)))


def name(inp, cls):
    def reserved_name(i):
        char(i, RESERVED_MARKER)
        return reserved(i, cls)
    return labeled(inp, "name", lambda i: choice(i, reserved_name, atom))


def function(inp):
    return labeled(inp, "function", lambda i: name(i, Function))


def predicate(inp):
    return labeled(inp, "predicate", lambda i: name(i, Predicate))


def sort(inp):
    return labeled(inp, "sort", lambda i: name(i, Sort))


def arguments(inp, argument):
    """A parenthesized, comma-separated argument list, or nothing."""
    if not inp.startswith("("):
        return ()
    op(inp, "(")
    values = [optional_parens(inp, argument)]
    while inp.startswith(","):
        op(inp, ",")
        values.append(optional_parens(inp, argument))
    op(inp, ")")
    return tuple(values)


def application(inp, head, argument):
    """A head followed by an optional parenthesized argument list."""
    return head(inp), arguments(inp, argument)


# Sorts and types

def tff1_sort(inp):
    def sort_application(i):
        return SortApplication(*application(i, sort, tff1_sort))
    return labeled(inp, "tff1 sort",
                   lambda i: choice(i, lambda j: SortVariable(var(j)), sort_application))


def mapping(inp, parser):
    """``s1 > s``, ``(s1 * ... * sn) > s`` or just ``s``."""
    def single(i):
        return [parser(i)]

    def product(i):
        return parens(i, lambda j: sep_by1(j, parser, lambda k: op(k, "*")))

    def arguments(i):
        values = choice(i, single, product)
        op(i, ">")
        return values
    args = optional(inp, arguments, [])
    return args, parser(inp)


def type_(inp):
    def sort_var(i):
        v = var(i)
        op(i, ":")
        optional_parens(i, lambda j: token(j, QUANTIFIED_SORT))
        return v

    def prefix(i):
        token(i, TYPE_QUANTIFIER)
        variables = bracket_list1(i, sort_var)
        op(i, ":")
        return variables

    def p(i):
        variables = optional(i, prefix, [])
        arguments, result = optional_parens(
            i, lambda j: mapping(j, lambda k: optional_parens(k, tff1_sort)))
        return tff1_type(variables, arguments, result)
    return labeled(inp, "type", p)


# Terms, literals and clauses

def number(inp):
    def rational(i):
        numerator = signed(i, integer)
        char(i, "/")
        denominator = integer(i)
        if denominator == 0:
            i.fail("positive denominator")
        return RationalConstant(numerator, denominator)

    def real(i):
        value = Decimal(lexeme(i, scientific))
        if value.as_tuple().exponent == 0:
            return IntegerConstant(int(value))
        return RealConstant(value)
    return labeled(inp, "number", lambda i: choice(i, rational, real))


def term(inp):
    c = inp.peek()
    try:
        if c.isupper():
            return VariableTerm(var(inp))
        if c == '"':
            return DistinctTerm(distinct_object(inp))
        if c.isdigit() or c in ("+", "-"):
            return NumberTerm(number(inp))
        return FunctionTerm(function(inp), arguments(inp, term))
    except Failure as failure:
        failure.labels.append("term")
        raise


def literal(inp):
    start = inp.pos
    try:
        left = optional_parens(inp, term)
        sign = labeled(inp, "eq", lambda i: enum(i, Sign))
        return Equality(left, sign, optional_parens(inp, term))
    except Failure:
        inp.pos = start
    try:
        return PredicateLiteral(predicate(inp), arguments(inp, term))
    except Failure as failure:
        failure.labels.append("literal")
        raise


def signed_literal(inp):
    if inp.startswith("~"):
        op(inp, "~")
        return Sign.NEGATIVE, optional_parens(inp, literal)
    return Sign.POSITIVE, literal(inp)


def subclause(inp):
    start = inp.pos
    try:
        return unit_clause(signed_literal(inp))
    except Failure as failure:
        inp.pos = start
        if not inp.startswith("("):
            failure.labels.append("subclause")
            raise
    return parens(inp, clause)


def clause(inp):
    result = subclause(inp)
    while inp.startswith("|"):
        op(inp, "|")
        result = result + subclause(inp)
    return result


# First-order formulas

def connected(inp, unitary, build):
    """Unitary formulas joined by connectives, grouped to the right."""
    formulas = [unitary(inp)]
    connectives = []
    while True:
        start = inp.pos
        try:
            c = labeled(inp, "connective", lambda i: enum(i, Connective))
            formulas.append(unitary(inp))
        except Failure:
            inp.pos = start
            break
        connectives.append(c)
    formula = formulas.pop()
    while formulas:
        formula = build(formulas.pop(), connectives.pop(), formula)
    return formula


def unitary(inp, atomic, nested, negated, quantified, modaled=None):
    """A unitary formula, dispatched on its first character.

    A formula opening with a parenthesis is tried as an atom first, since
    an equality may start with a parenthesized term.
    """
    start = inp.pos
    try:
        if inp.startswith("~"):
            return negated(inp)
        if inp.startswith("!") or inp.startswith("?"):
            return quantified(inp)
        if modaled is not None and inp.startswith("#"):
            return modaled(inp)
        if not inp.startswith("("):
            return atomic(literal(inp))
        try:
            return atomic(literal(inp))
        except Failure:
            inp.pos = start
        return parens(inp, nested)
    except Failure as failure:
        failure.labels.append("unitary formula")
        raise


def first_order(inp, annotation):
    """A first-order formula whose quantified variables carry ``annotation``."""
    def variable(i):
        return var(i), annotation(i)

    def quantified(i):
        quantifier = labeled(i, "quantifier", lambda j: enum(j, Quantifier))
        variables = bracket_list1(i, variable)
        op(i, ":")
        return Quantified(quantifier, tuple(variables), unitary_first_order(i))

    def negated(i):
        op(i, "~")
        return Negated(unitary_first_order(i))

    def nested(i):
        return first_order(i, annotation)

    def unitary_first_order(i):
        return unitary(i, Atomic, nested, negated, quantified)
    return connected(inp, unitary_first_order, Connected)


def unsorted(inp):
    return Unsorted()


def sorted_(inp, parser):
    def annotation(i):
        op(i, ":")
        return optional_parens(i, parser)
    return labeled(inp, "sorted", lambda i: Sorted(optional(i, annotation)))


def quantified_sort(inp):
    token(inp, QUANTIFIED_SORT)
    return QuantifiedSort()


def polymorphic_sort(inp):
    return choice(inp, quantified_sort, tff1_sort)


def unsorted_first_order(inp):
    return labeled(inp, "fof", lambda i: first_order(i, unsorted))


def monomorphic_first_order(inp):
    return labeled(inp, "tff0", lambda i: first_order(i, partial(sorted_, parser=sort)))


def polymorphic_first_order(inp):
    return labeled(inp, "tff1",
                   lambda i: first_order(i, partial(sorted_, parser=polymorphic_sort)))


def quantified_modal(inp):
    def quantified(i):
        quantifier = labeled(i, "quantifier", lambda j: enum(j, Quantifier))
        variables = bracket_list1(i, var)
        op(i, ":")
        return ModalQuantified(quantifier, tuple(variables), unitary_modal(i))

    def negated(i):
        op(i, "~")
        return ModalNegated(unitary_modal(i))

    def modaled(i):
        modality = labeled(i, "modality", lambda j: enum(j, Modality))
        op(i, ":")
        return Modaled(modality, unitary_modal(i))

    def unitary_modal(i):
        return unitary(i, ModalAtomic, quantified_modal, negated, quantified, modaled)
    return connected(inp, unitary_modal, ModalConnected)


def tff(inp):
    """A sorted formula, kept polymorphic only if it cannot be monomorphic."""
    formula = polymorphic_first_order(inp)
    monomorphic = monomorphize_first_order(formula)
    if monomorphic is None:
        logger.debug("Sorted formula at %d requires polymorphism", inp.pos)
        return TFF1(formula)
    return TFF0(monomorphic)


def formula(inp, language):
    if language == Language.CNF:
        return labeled(inp, "cnf", lambda i: CNF(clause(i)))
    if language == Language.FOF:
        return labeled(inp, "fof", lambda i: FOF(unsorted_first_order(i)))
    if language == Language.TFF:
        return labeled(inp, "tff", tff)
    if language == Language.QMF:
        return labeled(inp, "qmf", lambda i: QMF(quantified_modal(i)))
    raise ValueError(f"Unknown language: {language}")


# Units

def role(inp):
    return labeled(inp, "role", lambda i: reserved(i, Role))


def language(inp):
    return labeled(inp, "language", lambda i: enum(i, Language))


def type_declaration(inp):
    def arity(i):
        arguments, _ = mapping(i, lambda j: optional_parens(j, lambda k: token(k, QUANTIFIED_SORT)))
        return len(arguments)

    def sort_declaration(i):
        a = atom(i)
        op(i, ":")
        return SortDeclaration(a, optional_parens(i, arity))

    def typing(i):
        a = atom(i)
        op(i, ":")
        return Typing(a, optional_parens(i, type_))
    return labeled(inp, "type declaration",
                   lambda i: choice(i, sort_declaration, typing))


def declaration(inp, language):
    def typed(i):
        token(i, "type")
        return comma(i, lambda j: optional_parens(j, type_declaration))

    def role_formula(i):
        r = role(i)
        return FormulaDeclaration(r, comma(i, lambda j: formula(j, language)))
    return labeled(inp, "declaration", lambda i: choice(i, typed, role_formula))


def unit_name(inp):
    return labeled(inp, "unit name",
                   lambda i: choice(i, atom, lambda j: signed(j, integer)))


def unit_names(inp):
    return labeled(inp, "unit names", lambda i: tuple(bracket_list1(i, unit_name)))


def include(inp):
    def p(i):
        def body(j):
            return Include(atom(j), maybe_comma(j, unit_names))
        result = tagged(i, "include", body)
        op(i, ".")
        return result
    return labeled(inp, "include", p)


def annotated_unit(inp):
    def p(i):
        lang = language(i)

        def body(j):
            n = unit_name(j)
            d = comma(j, lambda k: declaration(k, lang))
            a = maybe_comma(j, annotation)
            return Unit(n, d, a)
        result = parens(i, body)
        op(i, ".")
        return result
    return labeled(inp, "annotated unit", p)


def unit(inp):
    return labeled(inp, "unit", lambda i: choice(i, include, annotated_unit))


def units(inp):
    """Units up to the end of input."""
    result = []
    while not inp.at_end():
        result.append(unit(inp))
    return tuple(result)


def tptp(inp):
    return labeled(inp, "tptp", lambda i: TPTP(units(i)))


def szs(inp):
    """SZS status and dataform from the ``%`` comment lines at the current
    position; the first of each found is kept."""
    summary = SZS()
    skip_space(inp)
    while inp.startswith("%"):
        inp.pos += 1
        comment = read_szs_comment(skip_line(inp))
        if comment is not None:
            summary = summary + comment
        skip_space(inp)
    return summary


def tstp(inp):
    def p(i):
        summary = szs(i)
        skip_whitespace(i)
        return TSTP(summary, units(i))
    return labeled(inp, "tstp", p)


# Annotations

def intro(inp):
    return labeled(inp, "intro", lambda i: reserved(i, Intro))


def info(inp):
    def new_symbols(i):
        a = atom(i)
        symbols = comma(i, lambda j: bracket_list(j, lambda k: choice(k, var, atom)))
        return NewSymbols(a, tuple(symbols))

    def bind(i):
        v = var(i)
        return Bind(v, comma(i, expression))

    def general_application(i):
        return Application(*application(i, atom, info))
    return labeled(inp, "info", lambda i: choice(
        i,
        lambda j: tagged(j, "description", lambda k: Description(atom(k))),
        lambda j: tagged(j, "iquote", lambda k: Iquote(atom(k))),
        lambda j: tagged(j, "status", lambda k: Status(reserved(k, Success))),
        lambda j: tagged(j, "assumptions", lambda k: Assumptions(unit_names(k))),
        lambda j: tagged(j, "refutation", lambda k: Refutation(atom(k))),
        lambda j: tagged(j, "new_symbols", new_symbols),
        lambda j: tagged(j, "bind", bind),
        lambda j: ExpressionInfo(expression(j)),
        general_application,
        lambda j: InfoNumber(number(j)),
        lambda j: Infos(infos(j)),
    ))


def infos(inp):
    return labeled(inp, "infos", lambda i: tuple(bracket_list(i, info)))


def expression(inp):
    def logical(i):
        lang = language(i)
        return Logical(parens(i, lambda j: optional_parens(j, lambda k: formula(k, lang))))

    def p(i):
        char(i, RESERVED_MARKER)
        return choice(
            i,
            lambda j: tagged(j, "fot", lambda k: TermExpression(optional_parens(k, term))),
            logical,
        )
    return labeled(inp, "expression", p)


def parent(inp):
    def parent_infos(i):
        op(i, ":")
        return infos(i)

    def p(i):
        source_ = source(i)
        return Parent(source_, optional(i, parent_infos, ()))
    return labeled(inp, "parent", p)


def source(inp):
    def unknown(i):
        token(i, "unknown")
        return UnknownSource()

    def file_(i):
        return File(atom(i), maybe_comma(i, unit_name))

    def theory(i):
        return Theory(atom(i), maybe_comma(i, infos))

    def creator(i):
        return Creator(atom(i), maybe_comma(i, infos))

    def introduced(i):
        return Introduced(intro(i), maybe_comma(i, infos))

    def inference(i):
        rule = atom(i)
        inference_infos = comma(i, infos)
        parents = comma(i, lambda j: bracket_list(j, parent))
        return Inference(rule, inference_infos, tuple(parents))
    return labeled(inp, "source", lambda i: choice(
        i,
        unknown,
        lambda j: tagged(j, "file", file_),
        lambda j: tagged(j, "theory", theory),
        lambda j: tagged(j, "creator", creator),
        lambda j: tagged(j, "introduced", introduced),
        lambda j: tagged(j, "inference", inference),
        lambda j: UnitSource(unit_name(j)),
    ))


def annotation(inp):
    def p(i):
        source_ = source(i)
        return source_, maybe_comma(i, infos)
    return labeled(inp, "annotation", p)


# Entry points

def parse_atom(text):
    return run(atom, text)


def parse_var(text):
    return run(var, text)


def parse_distinct_object(text):
    return run(distinct_object, text)


def parse_function(text):
    return run(function, text)


def parse_predicate(text):
    return run(predicate, text)


def parse_sort(text):
    return run(sort, text)


def parse_tff1_sort(text):
    return run(tff1_sort, text)


def parse_type(text):
    return run(type_, text)


def parse_number(text):
    return run(number, text)


def parse_term(text):
    return run(term, text)


def parse_literal(text):
    return run(literal, text)


def parse_clause(text):
    return run(clause, text)


def parse_unsorted_first_order(text):
    return run(unsorted_first_order, text)


def parse_monomorphic_first_order(text):
    return run(monomorphic_first_order, text)


def parse_polymorphic_first_order(text):
    return run(polymorphic_first_order, text)


def parse_quantified_modal(text):
    return run(quantified_modal, text)


def parse_formula(language, text):
    """Parse a formula of the given :class:`Language`."""
    return run(lambda i: formula(i, language), text)


def parse_unit(text):
    return run(unit, text)


def parse_tptp(text):
    """Parse a TPTP problem.

    Raises:
        ParseError: If the text is not a sequence of TPTP units.
    """
    logger.debug("Parsing TPTP input of %d characters", len(text))
    problem = run(tptp, text)
    logger.debug("Parsed %d units", len(problem.units))
    return problem


def parse_tstp(text):
    """Parse a TSTP transcript, including the SZS lines before the first unit.

    Raises:
        ParseError: If the text is not a sequence of TSTP units.
    """
    logger.debug("Parsing TSTP input of %d characters", len(text))
    transcript = run(tstp, text, skip_leading=False)
    logger.debug("Parsed %d units, %s", len(transcript.units), transcript.szs)
    return transcript


def parse_szs(text):
    """Read the SZS summary from the ``%`` comment lines of ``text``."""
    inp = Input(text)
    return szs(inp)


def parse_intro(text):
    return run(intro, text)


def parse_info(text):
    return run(info, text)


def parse_parent(text):
    return run(parent, text)


def parse_source(text):
    return run(source, text)


def parse_annotation(text):
    return run(annotation, text)
