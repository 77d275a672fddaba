"""Tests for core.logic module."""

import unittest
from decimal import Decimal

from pytptp.core.logic import (
    FALSUM, Atomic, Clause, Connected, Equality, FunctionTerm, IntegerConstant,
    Negated, NumberTerm, PredicateLiteral, Quantified, QuantifiedSort,
    RationalConstant, RealConstant, Sorted, Unsorted, VariableTerm,
    ModalQuantified, CNF, FOF, TFF0, TFF1, QMF, ModalAtomic,
    clause, formula_language, map_annotations, monomorphize_first_order,
    polymorphize_first_order, quantified, reassociate, sort_first_order,
    traverse_annotations, unit_clause, unsort_first_order,
)
from pytptp.core.names import (
    Atom, Connective, Language, Predicate, Quantifier, Sign, Standard, Var,
)
from pytptp.core.sorts import Sort, SortApplication, SortVariable


X = Var("X")
Y = Var("Y")
INT = Standard(Sort.INT)


def prop(name):
    return Atomic(PredicateLiteral(Atom(name)))


class TestNumbers(unittest.TestCase):
    """Test numeric constants."""

    def test_integer(self):
        self.assertEqual(IntegerConstant(-3).value, -3)

    def test_rational_is_not_reduced(self):
        r = RationalConstant(2, 4)
        self.assertEqual((r.numerator, r.denominator), (2, 4))
        self.assertNotEqual(r, RationalConstant(1, 2))

    def test_rational_denominator_must_be_positive(self):
        with self.assertRaises(ValueError):
            RationalConstant(1, 0)
        with self.assertRaises(ValueError):
            RationalConstant(1, -2)

    def test_real_keeps_form(self):
        self.assertEqual(str(RealConstant(Decimal("1.50"))), "1.50")


class TestClauses(unittest.TestCase):
    """Test clause construction."""

    def setUp(self):
        self.p = (Sign.POSITIVE, PredicateLiteral(Atom("p")))
        self.q = (Sign.NEGATIVE, PredicateLiteral(Atom("q")))

    def test_empty_clause_is_falsum(self):
        self.assertEqual(clause([]), Clause(((Sign.POSITIVE, FALSUM),)))
        self.assertEqual(FALSUM.name, Standard(Predicate.FALSUM))

    def test_clause_constructor_rejects_empty(self):
        with self.assertRaises(ValueError):
            Clause(())

    def test_concatenation(self):
        c = unit_clause(self.p) + unit_clause(self.q)
        self.assertEqual(c, clause([self.p, self.q]))
        self.assertEqual(len(c), 2)
        self.assertEqual(list(c), [self.p, self.q])

    def test_literals_are_tuple(self):
        c = Clause([self.p])
        self.assertIsInstance(c.literals, tuple)


class TestTerms(unittest.TestCase):
    """Test terms and literals."""

    def test_function_term_arguments(self):
        t = FunctionTerm(Atom("f"), [VariableTerm(X), NumberTerm(IntegerConstant(1))])
        self.assertEqual(len(t.arguments), 2)
        self.assertEqual(t, FunctionTerm(Atom("f"), (VariableTerm(X), NumberTerm(IntegerConstant(1)))))

    def test_equality(self):
        e = Equality(VariableTerm(X), Sign.NEGATIVE, VariableTerm(Y))
        self.assertEqual(e.sign, Sign.NEGATIVE)


class TestQuantified(unittest.TestCase):
    """Test quantified formulas."""

    def test_requires_variables(self):
        with self.assertRaises(ValueError):
            Quantified(Quantifier.FORALL, (), prop("p"))
        with self.assertRaises(ValueError):
            ModalQuantified(Quantifier.EXISTS, (), ModalAtomic(PredicateLiteral(Atom("p"))))

    def test_smart_constructor_drops_empty_quantifier(self):
        self.assertEqual(quantified(Quantifier.FORALL, [], prop("p")), prop("p"))

    def test_smart_constructor(self):
        f = quantified(Quantifier.EXISTS, [(X, Unsorted())], prop("p"))
        self.assertEqual(f, Quantified(Quantifier.EXISTS, ((X, Unsorted()),), prop("p")))


class TestSortConversions(unittest.TestCase):
    """Test conversions between unsorted, monomorphic and polymorphic formulas."""

    def test_sort_and_unsort(self):
        f = Quantified(Quantifier.FORALL, [(X, Unsorted())], Negated(prop("p")))
        sorted_f = sort_first_order(f)
        self.assertEqual(sorted_f.variables, ((X, Sorted(None)),))
        self.assertEqual(unsort_first_order(sorted_f), f)

    def test_unsort_fails_on_explicit_sort(self):
        f = Quantified(Quantifier.FORALL, [(X, Sorted(INT))], prop("p"))
        self.assertIsNone(unsort_first_order(f))

    def test_polymorphize_and_monomorphize(self):
        f = Quantified(Quantifier.FORALL, [(X, Sorted(INT)), (Y, Sorted(None))], prop("p"))
        poly = polymorphize_first_order(f)
        self.assertEqual(poly.variables,
                         ((X, Sorted(SortApplication(INT))), (Y, Sorted(None))))
        self.assertEqual(monomorphize_first_order(poly), f)

    def test_monomorphize_fails_on_sort_quantifier(self):
        f = Quantified(Quantifier.FORALL, [(X, Sorted(QuantifiedSort()))],
                       Quantified(Quantifier.FORALL, [(Y, Sorted(SortVariable(X)))], prop("p")))
        self.assertIsNone(monomorphize_first_order(f))

    def test_monomorphize_fails_on_sort_application(self):
        list_int = SortApplication(Atom("list"), [SortApplication(INT)])
        f = Connected(prop("q"), Connective.CONJUNCTION,
                      Quantified(Quantifier.FORALL, [(X, Sorted(list_int))], prop("p")))
        self.assertIsNone(monomorphize_first_order(f))

    def test_map_annotations(self):
        f = Negated(Quantified(Quantifier.FORALL, [(X, 1)], prop("p")))
        self.assertEqual(map_annotations(lambda a: a + 1, f),
                         Negated(Quantified(Quantifier.FORALL, [(X, 2)], prop("p"))))

    def test_traverse_annotations_short_circuits(self):
        f = Connected(Quantified(Quantifier.FORALL, [(X, 1)], prop("p")),
                      Connective.DISJUNCTION,
                      Quantified(Quantifier.FORALL, [(X, 2)], prop("q")))
        seen = []

        def only_one(a):
            seen.append(a)
            return None if a == 1 else a
        self.assertIsNone(traverse_annotations(only_one, f))
        self.assertEqual(seen, [1])


class TestReassociate(unittest.TestCase):
    """Test left-nesting of associative connectives."""

    def test_conjunction_chain(self):
        p, q, r = prop("p"), prop("q"), prop("r")
        right_nested = Connected(p, Connective.CONJUNCTION,
                                 Connected(q, Connective.CONJUNCTION, r))
        left_nested = Connected(Connected(p, Connective.CONJUNCTION, q),
                                Connective.CONJUNCTION, r)
        self.assertEqual(reassociate(right_nested), left_nested)

    def test_non_associative_untouched(self):
        p, q, r = prop("p"), prop("q"), prop("r")
        f = Connected(p, Connective.IMPLICATION, Connected(q, Connective.IMPLICATION, r))
        self.assertEqual(reassociate(f), f)

    def test_mixed_connectives_untouched(self):
        p, q, r = prop("p"), prop("q"), prop("r")
        f = Connected(p, Connective.CONJUNCTION, Connected(q, Connective.DISJUNCTION, r))
        self.assertEqual(reassociate(f), f)


class TestFormulaLanguage(unittest.TestCase):
    """Test the language of tagged formulas."""

    def test_languages(self):
        self.assertEqual(formula_language(CNF(clause([]))), Language.CNF)
        self.assertEqual(formula_language(FOF(prop("p"))), Language.FOF)
        self.assertEqual(formula_language(TFF0(prop("p"))), Language.TFF)
        self.assertEqual(formula_language(TFF1(prop("p"))), Language.TFF)
        self.assertEqual(formula_language(QMF(ModalAtomic(PredicateLiteral(Atom("p"))))),
                         Language.QMF)


if __name__ == '__main__':
    unittest.main()
