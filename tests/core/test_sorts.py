"""Tests for core.sorts module."""

from pytptp.core.names import Atom, Standard, Var
from pytptp.core.sorts import (
    Sort, SortApplication, SortVariable, TFF1Type, Type,
    monomorphize_tff1_sort, tff1_type,
)


INT = Standard(Sort.INT)
A = Var("A")


class TestMonomorphizeSort:
    """Test conversion of TFF1 sorts to plain sort names."""

    def test_zero_arity_application(self):
        assert monomorphize_tff1_sort(SortApplication(INT)) == INT

    def test_application_with_arguments(self):
        sort = SortApplication(Atom("list"), [SortApplication(INT)])
        assert monomorphize_tff1_sort(sort) is None

    def test_sort_variable(self):
        assert monomorphize_tff1_sort(SortVariable(A)) is None


class TestTypeConstructor:
    """Test that types are built in the simplest representation."""

    def test_monomorphic(self):
        t = tff1_type([], [SortApplication(INT)], SortApplication(INT))
        assert t == Type((INT,), INT)
        assert isinstance(t, Type)

    def test_constant_type(self):
        assert tff1_type([], [], SortApplication(Atom("nat"))) == Type((), Atom("nat"))

    def test_quantified_stays_polymorphic(self):
        t = tff1_type([A], [SortVariable(A)], SortVariable(A))
        assert isinstance(t, TFF1Type)
        assert t.variables == (A,)

    def test_sort_argument_stays_polymorphic(self):
        list_int = SortApplication(Atom("list"), [SortApplication(INT)])
        t = tff1_type([], [list_int], SortApplication(INT))
        assert t == TFF1Type((), (list_int,), SortApplication(INT))

    def test_fields_are_tuples(self):
        t = Type([INT, INT], INT)
        assert t.arguments == (INT, INT)
        assert hash(t) == hash(Type((INT, INT), INT))
