"""Tests for core.annotations and core.units modules."""

import pytest

from pytptp.core.annotations import (
    SZS, Assumptions, Dataform, Inference, Intro, NoSuccess, Parent, Success,
    UnitSource, ontology_table,
)
from pytptp.core.logic import CNF, FOF, Atomic, PredicateLiteral, clause
from pytptp.core.names import Atom, Language, Role, Standard
from pytptp.core.sorts import Sort, Type
from pytptp.core.units import (
    TPTP, TSTP, FormulaDeclaration, Include, SortDeclaration, Typing, Unit,
    declaration_language,
)


class TestSZSVocabularies:
    """Test the SZS status and dataform vocabularies."""

    def test_sizes(self):
        assert len(Success) == 34
        assert len(NoSuccess) == 23
        assert len(Dataform) == 42

    def test_code_and_ontology(self):
        assert Success.THM.canonical == "thm"
        assert Success.THM.ontology == "Theorem"
        assert Dataform.CRF.canonical == "CRf"
        assert Dataform.CRF.ontology == "CNFRefutation"

    def test_from_ontology(self):
        assert Success.from_ontology("CounterSatisfiable") is Success.CSA
        assert NoSuccess.from_ontology("GaveUp") is NoSuccess.GUP
        assert Dataform.from_ontology("Refutation") is Dataform.REF
        assert Success.from_ontology("GaveUp") is None

    def test_from_canonical_uses_code(self):
        assert Success.from_canonical("cth") is Success.CTH
        assert Dataform.from_canonical("Prf") is Dataform.PRF

    def test_ontology_table_longest_first(self):
        lengths = [len(name) for name, _ in ontology_table(Dataform)]
        assert lengths == sorted(lengths, reverse=True)

    def test_intro(self):
        assert Intro.from_canonical("axiom_of_choice") is Intro.BY_AXIOM_OF_CHOICE


class TestSZS:
    """Test merging of SZS summaries."""

    def test_empty(self):
        assert SZS() == SZS(None, None)

    def test_first_status_wins(self):
        merged = SZS(status=Success.THM) + SZS(status=NoSuccess.TMO)
        assert merged.status is Success.THM

    def test_fills_missing_fields(self):
        merged = SZS(status=Success.THM) + SZS(dataform=Dataform.CRF)
        assert merged == SZS(Success.THM, Dataform.CRF)


class TestInfoAndSources:
    """Test validation of info records and sources."""

    def test_assumptions_require_names(self):
        with pytest.raises(ValueError):
            Assumptions(())
        assert Assumptions([Atom("a"), 3]).names == (Atom("a"), 3)

    def test_inference(self):
        inference = Inference(Atom("resolution"), [], [Parent(UnitSource(1)), Parent(UnitSource(2))])
        assert inference.infos == ()
        assert len(inference.parents) == 2
        assert inference.parents[0].infos == ()


class TestUnits:
    """Test declarations, units and documents."""

    def test_sort_declaration_arity(self):
        assert SortDeclaration(Atom("list"), 1).arity == 1
        with pytest.raises(ValueError):
            SortDeclaration(Atom("list"), -1)

    def test_include_selection(self):
        assert Include(Atom("Axioms/SET001-0.ax")).selection is None
        assert Include(Atom("f"), [Atom("a")]).selection == (Atom("a"),)
        with pytest.raises(ValueError):
            Include(Atom("f"), [])

    def test_declaration_language(self):
        p = clause([])
        assert declaration_language(FormulaDeclaration(Standard(Role.AXIOM), CNF(p))) == Language.CNF
        typing = Typing(Atom("f"), Type((), Standard(Sort.INT)))
        assert declaration_language(typing) == Language.TFF
        assert Unit(Atom("t"), typing).language == Language.TFF

    def test_tptp_concatenation(self):
        fof = FOF(Atomic(PredicateLiteral(Atom("p"))))
        first = TPTP([Unit(Atom("a"), FormulaDeclaration(Standard(Role.AXIOM), fof))])
        second = TPTP([Include(Atom("b"))])
        both = first + second
        assert len(both) == 2
        assert list(both) == list(first.units) + list(second.units)

    def test_tstp_defaults(self):
        tstp = TSTP()
        assert tstp.szs == SZS()
        assert len(tstp) == 0
