"""
Unit tests for the root table and the rule engine.
"""
import json

import pytest

from morphdisambig.analysis import CandidateSet, build_lattice
from morphdisambig.errors import EmptyLatticeError, MissingRootFileError, UnreachableStateError
from morphdisambig.longest_root import RuleEngine
from morphdisambig.root_table import RootTable
from morphdisambig.trace import DisambiguationTrace

KITABIN = ("kitabın", [
    "kit+NOUN+A3SG+PNON+NOM",
    "kitap+NOUN+A3SG+P2SG+NOM",
    "kitap+NOUN+A3SG+PNON+GEN",
])


class TestRootTable:

    def test_from_file_skips_malformed_lines(self, tmp_path):
        path = tmp_path / "rootlist.txt"
        path.write_text("kitabın kitap\nbozuk satır burada\n\nmasalar masa\ntek\n", encoding="utf-8")
        table = RootTable.from_file(path)
        assert len(table) == 2
        assert table.get("kitabın") == "kitap"
        assert table.get("masalar") == "masa"
        assert table.get("tek") is None
        assert "bozuk" not in table

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingRootFileError) as excinfo:
            RootTable.from_file(tmp_path / "missing.txt")
        assert isinstance(excinfo.value, FileNotFoundError)
        assert excinfo.value.path == tmp_path / "missing.txt"


class TestRuleEngine:

    def test_missing_root_list_is_fatal(self, tmp_path):
        with pytest.raises(MissingRootFileError):
            RuleEngine(root_list_path=tmp_path / "missing.txt")

    def test_loads_root_list_from_path(self, tmp_path):
        path = tmp_path / "rootlist.txt"
        path.write_text("kitabın kit\n", encoding="utf-8")
        engine = RuleEngine(root_list_path=path)
        assert engine.root_table.get("kitabın") == "kit"

    def test_table_root_is_used_when_available(self):
        engine = RuleEngine(RootTable({"kitabın": "kit"}))
        result = engine.disambiguate(build_lattice([KITABIN]))
        assert result[0].transition_list == "kit+NOUN+A3SG+PNON+NOM"

    def test_longest_root_when_table_has_no_entry(self):
        engine = RuleEngine(RootTable())
        result = engine.disambiguate(build_lattice([KITABIN]))
        assert result[0].root == "kitap"

    def test_table_root_missing_from_candidates_falls_back(self):
        engine = RuleEngine(RootTable({"kitabın": "kitap"}))
        lattice = build_lattice([("kitabın", ["kit+NOUN+A3SG+PNON+NOM", "kita+NOUN+A3SG+P2SG+NOM"])])
        result = engine.disambiguate(lattice)
        assert result[0].root == "kita"

    def test_longest_root_when_table_root_is_not_a_candidate(self):
        engine = RuleEngine(RootTable({"kitabın": "kita"}))
        result = engine.disambiguate(build_lattice([KITABIN]))
        assert result[0].root == "kitap"

    def test_chosen_analysis_has_selected_root(self):
        engine = RuleEngine(RootTable())
        lattice = build_lattice([
            ("Bu", ["bu+DET", "bu+PRON+DEMONSP+A3SG+PNON+NOM"]),
            KITABIN,
            ("yüz", ["yüz+NOUN+A3SG+PNON+NOM", "yüz+NUM+CARD", "yüz+VERB+POS+IMP+A2SG"]),
            (".", [".+PUNC"]),
        ])
        roots = [engine.select_root(candidates) for candidates in lattice]
        result = engine.disambiguate(lattice)
        assert len(result) == 4
        assert [a.root for a in result] == roots

    def test_sentence(self):
        engine = RuleEngine(RootTable())
        lattice = build_lattice([
            ("Senin", ["sen+PRON+PERS+A2SG+PNON+GEN"]),
            KITABIN,
            (".", [".+PUNC"]),
        ])
        result = engine.disambiguate(lattice)
        assert [a.transition_list for a in result] == [
            "sen+PRON+PERS+A2SG+PNON+GEN",
            "kitap+NOUN+A3SG+P2SG+NOM",
            ".+PUNC",
        ]

    def test_lattice_is_narrowed_in_place(self):
        engine = RuleEngine(RootTable())
        lattice = build_lattice([KITABIN])
        engine.disambiguate(lattice)
        assert lattice[0].roots() == ["kitap", "kitap"]

    def test_train_is_a_no_op(self, training_corpus):
        engine = RuleEngine(RootTable())
        engine.train(training_corpus)
        assert len(engine.root_table) == 0

    @pytest.mark.parametrize("lattice", [None, []])
    def test_empty_lattice(self, lattice):
        with pytest.raises(EmptyLatticeError):
            RuleEngine(RootTable()).disambiguate(lattice)

    def test_empty_candidate_set(self):
        lattice = build_lattice([KITABIN])
        lattice.append(CandidateSet([]))
        with pytest.raises(UnreachableStateError):
            RuleEngine(RootTable()).disambiguate(lattice)


class TestRuleEngineTrace:

    def test_one_step_per_position(self):
        lattice = build_lattice([("ancak", ["ancak+ADV", "ancak+CONJ"]), (".", [".+PUNC"])])
        trace = DisambiguationTrace(sentence=["ancak", "."])
        RuleEngine(RootTable()).disambiguate(lattice, trace=trace)

        assert len(trace.steps) == 2
        first = trace.steps[0]
        assert first["inputs"]["ambiguity"] == "ADV$CONJ"
        assert first["outputs"]["analysis"] == "ancak+CONJ"
        assert first["outputs"]["by_rule"] is True
        assert trace.steps[1]["outputs"]["by_rule"] is False
        assert trace.result == ["ancak+CONJ", ".+PUNC"]
        assert json.loads(trace.to_json())["result"] == ["ancak+CONJ", ".+PUNC"]

    def test_error_is_recorded(self):
        trace = DisambiguationTrace(sentence=[])
        with pytest.raises(EmptyLatticeError):
            RuleEngine(RootTable()).disambiguate([], trace=trace)
        assert trace.error is not None
        assert trace.end_time is not None
