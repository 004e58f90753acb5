# tests/test_cli.py
import json

import pytest

from morphology.cli import main, parse_dimensions

DOCUMENT = {
    "grammar": {
        "typology": {"morphological_type": "agglutinative"},
        "affix_slots": [
            {"slot_id": "num", "position": 1, "dimension_id": "number", "label": "NUM"},
            {"slot_id": "neg", "position": -1, "dimension_id": "polarity", "label": "NEG"},
        ],
        "inflection_rules": [
            {"rule_id": "pl", "pos_id": "noun", "slot_id": "num", "dimension_values": {"number": "pl"},
             "type": "suffix", "affix": "-lar", "tag": "PL"},
            {"rule_id": "neg", "pos_id": "noun", "slot_id": "neg", "dimension_values": {"polarity": "neg"},
             "type": "prefix", "affix": "na-", "tag": "NEG"},
        ],
        "derivation_rules": [
            {"rule_id": "agent", "source_pos_id": "verb", "target_pos_id": "noun", "type": "suffix", "affix": "-ci"},
        ],
    },
    "phonology": {"consonants": ["k", "t", "l", "r", "n"], "vowels": ["a", "e", "i"]},
}


@pytest.fixture
def grammar_file(tmp_path):
    path = tmp_path / "grammar.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    return str(path)


def test_parse_dimensions() -> None:
    assert parse_dimensions(["number=pl", " case = acc "]) == {"number": "pl", "case": "acc"}
    with pytest.raises(SystemExit):
        parse_dimensions(["number"])


def test_inflect_command(grammar_file, capsys) -> None:
    with pytest.raises(SystemExit) as exit_info:
        main(["inflect", "-i", grammar_file, "--word", "kitap", "--pos", "noun",
              "--dim", "number=pl", "--dim", "polarity=neg", "--trace"])
    assert exit_info.value.code == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "nakitaplar"
    assert "slot[NEG]" in captured.err


def test_inflect_command_unchanged_word_is_not_an_error(grammar_file, capsys) -> None:
    with pytest.raises(SystemExit) as exit_info:
        main(["inflect", "-i", grammar_file, "--word", "kitap", "--pos", "noun", "--json"])
    assert exit_info.value.code == 0
    record = json.loads(capsys.readouterr().out)
    assert record["result"] == "kitap"
    assert record["applied"] is False


def test_paradigm_command_json(grammar_file, capsys) -> None:
    with pytest.raises(SystemExit):
        main(["paradigm", "-i", grammar_file, "--word", "kitap", "--pos", "noun", "--json"])
    cells = json.loads(capsys.readouterr().out)
    assert [c["result"] for c in cells] == ["kitaplar", "nakitap"]


def test_derive_command(grammar_file, capsys) -> None:
    with pytest.raises(SystemExit):
        main(["derive", "-i", grammar_file, "--rule-id", "agent", "--word", "yaz", "--word", "oku"])
    assert capsys.readouterr().out.splitlines() == ["yaz\tyazci", "oku\tokuci"]


def test_derive_unknown_rule(grammar_file) -> None:
    with pytest.raises(SystemExit) as exit_info:
        main(["derive", "-i", grammar_file, "--rule-id", "nope", "--word", "yaz"])
    assert "no derivation rule" in str(exit_info.value.code)
