import json

import pytest

from domain.models import MatchStatus, Role
from domain.policies import ValuationPolicies
from domain.validators import is_blank, validate_matches, validate_news, validate_players
from services.repository import ClubRepository


def test_stored_player_shape_is_valid():
    raw = [{"id": "a1", "name": "Ali Awada", "photo": "", "role": "DEF", "goals": 0, "assists": 0,
            "matches": 2, "motmCount": 0, "hattrickCount": 0, "cleanSheetCount": 1}]
    recs = validate_players(raw)
    assert recs[0].role == Role.DEF
    assert recs[0].cleanSheetCount == 1


def test_match_defaults_fill_missing_fields():
    recs = validate_matches([{"id": "m1", "date": "2025-03-01", "status": "played"}])
    assert recs[0].status == MatchStatus.PLAYED
    assert recs[0].teamA == [] and recs[0].applied == {}


def test_invalid_records_raise_value_error():
    with pytest.raises(ValueError):
        validate_players([{"id": "a1", "name": "Ali", "goals": "many"}])
    with pytest.raises(ValueError):
        validate_news([{"id": "n1"}])


def test_blank_detection():
    assert is_blank("") and is_blank("   ") and is_blank(None)
    assert not is_blank("Derby day")


def test_corrupt_players_file_is_reported(tmp_path):
    (tmp_path / "players.json").write_text(json.dumps([{"name": "no id"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        ClubRepository(tmp_path).load_players()


def test_policy_overrides_are_loaded(tmp_path):
    (tmp_path / "policies.json").write_text(
        json.dumps({"assistWeight": 1.0, "motmBonus": 1.5, "scoreDecimals": 3, "valueDecimals": 2}),
        encoding="utf-8",
    )
    pol = ClubRepository(tmp_path).load_policies()
    assert pol.assistWeight == 1.0
    assert pol.motmBonus == 1.5
    assert pol.hattrickBonus == 0.3
    assert (pol.scoreDecimals, pol.valueDecimals) == (3, 2)


def test_missing_or_malformed_policies_fall_back_to_defaults(tmp_path):
    repo = ClubRepository(tmp_path)
    assert repo.load_policies() == ValuationPolicies()
    (tmp_path / "policies.json").write_text("[]", encoding="utf-8")
    assert repo.load_policies() == ValuationPolicies()
    (tmp_path / "policies.json").write_text("{not json", encoding="utf-8")
    assert repo.load_policies() == ValuationPolicies()
