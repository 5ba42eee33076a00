"""Unit tests for the relevance weight table."""

import pytest

from resilience_search.search.fields import FieldRole
from resilience_search.search.scoring import (
    MAX_SCORE,
    SCORING_TABLE,
    FieldWeight,
    field_score,
    is_match,
    score_fields,
)


def _fields(**values):
    fields = dict.fromkeys(FieldRole, "")
    fields.update({FieldRole[name.upper()]: value for name, value in values.items()})
    return fields


@pytest.mark.unit
class TestFieldScore:
    def test_no_match_scores_zero(self):
        assert field_score("doral", "miami", FieldWeight(contains_weight=3)) == 0

    def test_contains(self):
        assert field_score("north miami", "miami", FieldWeight(contains_weight=3)) == 3

    def test_prefix_replaces_contains(self):
        weight = FieldWeight(contains_weight=5, prefix_weight=10)

        assert field_score("miami beach", "miami", weight) == 10
        assert field_score("north miami", "miami", weight) == 5

    def test_max_points(self):
        assert FieldWeight(contains_weight=5, prefix_weight=10).max_points == 10
        assert FieldWeight(contains_weight=2).max_points == 2


@pytest.mark.unit
class TestScoringTable:
    @pytest.mark.parametrize(
        ("role", "points"),
        [
            (FieldRole.CITY, 3),
            (FieldRole.DESCRIPTION, 2),
            (FieldRole.INFRASTRUCTURE_TYPE, 2),
            (FieldRole.CATEGORY, 1),
            (FieldRole.DISASTER_FOCUS, 1),
        ],
    )
    def test_contains_weights(self, role, points):
        fields = dict.fromkeys(FieldRole, "")
        fields[role] = "x flood x"

        assert score_fields(fields, "flood") == points

    def test_project_name_weights(self):
        assert score_fields(_fields(project_name="flood wall"), "flood") == 10
        assert score_fields(_fields(project_name="sea flood wall"), "flood") == 5

    def test_maximum_score(self):
        fields = dict.fromkeys(FieldRole, "flood")

        assert score_fields(fields, "flood") == MAX_SCORE == 19

    def test_table_covers_every_role(self):
        assert set(SCORING_TABLE) == set(FieldRole)

    def test_custom_table(self):
        table = {FieldRole.CATEGORY: FieldWeight(contains_weight=7)}

        assert score_fields(_fields(category="flood", city="flood"), "flood", table=table) == 7

    def test_missing_roles_score_zero(self):
        assert score_fields({FieldRole.CITY: "doral"}, "doral") == 3


@pytest.mark.unit
def test_is_match():
    assert is_match(_fields(category="water management"), "water")
    assert not is_match(_fields(), "water")
