import pytest

from fixturedesk.models.fixture_model import MatchStatus
from fixturedesk.services.pairing_service import generate_round_robin_matches

class TestGenerateRoundRobinMatches:

    @pytest.mark.parametrize("size, expected", [(0, 0), (1, 0), (2, 1), (4, 6), (5, 10), (6, 15)])
    def test_match_count(self, size, expected):
        player_ids = [f"p{i}" for i in range(size)]
        matches = generate_round_robin_matches(player_ids, "Open", "Singles", "Group A")
        assert len(matches) == expected

    def test_every_pair_plays_once_in_member_order(self):
        matches = generate_round_robin_matches(["a", "b", "c"], "Open", "Singles", "Group A")

        assert [(m.player1_id, m.player2_id) for m in matches] == [("a", "b"), ("a", "c"), ("b", "c")]

    def test_new_matches_are_scheduled_and_unscored(self):
        matches = generate_round_robin_matches(["a", "b", "c", "d"], "40+", "Doubles", "Group B")

        for match in matches:
            assert match.status == MatchStatus.SCHEDULED.value
            assert match.score1 is None and match.score2 is None
            assert match.outcome is None
            assert match.history == []
            assert match.category == "40+"
            assert match.tournament_type == "Doubles"
            assert match.group_name == "Group B"
            assert match.player1_id != match.player2_id
        assert len({m.id for m in matches}) == len(matches)
