from typing import List, Sequence

from fixturedesk.models.fixture_model import Match, MatchStatus

def generate_round_robin_matches(
    player_ids: Sequence[str],
    category: str,
    tournament_type: str,
    group_name: str,
) -> List[Match]:
    """Every member plays every other member once: m * (m - 1) / 2 matches in member order."""
    matches: List[Match] = []
    for i in range(len(player_ids)):
        for j in range(i + 1, len(player_ids)):
            matches.append(Match(
                category=category,
                tournament_type=tournament_type,
                group_name=group_name,
                player1_id=player_ids[i],
                player2_id=player_ids[j],
                status=MatchStatus.SCHEDULED,
            ))
    return matches
