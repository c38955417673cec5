"""
Fixture reducers over the tournament aggregate.

Every function here takes the current TournamentData (or its fixture list)
and returns a new value. Inputs are never mutated, so a failed call leaves
the caller's aggregate exactly as it was.
"""
import logging
import random
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from fixturedesk.core.exceptions import FixtureImportError, FixtureValidationError
from fixturedesk.models.fixture_model import CategoryFixture, Group, Match, MatchOutcome, MatchStatus
from fixturedesk.models.tournament_model import TournamentData
from fixturedesk.services.grouping_service import group_players
from fixturedesk.services.match_service import AUTO_COMPLETED
from fixturedesk.services.pairing_service import generate_round_robin_matches

logger = logging.getLogger(__name__)

def _replace_fixture(fixtures: List[CategoryFixture], new_fixture: CategoryFixture) -> List[CategoryFixture]:
    kept = [f for f in fixtures if f.key != new_fixture.key]
    return kept + [new_fixture]

def fixtures_for(data: TournamentData, category: Optional[str] = None,
                 tournament_type: Optional[str] = None) -> List[CategoryFixture]:
    return [
        f for f in data.fixtures
        if (category is None or f.category == category)
        and (tournament_type is None or f.tournament_type == tournament_type)
    ]

def find_match(data: TournamentData, match_id: str) -> Optional[Match]:
    for fixture in data.fixtures:
        for match in fixture.matches:
            if match.id == match_id:
                return match
    return None

def generate_fixtures(
    data: TournamentData,
    category: str,
    tournament_type: str,
    min_group_size: int,
    max_group_size: int,
    rng: Optional[random.Random] = None,
) -> TournamentData:
    """
    Groups every player registered in `category` and pairs each group round robin.
    Any existing fixture for (category, tournament_type) is replaced.
    """
    if category not in data.settings.categories:
        raise FixtureValidationError(f"Category '{category}' is not defined in the tournament settings.")
    if tournament_type not in data.settings.types:
        raise FixtureValidationError(
            f"Tournament type '{tournament_type}' is not defined in the tournament settings."
        )

    eligible_ids = [p.id for p in data.players if category in p.categories]
    groups = group_players(eligible_ids, min_group_size, max_group_size, rng=rng)

    matches: List[Match] = []
    for group in groups:
        matches.extend(generate_round_robin_matches(group.player_ids, category, tournament_type, group.name))

    fixture = CategoryFixture(category=category, tournament_type=tournament_type, groups=groups, matches=matches)
    logger.info(
        "Generated %d groups and %d matches for %s / %s",
        len(groups), len(matches), category, tournament_type,
    )
    return data.model_copy(update={"fixtures": _replace_fixture(data.fixtures, fixture)})

def _normalise_uploaded_result(index: int, match: Dict[str, Any]) -> None:
    """Stores walkovers and disqualifications as completed matches with their canonical scores."""
    status = match.get("status")
    if status in AUTO_COMPLETED:
        score1, score2, outcome = AUTO_COMPLETED[status]
        match.update(score1=score1, score2=score2, status=MatchStatus.COMPLETED.value, outcome=outcome.value)
    elif status == MatchStatus.COMPLETED.value:
        if match.get("score1") is None or match.get("score2") is None:
            raise FixtureImportError(
                f"Fixture #{index + 1} contains a completed match without scores for both players."
            )
        if match.get("outcome") is None:
            match["outcome"] = MatchOutcome.REGULAR.value

def _validate_uploaded_item(index: int, item: Any) -> Dict[str, Any]:
    if not isinstance(item, dict):
        raise FixtureImportError(f"Fixture #{index + 1} is not an object.")

    category = item.get("category")
    tournament_type = item.get("tournamentType", item.get("tournament_type"))
    if not isinstance(category, str) or not category.strip():
        raise FixtureImportError(f"Fixture #{index + 1} is missing a category.")
    if not isinstance(tournament_type, str) or not tournament_type.strip():
        raise FixtureImportError(f"Fixture #{index + 1} is missing a tournamentType.")
    if not isinstance(item.get("groups"), list) or not isinstance(item.get("matches"), list):
        raise FixtureImportError(f"Fixture #{index + 1} must have 'groups' and 'matches' lists.")

    matches = []
    for match in item["matches"]:
        if not isinstance(match, dict):
            raise FixtureImportError(f"Fixture #{index + 1} contains a match that is not an object.")
        normalised = dict(match)
        if normalised.get("history") is None:
            normalised["history"] = []
        if not normalised.get("category"):
            normalised["category"] = category
        if not (normalised.get("tournamentType") or normalised.get("tournament_type")):
            normalised["tournamentType"] = tournament_type
        _normalise_uploaded_result(index, normalised)
        matches.append(normalised)

    return {
        "category": category,
        "tournamentType": tournament_type,
        "groups": item["groups"],
        "matches": matches,
    }

def upload_custom_fixtures(data: TournamentData, raw_fixtures: Any) -> TournamentData:
    """
    Imports externally prepared fixtures.

    The document must be a list of {category, tournamentType, groups, matches}.
    Any malformed item rejects the whole upload. Each imported fixture
    replaces an existing one with the same (category, tournamentType).
    """
    if not isinstance(raw_fixtures, list):
        raise FixtureImportError(
            "Invalid custom fixture format: expected a list of "
            "{ category, tournamentType, groups: [], matches: [] }."
        )

    items = [_validate_uploaded_item(i, item) for i, item in enumerate(raw_fixtures)]
    try:
        uploaded = [CategoryFixture.model_validate(item) for item in items]
    except ValidationError as e:
        raise FixtureImportError(f"Invalid custom fixture data: {e}") from e

    fixtures = list(data.fixtures)
    for fixture in uploaded:
        fixtures = _replace_fixture(fixtures, fixture)

    logger.info("Imported %d custom fixture(s)", len(uploaded))
    return data.model_copy(update={"fixtures": fixtures})

def remove_player_from_fixtures(
    fixtures: List[CategoryFixture], player_id: str, min_group_size: int
) -> List[CategoryFixture]:
    """
    Removes a deleted player from every fixture.

    Groups that fall below `min_group_size` are dropped, matches that involved
    the player are dropped, and fixtures left without any group are dropped.
    """
    result: List[CategoryFixture] = []
    for fixture in fixtures:
        groups: List[Group] = []
        for group in fixture.groups:
            remaining = [pid for pid in group.player_ids if pid != player_id]
            if len(remaining) >= min_group_size:
                groups.append(group.model_copy(update={"player_ids": remaining}))

        if not groups:
            logger.info(
                "Dropping fixture %s / %s after removing player %s",
                fixture.category, fixture.tournament_type, player_id,
            )
            continue

        matches = [m for m in fixture.matches if not m.involves(player_id)]
        result.append(fixture.model_copy(update={"groups": groups, "matches": matches}))
    return result
