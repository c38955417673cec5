"""
Score entry and status changes for a single match.

apply_match_update is the only way a match's score or status changes. It
coerces the input, applies the special statuses (walkover, disqualification),
validates the result and appends an audit entry when something changed.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Any, List, Optional

from fixturedesk.core.exceptions import MatchNotFoundError, MatchValidationError
from fixturedesk.models.fixture_model import Match, MatchHistoryEntry, MatchOutcome, MatchStatus
from fixturedesk.models.tournament_model import TournamentData

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("score1", "score2", "status")

# Status requested -> (score1, score2, outcome) stored with status COMPLETED
AUTO_COMPLETED = {
    MatchStatus.WALKOVER_P1.value: (1, 0, MatchOutcome.WALKOVER_P1),
    MatchStatus.WALKOVER_P2.value: (0, 1, MatchOutcome.WALKOVER_P2),
    MatchStatus.DISQUALIFIED.value: (0, 0, MatchOutcome.DISQUALIFIED),
}

def coerce_score(value: Any) -> Optional[int]:
    """None, "" or anything non-numeric -> unset; numbers truncate toward zero and clamp at 0."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return max(0, int(number))

def _status_value(status: Any) -> str:
    return status.value if isinstance(status, MatchStatus) else str(status)

def _outcome_value(outcome: Any) -> Optional[str]:
    if outcome is None:
        return None
    return outcome.value if isinstance(outcome, MatchOutcome) else str(outcome)

def apply_match_update(
    match: Match,
    field: str,
    value: Any,
    changed_by: str = "Admin",
    now: Optional[datetime] = None,
) -> Match:
    """
    Returns a copy of `match` with `field` ("score1", "score2" or "status") updated.

    Raises MatchValidationError for an unknown field or status, or when the
    result would be a completed match without both scores. The input match
    is never modified.
    """
    if field not in UPDATABLE_FIELDS:
        raise MatchValidationError(f"Cannot update field '{field}'. Expected one of {', '.join(UPDATABLE_FIELDS)}.")

    old_score1, old_score2 = match.score1, match.score2
    old_status = _status_value(match.status)
    old_outcome = _outcome_value(match.outcome)

    new_score1, new_score2 = old_score1, old_score2
    new_status = old_status
    new_outcome = old_outcome

    if field == "score1":
        new_score1 = coerce_score(value)
    elif field == "score2":
        new_score2 = coerce_score(value)
    else:
        requested = _status_value(value).strip() if value is not None else ""
        valid_statuses = [s.value for s in MatchStatus]
        if requested not in valid_statuses:
            raise MatchValidationError(
                f"Unknown match status '{requested}'. Expected one of {', '.join(valid_statuses)}."
            )

        if requested in AUTO_COMPLETED:
            new_score1, new_score2, outcome = AUTO_COMPLETED[requested]
            new_status = MatchStatus.COMPLETED.value
            new_outcome = outcome.value
        elif requested in (MatchStatus.SCHEDULED.value, MatchStatus.IN_PROGRESS.value):
            new_score1, new_score2 = None, None
            new_status = requested
            new_outcome = None
        else:
            new_status = requested

    if new_status == MatchStatus.COMPLETED.value and (new_score1 is None or new_score2 is None):
        raise MatchValidationError(
            'Scores are required for both players when marking a match as "Completed".'
        )

    scores_changed = (old_score1, old_score2) != (new_score1, new_score2)
    status_changed = old_status != new_status
    if not (scores_changed or status_changed):
        return match

    if new_status == MatchStatus.COMPLETED.value and field != "status":
        # A different score on a finished match makes it a played result
        new_outcome = MatchOutcome.REGULAR.value
    elif new_status == MatchStatus.COMPLETED.value and new_outcome is None:
        new_outcome = MatchOutcome.REGULAR.value

    if field == "status":
        reason = f"Status changed to {new_status.replace('_', ' ').upper()}"
    else:
        reason = "Scores updated"

    entry = MatchHistoryEntry(
        timestamp=now or datetime.now(timezone.utc),
        changed_by=changed_by,
        old_score1=old_score1,
        old_score2=old_score2,
        old_status=old_status,
        new_score1=new_score1,
        new_score2=new_score2,
        new_status=new_status,
        reason=reason,
    )

    return match.model_copy(update={
        "score1": new_score1,
        "score2": new_score2,
        "status": new_status,
        "outcome": new_outcome,
        "history": list(match.history) + [entry],
    })

def update_match(
    data: TournamentData,
    match_id: str,
    field: str,
    value: Any,
    changed_by: str = "Admin",
    now: Optional[datetime] = None,
) -> TournamentData:
    """Applies a match update inside the aggregate. Raises MatchNotFoundError for an unknown id."""
    fixtures = []
    found = False
    for fixture in data.fixtures:
        matches: List[Match] = []
        for match in fixture.matches:
            if match.id == match_id:
                found = True
                match = apply_match_update(match, field, value, changed_by=changed_by, now=now)
            matches.append(match)
        fixtures.append(fixture.model_copy(update={"matches": matches}))

    if not found:
        raise MatchNotFoundError(f"Match with ID {match_id} not found.")

    logger.info("Match %s: %s updated by %s", match_id, field, changed_by)
    return data.model_copy(update={"fixtures": fixtures})
