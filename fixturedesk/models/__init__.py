from fixturedesk.models.fixture_model import (
    CategoryFixture,
    Group,
    Match,
    MatchHistoryEntry,
    MatchOutcome,
    MatchStatus,
)
from fixturedesk.models.tournament_model import (
    DEFAULT_TOURNAMENT_NAME,
    Player,
    TournamentData,
    TournamentSettings,
)
