"""Player registration, bulk CSV import and deletion with the fixture cascade."""
import csv
import io
import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from fixturedesk.core.exceptions import (
    DuplicateMobileError,
    PlayerNotFoundError,
    PlayerValidationError,
)
from fixturedesk.models.tournament_model import Player, TournamentData
from fixturedesk.schemas.player_schemas import (
    CategoryCount,
    CategoryCountsResponse,
    ImportReport,
    PlayerCreate,
    SkippedRow,
)
from fixturedesk.services.fixture_service import remove_player_from_fixtures

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("Name", "MobileNumber", "Categories", "Paid(Y/N)")

# Spreadsheet values like "40" mean the "40+" category
CSV_CATEGORY_ALIASES = {
    "Open": "Open",
    "30": "30+",
    "40": "40+",
    "50": "50+",
    "60": "60+",
    "70": "70+",
}

def _validate_player(
    data: TournamentData,
    player_in: PlayerCreate,
    max_categories: int,
    exclude_id: Optional[str] = None,
) -> None:
    if not player_in.name.strip() or not player_in.mobile.strip() or not player_in.categories:
        raise PlayerValidationError("Please fill in all player details and select at least one category.")
    if len(player_in.categories) > max_categories:
        raise PlayerValidationError(f"A player can register for at most {max_categories} categories.")
    if len(set(player_in.categories)) != len(player_in.categories):
        raise PlayerValidationError("A category can only be selected once.")
    if any(c not in data.settings.categories for c in player_in.categories):
        raise PlayerValidationError(
            "One or more selected categories are not defined in tournament settings."
        )
    mobile = player_in.mobile.strip()
    if any(p.mobile == mobile and p.id != exclude_id for p in data.players):
        raise DuplicateMobileError("A player with this mobile number already exists.")

def add_player(data: TournamentData, player_in: PlayerCreate, max_categories: int) -> Tuple[TournamentData, Player]:
    _validate_player(data, player_in, max_categories)
    player = Player(
        name=player_in.name.strip(),
        mobile=player_in.mobile.strip(),
        categories=list(player_in.categories),
        fee_paid=player_in.fee_paid,
    )
    logger.info("Added player %s (%s)", player.name, player.id)
    return data.model_copy(update={"players": data.players + [player]}), player

def update_player(
    data: TournamentData, player_id: str, player_in: PlayerCreate, max_categories: int
) -> Tuple[TournamentData, Player]:
    existing = data.get_player(player_id)
    if not existing:
        raise PlayerNotFoundError(f"Player with ID {player_id} not found.")
    _validate_player(data, player_in, max_categories, exclude_id=player_id)

    updated = existing.model_copy(update={
        "name": player_in.name.strip(),
        "mobile": player_in.mobile.strip(),
        "categories": list(player_in.categories),
        "fee_paid": player_in.fee_paid,
    })
    players = [updated if p.id == player_id else p for p in data.players]
    logger.info("Updated player %s", player_id)
    return data.model_copy(update={"players": players}), updated

def delete_player(data: TournamentData, player_id: str, min_group_size: int) -> TournamentData:
    """Removes the player and cascades the removal through every fixture."""
    if not data.get_player(player_id):
        raise PlayerNotFoundError(f"Player with ID {player_id} not found.")

    players = [p for p in data.players if p.id != player_id]
    fixtures = remove_player_from_fixtures(data.fixtures, player_id, min_group_size)
    logger.info("Deleted player %s", player_id)
    return data.model_copy(update={"players": players, "fixtures": fixtures})

def _map_csv_categories(raw: str, defined: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Returns (mapped categories, rejected raw values). Several categories may be separated by ';'."""
    defined = set(defined)
    mapped: List[str] = []
    rejected: List[str] = []
    for value in (v.strip() for v in raw.split(";")):
        if not value:
            continue
        category = CSV_CATEGORY_ALIASES.get(value, value)
        if category in defined and category not in mapped:
            mapped.append(category)
        elif category not in defined:
            rejected.append(value)
    return mapped, rejected

def import_players_from_csv(
    data: TournamentData, csv_text: str, max_categories: int
) -> Tuple[TournamentData, ImportReport]:
    """
    Adds players from a CSV with the header Name,MobileNumber,Categories,Paid(Y/N).

    Rows that cannot be imported are reported in ImportReport.skipped and never
    abort the import. Only new mobile numbers are added.
    """
    reader = csv.reader(io.StringIO(csv_text.lstrip("\ufeff")))
    rows = list(reader)
    if not rows:
        raise PlayerValidationError("The CSV file is empty.")

    header = [h.strip() for h in rows[0]]
    missing = [c for c in CSV_COLUMNS[:3] if c not in header]
    if missing:
        raise PlayerValidationError(
            f"The CSV header is missing column(s): {', '.join(missing)}. "
            f"Expected headers: {', '.join(CSV_COLUMNS)}."
        )

    report = ImportReport()
    known_mobiles: Set[str] = {p.mobile for p in data.players}
    new_players: List[Player] = []

    def skip(line: int, reason: str, name: Optional[str] = None):
        logger.warning("Skipping CSV line %d: %s", line, reason)
        report.skipped.append(SkippedRow(line=line, reason=reason, name=name))

    for line, values in enumerate(rows[1:], start=2):
        if not any(v.strip() for v in values):
            continue
        if len(values) != len(header):
            skip(line, f"Expected {len(header)} columns, found {len(values)}.")
            continue

        row: Dict[str, str] = {h: v.strip() for h, v in zip(header, values)}
        name, mobile, raw_categories = row.get("Name", ""), row.get("MobileNumber", ""), row.get("Categories", "")
        if not name or not mobile or not raw_categories:
            skip(line, "Name, MobileNumber and Categories are required.", name or None)
            continue

        categories, rejected = _map_csv_categories(raw_categories, data.settings.categories)
        if rejected or not categories:
            skip(line, f"Category '{raw_categories}' is invalid or not defined in tournament settings.", name)
            continue
        if len(categories) > max_categories:
            skip(line, f"A player can register for at most {max_categories} categories.", name)
            continue
        if mobile in known_mobiles:
            skip(line, f"Mobile number {mobile} already exists.", name)
            continue

        player = Player(
            name=name,
            mobile=mobile,
            categories=categories,
            fee_paid=row.get("Paid(Y/N)", "").upper().startswith("Y"),
        )
        known_mobiles.add(mobile)
        new_players.append(player)
        report.added.append(player)

    logger.info("CSV import: %d added, %d skipped", len(report.added), len(report.skipped))
    return data.model_copy(update={"players": data.players + new_players}), report

def category_counts(data: TournamentData, limit: int) -> CategoryCountsResponse:
    """Registered players per defined category, flagging categories above `limit`."""
    counts = []
    for category in data.settings.categories:
        count = sum(1 for p in data.players if category in p.categories)
        counts.append(CategoryCount(category=category, count=count, over_limit=count > limit))
    return CategoryCountsResponse(
        limit=limit,
        counts=counts,
        categories_over_limit=[c.category for c in counts if c.over_limit],
    )
