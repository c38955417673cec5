import csv
import io
from typing import List, Sequence

from fixturedesk.core.exceptions import ExportError
from fixturedesk.models.tournament_model import TournamentData

PLAYER_HEADERS = ["Player ID", "Name", "Mobile Number", "Category 1", "Category 2", "Fee Paid"]
GROUP_HEADERS = [
    "Category", "Tournament Type", "Group ID", "Group Name",
    "Players in Group (Names)", "Players in Group (IDs)",
]
MATCH_HEADERS = [
    "Match ID", "Category", "Tournament Type", "Group Name",
    "Player 1 Name", "Player 2 Name", "Score Player 1", "Score Player 2", "Status",
]

def _to_csv(rows: Sequence[Sequence]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()

def export_players(data: TournamentData) -> str:
    if not data.players:
        raise ExportError("No players to export.")
    rows: List[list] = [PLAYER_HEADERS]
    for player in data.players:
        categories = list(player.categories) + ["", ""]
        rows.append([
            player.id,
            player.name,
            player.mobile,
            categories[0],
            categories[1],
            "Yes" if player.fee_paid else "No",
        ])
    return _to_csv(rows)

def export_groups(data: TournamentData) -> str:
    if not data.fixtures:
        raise ExportError("No fixtures to export.")
    rows: List[list] = [GROUP_HEADERS]
    for fixture in data.fixtures:
        for group in fixture.groups:
            rows.append([
                fixture.category,
                fixture.tournament_type,
                group.id,
                group.name,
                "; ".join(data.player_name(pid) for pid in group.player_ids),
                "; ".join(group.player_ids),
            ])
    return _to_csv(rows)

def export_match_results(data: TournamentData) -> str:
    matches = [m for f in data.fixtures for m in f.matches]
    if not matches:
        raise ExportError("No match results to export.")
    rows: List[list] = [MATCH_HEADERS]
    for match in matches:
        rows.append([
            match.id,
            match.category,
            match.tournament_type,
            match.group_name,
            data.player_name(match.player1_id),
            data.player_name(match.player2_id),
            "" if match.score1 is None else match.score1,
            "" if match.score2 is None else match.score2,
            getattr(match.status, "value", match.status).replace("_", " "),
        ])
    return _to_csv(rows)
