import json
import logging
import os
import threading
from typing import Any, Callable, Optional

from pydantic import ValidationError

from fixturedesk.core.config import settings
from fixturedesk.core.exceptions import DataFileError, PublishError, SettingsValidationError
from fixturedesk.models.tournament_model import TournamentData, TournamentSettings
from fixturedesk.schemas.tournament_schemas import PublicTournamentView, PublishStatus, SettingsUpdate

logger = logging.getLogger(__name__)

def validate_settings(settings_in: SettingsUpdate) -> TournamentSettings:
    if not settings_in.name.strip():
        raise SettingsValidationError("Tournament Name cannot be empty.")
    if not settings_in.types:
        raise SettingsValidationError("Please select at least one Tournament Type.")
    if not settings_in.categories:
        raise SettingsValidationError("Please select at least one Player Category.")
    return TournamentSettings(
        name=settings_in.name.strip(),
        types=list(dict.fromkeys(settings_in.types)),
        categories=list(dict.fromkeys(settings_in.categories)),
    )

def save_settings(data: TournamentData, settings_in: SettingsUpdate) -> TournamentData:
    return data.model_copy(update={"settings": validate_settings(settings_in)})

def publish_status(data: TournamentData) -> PublishStatus:
    """The tournament can be published once every admin step is done. The first missing step is the reason."""
    reason = None
    if not data.settings.name.strip():
        reason = "Complete tournament name in settings."
    elif not data.settings.types:
        reason = "Select tournament types in settings."
    elif not data.settings.categories:
        reason = "Select player categories in settings."
    elif not data.players:
        reason = "Add players."
    elif not data.fixtures:
        reason = "Generate or upload fixtures."
    return PublishStatus(can_publish=reason is None, reason=reason, is_published=data.is_published)

def publish(data: TournamentData) -> TournamentData:
    status = publish_status(data)
    if not status.can_publish:
        raise PublishError(f"Cannot publish: {status.reason}")
    return data.model_copy(update={"is_published": True})

def unpublish(data: TournamentData) -> TournamentData:
    return data.model_copy(update={"is_published": False})

def build_public_view(
    data: TournamentData,
    category: Optional[str] = None,
    group_name: Optional[str] = None,
    search: Optional[str] = None,
) -> PublicTournamentView:
    """
    Read-only snapshot for spectators.

    Players are filtered by category and a case-insensitive name/mobile search,
    fixtures by category and group name. Nothing is shown before publishing.
    """
    if not data.is_published:
        return PublicTournamentView(is_published=False)

    players = [p for p in data.players if not category or category in p.categories]
    if search and search.strip():
        term = search.strip().lower()
        players = [p for p in players if term in p.name.lower() or term in p.mobile.lower()]

    fixtures = []
    for fixture in data.fixtures:
        if category and fixture.category != category:
            continue
        if group_name:
            groups = [g for g in fixture.groups if g.name == group_name]
            if not groups:
                continue
            matches = [m for m in fixture.matches if m.group_name == group_name]
            fixture = fixture.model_copy(update={"groups": groups, "matches": matches})
        fixtures.append(fixture)

    referenced = {pid for f in fixtures for g in f.groups for pid in g.player_ids}
    referenced |= {pid for f in fixtures for m in f.matches for pid in (m.player1_id, m.player2_id)}

    return PublicTournamentView(
        is_published=True,
        name=data.settings.name,
        categories=data.settings.categories,
        types=data.settings.types,
        players=players,
        fixtures=fixtures,
        player_names={pid: data.player_name(pid) for pid in sorted(referenced)},
    )

class TournamentService:
    """
    Owns the tournament JSON document.

    Every mutation loads the document, runs a pure reducer and writes the
    result back only if the reducer succeeded.
    """

    def __init__(self, data_file_path: str = settings.DATA_FILE):
        self.data_file_path = data_file_path
        self._lock = threading.Lock()

        directory = os.path.dirname(self.data_file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        if not os.path.exists(self.data_file_path):
            self._save_data_to_file(TournamentData())

    def _load_data_from_file(self) -> TournamentData:
        if not os.path.exists(self.data_file_path):
            return TournamentData()
        try:
            with open(self.data_file_path, "r") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Could not read %s, starting from an empty tournament: %s", self.data_file_path, e)
            return TournamentData()
        try:
            return TournamentData.model_validate(raw)
        except ValidationError as e:
            logger.error("Tournament data in %s is invalid: %s", self.data_file_path, e)
            raise DataFileError(f"Tournament data in {self.data_file_path} is invalid and was left unchanged.") from e

    def _save_data_to_file(self, data: TournamentData):
        with open(self.data_file_path, "w") as f:
            json.dump(data.model_dump(mode="json", by_alias=True), f, indent=4)

    def get_data(self) -> TournamentData:
        with self._lock:
            return self._load_data_from_file()

    def update(self, reducer: Callable[..., Any], *args, **kwargs) -> Any:
        """
        Applies `reducer(data, *args, **kwargs)` and persists the result.

        The reducer returns either the new TournamentData or a tuple whose
        first element is the new TournamentData; the reducer's return value is
        passed back to the caller. Exceptions propagate and nothing is written.
        """
        with self._lock:
            data = self._load_data_from_file()
            result = reducer(data, *args, **kwargs)
            new_data = result[0] if isinstance(result, tuple) else result
            self._save_data_to_file(new_data)
            logger.debug("Saved tournament data after %s", getattr(reducer, "__name__", "update"))
            return result

    def save_settings(self, settings_in: SettingsUpdate) -> TournamentData:
        data = self.update(save_settings, settings_in)
        logger.info("Tournament settings saved: %s", data.settings.name)
        return data

    def publish(self) -> TournamentData:
        data = self.update(publish)
        logger.info("Tournament published")
        return data

    def unpublish(self) -> TournamentData:
        data = self.update(unpublish)
        logger.info("Tournament unpublished")
        return data

    def reset(self) -> TournamentData:
        # Does not read the current file, so an invalid file can still be reset
        data = TournamentData()
        with self._lock:
            self._save_data_to_file(data)
        logger.info("Tournament data reset")
        return data

    def get_publish_status(self) -> PublishStatus:
        return publish_status(self.get_data())

    def get_public_view(self, category: Optional[str] = None, group_name: Optional[str] = None,
                        search: Optional[str] = None) -> PublicTournamentView:
        return build_public_view(self.get_data(), category=category, group_name=group_name, search=search)
