import json
import os

import pytest

from fixturedesk.core.exceptions import DataFileError, PublishError, SettingsValidationError
from fixturedesk.models.fixture_model import CategoryFixture, Group, Match
from fixturedesk.models.tournament_model import DEFAULT_TOURNAMENT_NAME, Player, TournamentData, TournamentSettings
from fixturedesk.schemas.tournament_schemas import SettingsUpdate
from fixturedesk.services.tournament_service import (
    TournamentService,
    build_public_view,
    publish_status,
    validate_settings,
)

TEST_DATA_FILE = "test_tournament.json"

@pytest.fixture
def temp_data_file(tmp_path):
    return tmp_path / "data" / TEST_DATA_FILE

@pytest.fixture
def tournament_service(temp_data_file):
    return TournamentService(data_file_path=str(temp_data_file))

def ready_data(is_published=False):
    players = [
        Player(id="p1", name="Ana Silva", mobile="5550001", categories=["Open"]),
        Player(id="p2", name="Bea Costa", mobile="5550002", categories=["Open", "40+"]),
        Player(id="p3", name="Cid Rocha", mobile="5550003", categories=["40+"]),
    ]
    fixtures = [
        CategoryFixture(
            category="Open", tournament_type="Singles",
            groups=[Group(name="Group A", player_ids=["p1", "p2"]), Group(name="Group B", player_ids=["p9"])],
            matches=[Match(category="Open", tournament_type="Singles", group_name="Group A",
                           player1_id="p1", player2_id="p2")],
        ),
        CategoryFixture(
            category="40+", tournament_type="Singles",
            groups=[Group(name="Group A", player_ids=["p2", "p3"])],
            matches=[Match(category="40+", tournament_type="Singles", group_name="Group A",
                           player1_id="p2", player2_id="p3")],
        ),
    ]
    return TournamentData(
        settings=TournamentSettings(name="Club Open", types=["Singles"], categories=["Open", "40+"]),
        players=players,
        fixtures=fixtures,
        is_published=is_published,
    )

class TestTournamentServiceStorage:

    def test_creates_default_file(self, tournament_service, temp_data_file):
        assert os.path.exists(temp_data_file)
        data = tournament_service.get_data()
        assert data.settings.name == DEFAULT_TOURNAMENT_NAME
        assert data.players == [] and data.fixtures == []
        assert data.is_published is False

    def test_file_uses_camel_case_keys(self, tournament_service, temp_data_file):
        tournament_service.update(lambda _: ready_data())

        with open(temp_data_file) as f:
            raw = json.load(f)

        assert "isPublished" in raw
        assert raw["fixtures"][0]["tournamentType"] == "Singles"
        assert raw["fixtures"][0]["groups"][0]["playerIds"] == ["p1", "p2"]
        assert raw["fixtures"][0]["matches"][0]["player1Id"] == "p1"
        assert raw["players"][0]["feePaid"] is False

    def test_round_trip(self, tournament_service):
        data = ready_data()
        tournament_service.update(lambda _: data)
        assert tournament_service.get_data() == data

    def test_failed_reducer_writes_nothing(self, tournament_service):
        def failing(data):
            raise SettingsValidationError("boom")

        with pytest.raises(SettingsValidationError):
            tournament_service.update(failing)
        assert tournament_service.get_data() == TournamentData()

    def test_update_returns_reducer_extras(self, tournament_service):
        data, extra = tournament_service.update(lambda d: (d.model_copy(update={"is_published": True}), "ok"))
        assert extra == "ok"
        assert tournament_service.get_data().is_published is True

    def test_corrupt_file_falls_back_to_default(self, temp_data_file, caplog):
        os.makedirs(os.path.dirname(temp_data_file), exist_ok=True)
        with open(temp_data_file, "w") as f:
            f.write("{not json")

        service = TournamentService(data_file_path=str(temp_data_file))

        assert service.get_data() == TournamentData()
        assert "Could not read" in caplog.text

    def test_invalid_data_is_not_overwritten(self, temp_data_file):
        os.makedirs(os.path.dirname(temp_data_file), exist_ok=True)
        contents = json.dumps({"settings": {"name": "Club Open"}, "players": [{"name": "No mobile"}]})
        with open(temp_data_file, "w") as f:
            f.write(contents)
        service = TournamentService(data_file_path=str(temp_data_file))

        with pytest.raises(DataFileError):
            service.get_data()
        with pytest.raises(DataFileError):
            service.publish()

        with open(temp_data_file) as f:
            assert f.read() == contents

    def test_reset_recovers_invalid_data(self, temp_data_file):
        os.makedirs(os.path.dirname(temp_data_file), exist_ok=True)
        with open(temp_data_file, "w") as f:
            f.write(json.dumps({"players": "not a list"}))
        service = TournamentService(data_file_path=str(temp_data_file))

        service.reset()

        assert service.get_data() == TournamentData()

    def test_reset(self, tournament_service):
        tournament_service.update(lambda _: ready_data(is_published=True))
        data = tournament_service.reset()
        assert data == TournamentData()
        assert tournament_service.get_data() == TournamentData()

class TestSettings:

    def test_save_settings(self, tournament_service):
        data = tournament_service.save_settings(
            SettingsUpdate(name="  Spring Cup ", types=["Singles", "Singles"], categories=["Open"])
        )
        assert data.settings.name == "Spring Cup"
        assert data.settings.types == ["Singles"]
        assert tournament_service.get_data().settings.categories == ["Open"]

    @pytest.mark.parametrize("settings_in, message", [
        (SettingsUpdate(name=" ", types=["Singles"], categories=["Open"]), "Tournament Name cannot be empty."),
        (SettingsUpdate(name="Cup", types=[], categories=["Open"]), "at least one Tournament Type"),
        (SettingsUpdate(name="Cup", types=["Singles"], categories=[]), "at least one Player Category"),
    ])
    def test_invalid_settings(self, settings_in, message):
        with pytest.raises(SettingsValidationError, match=message):
            validate_settings(settings_in)

class TestPublishing:

    @pytest.mark.parametrize("change, reason", [
        ({"settings": TournamentSettings(name=" ", types=["Singles"], categories=["Open"])},
         "Complete tournament name in settings."),
        ({"settings": TournamentSettings(name="Cup", types=[], categories=["Open"])},
         "Select tournament types in settings."),
        ({"settings": TournamentSettings(name="Cup", types=["Singles"], categories=[])},
         "Select player categories in settings."),
        ({"players": []}, "Add players."),
        ({"fixtures": []}, "Generate or upload fixtures."),
    ])
    def test_first_missing_step_is_reported(self, change, reason):
        status = publish_status(ready_data().model_copy(update=change))
        assert status.can_publish is False
        assert status.reason == reason

    def test_ready_to_publish(self):
        status = publish_status(ready_data())
        assert status.can_publish is True
        assert status.reason is None

    def test_publish_and_unpublish(self, tournament_service):
        tournament_service.update(lambda _: ready_data())

        assert tournament_service.publish().is_published is True
        assert tournament_service.get_publish_status().is_published is True
        assert tournament_service.unpublish().is_published is False

    def test_publish_rejected_with_reason(self, tournament_service):
        with pytest.raises(PublishError, match="Select tournament types"):
            tournament_service.publish()
        assert tournament_service.get_data().is_published is False

class TestPublicView:

    def test_hidden_until_published(self):
        view = build_public_view(ready_data(is_published=False))
        assert view.is_published is False
        assert view.players == [] and view.fixtures == []

    def test_full_view(self):
        view = build_public_view(ready_data(is_published=True))

        assert view.name == "Club Open"
        assert len(view.players) == 3
        assert len(view.fixtures) == 2
        assert view.player_names["p1"] == "Ana Silva"
        assert view.player_names["p9"] == "Unknown Player (ID: p9)"

    def test_filter_by_category(self):
        view = build_public_view(ready_data(is_published=True), category="40+")
        assert [p.id for p in view.players] == ["p2", "p3"]
        assert [f.category for f in view.fixtures] == ["40+"]

    def test_search_is_case_insensitive_on_name_and_mobile(self):
        data = ready_data(is_published=True)
        assert [p.id for p in build_public_view(data, search="bea").players] == ["p2"]
        assert [p.id for p in build_public_view(data, search="0003").players] == ["p3"]

    def test_filter_by_group(self):
        view = build_public_view(ready_data(is_published=True), category="Open", group_name="Group B")
        assert [g.name for g in view.fixtures[0].groups] == ["Group B"]
        assert view.fixtures[0].matches == []

    def test_service_public_view(self, tournament_service):
        tournament_service.update(lambda _: ready_data(is_published=True))
        assert tournament_service.get_public_view(search="cid").players[0].id == "p3"
