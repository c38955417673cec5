import csv
import io

from fastapi.testclient import TestClient

class TestFixtureRoutes:

    def test_generate(self, configured_client: TestClient, add_players):
        add_players(configured_client, 10)

        response = configured_client.post(
            "/api/fixtures/generate", json={"category": "Open", "tournamentType": "Singles"}
        )

        assert response.status_code == 200
        fixture = response.json()
        assert fixture["tournamentType"] == "Singles"
        assert [len(g["playerIds"]) for g in fixture["groups"]] == [5, 5]
        assert len(fixture["matches"]) == 20

    def test_generate_not_enough_players(self, configured_client: TestClient, add_players):
        add_players(configured_client, 3)

        response = configured_client.post(
            "/api/fixtures/generate", json={"category": "Open", "tournamentType": "Singles"}
        )

        assert response.status_code == 400
        assert "3 player" in response.json()["detail"]
        assert configured_client.get("/api/fixtures").json() == []

    def test_generate_undefined_category(self, configured_client: TestClient):
        response = configured_client.post(
            "/api/fixtures/generate", json={"category": "Juniors", "tournamentType": "Singles"}
        )
        assert response.status_code == 400

    def test_list_with_filters(self, configured_client: TestClient, add_players):
        add_players(configured_client, 4)
        configured_client.post("/api/fixtures/generate", json={"category": "Open", "tournamentType": "Singles"})
        configured_client.post("/api/fixtures/generate", json={"category": "Open", "tournamentType": "Doubles"})

        assert len(configured_client.get("/api/fixtures").json()) == 2
        doubles = configured_client.get("/api/fixtures", params={"tournament_type": "Doubles"}).json()
        assert [f["tournamentType"] for f in doubles] == ["Doubles"]

    def test_upload(self, configured_client: TestClient):
        payload = [{
            "category": "Open",
            "tournamentType": "Singles",
            "groups": [{"id": "g1", "name": "Group A", "playerIds": ["a", "b"]}],
            "matches": [{"id": "m1", "player1Id": "a", "player2Id": "b", "groupName": "Group A"}],
        }]

        response = configured_client.post("/api/fixtures/upload", json=payload)

        assert response.status_code == 200
        assert response.json()[0]["matches"][0]["history"] == []

    def test_upload_malformed(self, configured_client: TestClient):
        response = configured_client.post("/api/fixtures/upload", json=[{"category": "Open"}])
        assert response.status_code == 400
        assert configured_client.get("/api/fixtures").json() == []

class TestMatchRoutes:

    def generate(self, client, add_players):
        add_players(client, 4)
        fixture = client.post(
            "/api/fixtures/generate", json={"category": "Open", "tournamentType": "Singles"}
        ).json()
        return fixture["matches"][0]["id"]

    def test_score_update(self, configured_client: TestClient, add_players):
        match_id = self.generate(configured_client, add_players)

        response = configured_client.patch(f"/api/matches/{match_id}", json={"field": "score1", "value": -3})

        assert response.status_code == 200
        match = response.json()
        assert match["score1"] == 0
        assert match["status"] == "scheduled"
        assert match["history"][0]["reason"] == "Scores updated"

    def test_walkover_and_history(self, configured_client: TestClient, add_players):
        match_id = self.generate(configured_client, add_players)

        response = configured_client.patch(
            f"/api/matches/{match_id}", json={"field": "status", "value": "walkover_p2"}
        )
        assert response.json()["outcome"] == "walkover_p2"
        assert (response.json()["score1"], response.json()["score2"]) == (0, 1)

        history = configured_client.get(f"/api/matches/{match_id}/history").json()
        assert history["matchId"] == match_id
        assert history["history"][0]["newStatus"] == "completed"
        assert history["history"][0]["changedBy"] == "Admin"

    def test_completed_without_scores(self, configured_client: TestClient, add_players):
        match_id = self.generate(configured_client, add_players)
        response = configured_client.patch(
            f"/api/matches/{match_id}", json={"field": "status", "value": "completed"}
        )
        assert response.status_code == 400
        assert "Scores are required" in response.json()["detail"]

    def test_unknown_match(self, configured_client: TestClient):
        response = configured_client.patch("/api/matches/missing", json={"field": "score1", "value": 1})
        assert response.status_code == 404
        assert configured_client.get("/api/matches/missing/history").status_code == 404

class TestExportRoutes:

    def test_exports(self, configured_client: TestClient, add_players):
        add_players(configured_client, 4)
        configured_client.post("/api/fixtures/generate", json={"category": "Open", "tournamentType": "Singles"})

        players = configured_client.get("/api/exports/players.csv")
        assert players.status_code == 200
        assert players.headers["content-type"].startswith("text/csv")
        assert "players_data.csv" in players.headers["content-disposition"]
        assert len(list(csv.reader(io.StringIO(players.text)))) == 5

        groups = list(csv.reader(io.StringIO(configured_client.get("/api/exports/fixtures.csv").text)))
        assert groups[1][3] == "Group A"

        matches = list(csv.reader(io.StringIO(configured_client.get("/api/exports/matches.csv").text)))
        assert len(matches) == 7

    def test_nothing_to_export(self, client: TestClient):
        response = client.get("/api/exports/matches.csv")
        assert response.status_code == 400
        assert response.json()["detail"] == "No match results to export."
