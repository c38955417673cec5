from fastapi.testclient import TestClient

class TestPlayerRoutes:

    def test_create_and_list(self, configured_client: TestClient):
        response = configured_client.post(
            "/api/players",
            json={"name": "Ana", "mobile": "5550001", "categories": ["Open", "40+"], "feePaid": True},
        )
        assert response.status_code == 201
        player = response.json()
        assert player["feePaid"] is True

        players = configured_client.get("/api/players").json()
        assert [p["id"] for p in players] == [player["id"]]

    def test_duplicate_mobile(self, configured_client: TestClient, add_players):
        add_players(configured_client, 1)
        response = configured_client.post(
            "/api/players", json={"name": "Other", "mobile": "P-5550000", "categories": ["Open"]}
        )
        assert response.status_code == 400
        assert "mobile number already exists" in response.json()["detail"]

    def test_update(self, configured_client: TestClient, add_players):
        player_id = add_players(configured_client, 1)[0]
        response = configured_client.put(
            f"/api/players/{player_id}",
            json={"name": "Renamed", "mobile": "P-5550000", "categories": ["40+"]},
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["categories"] == ["40+"]

    def test_update_unknown(self, configured_client: TestClient):
        response = configured_client.put(
            "/api/players/missing", json={"name": "X", "mobile": "1", "categories": ["Open"]}
        )
        assert response.status_code == 404

    def test_delete_cascades(self, configured_client: TestClient, tournament_service, add_players):
        ids = add_players(configured_client, 5)
        configured_client.post("/api/fixtures/generate", json={"category": "Open", "tournamentType": "Singles"})

        response = configured_client.delete(f"/api/players/{ids[0]}")

        assert response.status_code == 200
        data = tournament_service.get_data()
        assert len(data.players) == 4
        assert ids[0] not in data.fixtures[0].groups[0].player_ids
        assert len(data.fixtures[0].matches) == 6

    def test_delete_unknown(self, configured_client: TestClient):
        assert configured_client.delete("/api/players/missing").status_code == 404

    def test_import_csv(self, configured_client: TestClient):
        csv_text = "Name,MobileNumber,Categories,Paid(Y/N)\nAna,1,Open,Y\nBea,2,99,N\n"

        response = configured_client.post(
            "/api/players/import", files={"file": ("players.csv", csv_text.encode(), "text/csv")}
        )

        assert response.status_code == 200
        report = response.json()
        assert [p["name"] for p in report["added"]] == ["Ana"]
        assert report["skipped"][0]["line"] == 3

    def test_import_bad_header(self, configured_client: TestClient):
        response = configured_client.post(
            "/api/players/import", files={"file": ("players.csv", b"Who,What\n", "text/csv")}
        )
        assert response.status_code == 400

    def test_category_counts(self, configured_client: TestClient, add_players):
        add_players(configured_client, 2)
        add_players(configured_client, 1, category="40+", prefix="F")

        response = configured_client.get("/api/players/category-counts")

        assert response.status_code == 200
        body = response.json()
        assert body["counts"] == [
            {"category": "Open", "count": 2, "overLimit": False},
            {"category": "40+", "count": 1, "overLimit": False},
        ]
        assert body["categoriesOverLimit"] == []
