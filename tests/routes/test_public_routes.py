from fastapi.testclient import TestClient

class TestPublicRoutes:

    def publish(self, client, add_players):
        add_players(client, 4)
        add_players(client, 4, category="40+", prefix="Vet")
        client.post("/api/fixtures/generate", json={"category": "Open", "tournamentType": "Singles"})
        client.post("/api/fixtures/generate", json={"category": "40+", "tournamentType": "Singles"})
        assert client.post("/api/tournament/publish").status_code == 200

    def test_unpublished_view_is_empty(self, anonymous_client: TestClient):
        response = anonymous_client.get("/api/public/tournament")
        assert response.status_code == 200
        assert response.json()["isPublished"] is False
        assert response.json()["players"] == []

    def test_published_view_with_filters(self, configured_client: TestClient, anonymous_client: TestClient, add_players):
        self.publish(configured_client, add_players)

        view = anonymous_client.get("/api/public/tournament").json()
        assert view["name"] == "Club Open"
        assert len(view["players"]) == 8
        assert len(view["fixtures"]) == 2

        view = anonymous_client.get("/api/public/tournament", params={"category": "40+", "search": "vet1"}).json()
        assert [p["name"] for p in view["players"]] == ["Vet1"]
        assert [f["category"] for f in view["fixtures"]] == ["40+"]

        view = anonymous_client.get("/api/public/tournament", params={"group": "Group B"}).json()
        assert view["fixtures"] == []

    def test_html_page(self, configured_client: TestClient, anonymous_client: TestClient, add_players):
        assert "not yet published" in anonymous_client.get("/public").text

        self.publish(configured_client, add_players)
        response = anonymous_client.get("/public")

        assert response.status_code == 200
        assert "Club Open" in response.text
        assert "Group A" in response.text
        assert "Vet0" in response.text
