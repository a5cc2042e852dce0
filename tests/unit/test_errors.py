from bson import ObjectId


def test_database_failure_is_500_without_driver_details(client, fake_db, broken_collection):
    fake_db.collections["movies"] = broken_collection("movies")

    for response in (client.get("/api/movies"), client.get(f"/api/movies/{ObjectId()}")):
        assert response.status_code == 500
        body = response.json()
        assert body["status"] == 500
        assert body["message"] == "Internal Server Error"
        assert "db-host-7" not in response.text

def test_unknown_route_is_enveloped(client):
    response = client.get("/api/popcorn")
    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "Not Found"}

def test_malformed_json_is_400(client, fake_db):
    response = client.post(
        "/api/movies",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request body"
    assert fake_db["movies"].docs == []

def test_health_and_root(client):
    assert client.get("/api/health").json() == {"status": "ok"}
    assert "Welcome" in client.get("/").json()["message"]
