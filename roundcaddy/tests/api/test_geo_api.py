def test_green_distances(client) -> None:
    payload = {
        "position": {"lat": 33.5, "lon": -82.0},
        "green": {
            "front": {"lat": 33.5010, "lon": -82.0},
            "center": {"lat": 33.5012, "lon": -82.0},
            "back": {"lat": 33.5014, "lon": -82.0},
        },
    }
    response = client.post("/api/geo/distances", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["front"] == 122
    assert body["front"] < body["center"] < body["back"]


def test_shot_distance(client) -> None:
    payload = {
        "from": {"latitude": 33.5, "longitude": -82.0},
        "to": {"latitude": 33.502, "longitude": -82.0},
    }
    response = client.post("/api/geo/shot-distance", json=payload)
    assert response.status_code == 200
    assert response.json() == {"yards": 243, "bearing": 0.0, "direction": "N"}


def test_missing_green_is_rejected(client) -> None:
    response = client.post(
        "/api/geo/distances", json={"position": {"lat": 1.0, "lon": 1.0}}
    )
    assert response.status_code == 422
