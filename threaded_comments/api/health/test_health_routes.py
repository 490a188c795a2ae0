# threaded_comments/api/health/test_health_routes.py


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "OK"
    assert body["timestamp"].endswith("Z")


def test_unknown_route_returns_json_404(client):
    response = client.get('/nope')
    assert response.status_code == 404
    assert response.get_json()["error_code"] == "NOT_FOUND"
