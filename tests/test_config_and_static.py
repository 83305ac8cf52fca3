from src.api.static import resolve_static_path


def test_config_exposes_public_key(client):
    response = client.get("/api/config")

    assert response.status_code == 200
    assert response.json() == {"key": "pk_test_123"}


def test_config_passes_through_absent_key(make_client):
    client = make_client(paystack_public_key=None)

    response = client.get("/api/config")

    assert response.status_code == 200
    assert response.json() == {"key": None}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_static_asset_is_served(client):
    response = client.get("/assets/app.js")

    assert response.status_code == 200
    assert response.text == "console.log('app');"


def test_unknown_route_falls_back_to_entry_document(client):
    for path in ("/", "/checkout", "/products/42/reviews"):
        response = client.get(path)
        assert response.status_code == 200
        assert "entry" in response.text


def test_unmatched_api_path_also_falls_back_to_entry_document(client):
    response = client.get("/api/nope")

    assert response.status_code == 200
    assert "entry" in response.text


def test_paths_outside_static_root_are_not_resolved(static_dir):
    assert resolve_static_path(static_dir, "../secret.txt") is None
    assert resolve_static_path(static_dir, "assets/app.js") == (static_dir / "assets" / "app.js").resolve()
    assert resolve_static_path(static_dir, "assets/missing.js") is None


def test_missing_entry_document_is_a_404(make_client, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    client = make_client(static_dir=empty)

    response = client.get("/anything")

    assert response.status_code == 404


def test_cors_allows_configured_origin(make_client):
    client = make_client(frontend_url="https://shop.example.com")

    response = client.get("/api/config", headers={"Origin": "https://shop.example.com"})

    assert response.headers["access-control-allow-origin"] == "https://shop.example.com"


def test_cors_preflight_limits_methods(client):
    response = client.options(
        "/api/verify",
        headers={
            "Origin": "https://anywhere.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    allowed = response.headers["access-control-allow-methods"]
    assert "POST" in allowed
    assert "DELETE" not in allowed
