def test_welcome_page_is_static_login_mockup(client):
    response = client.get("/")

    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert "Login" in page
    assert 'type="password"' in page
    assert "action=" not in page


def test_security_headers_are_set(client):
    response = client.get("/image-upload")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_healthz(client):
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}
