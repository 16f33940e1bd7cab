from src.config.settings import settings


def test_root_returns_greeting(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Hello World"


def test_health_reports_configuration(client):
    response = client.get("/health")
    data = response.json()

    assert response.status_code == 200
    assert data["status"] == "healthy"
    assert data["gemini_configured"] is True
    assert data["model"] == settings.gemini_model
    assert data["version"] == "0.1.0"
