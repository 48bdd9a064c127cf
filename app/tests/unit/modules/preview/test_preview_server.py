"""Tests for modules.preview.server module."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.i18n import LanguagePair
from modules.preview import create_preview_app, resolve_site_file


@pytest.fixture
def client(built_site):
    with TestClient(create_preview_app(built_site)) as client:
        yield client


@pytest.mark.unit
class TestPreviewServer:
    """Tests for the preview application."""

    def test_root_serves_home(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Bonjour" in response.text

    def test_clean_article_urls(self, client):
        response = client.get("/articles/premier")
        assert response.status_code == 200
        assert "Premier article - Evan Lajusticia" in response.text

    @pytest.mark.parametrize("path", ["/en", "/en/"])
    def test_language_root(self, client, path):
        response = client.get(path)
        assert response.status_code == 200
        assert 'lang="en"' in response.text

    def test_prefixed_article_falls_back_to_shared_page(self, client):
        response = client.get("/en/articles/premier")
        assert response.status_code == 200
        assert "Premier article" in response.text

    def test_article_index(self, client):
        response = client.get("/articles/index.json")
        assert response.status_code == 200
        assert [entry["slug"] for entry in response.json()] == ["second", "premier"]

    def test_static_assets(self, client, built_site):
        css = next((built_site / "assets").glob("main-*.css"))
        response = client.get(f"/assets/{css.name}")
        assert response.status_code == 200
        assert response.text == "body { color: black; }"

    def test_unknown_path_is_404(self, client):
        assert client.get("/articles/absent").status_code == 404
        assert client.get("/nowhere").status_code == 404

    def test_app_language_pair_wins_over_configured_one(self, built_site):
        app = create_preview_app(built_site, LanguagePair("fr", "de"))

        with TestClient(app) as client:
            assert client.get("/de/articles/premier").status_code == 200
            assert client.get("/en/articles/premier").status_code == 404

    def test_configured_language_pair_by_default(self, built_site, monkeypatch):
        monkeypatch.setenv("ALTERNATE_LANGUAGE", "de")

        with TestClient(create_preview_app(built_site)) as client:
            assert client.get("/de/articles/premier").status_code == 200
            assert client.get("/en/articles/premier").status_code == 404


@pytest.mark.unit
class TestResolveSiteFile:
    def test_outside_root_is_refused(self, tmp_path):
        site_root = tmp_path / "dist"
        site_root.mkdir()
        (tmp_path / "secret.txt").write_text("x")

        assert resolve_site_file(site_root, "/../secret.txt", LanguagePair()) is None

    def test_directory_without_index(self, tmp_path):
        (tmp_path / "articles").mkdir()
        assert resolve_site_file(tmp_path, "/articles/", LanguagePair()) is None

    def test_exact_file_wins(self, tmp_path):
        (tmp_path / "robots.txt").write_text("User-agent: *")
        assert resolve_site_file(tmp_path, "/robots.txt", LanguagePair()) == (
            tmp_path / "robots.txt"
        ).resolve()
