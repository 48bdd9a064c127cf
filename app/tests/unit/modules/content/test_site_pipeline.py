"""Tests for modules.content.pipeline module."""

import hashlib
import json

import pytest

from infrastructure.configuration import BuildSettings, Settings
from modules.content import ContentBuildError, SitePipeline
from modules.navigation import PageDocument
from tests.factories.content import make_article_markdown, make_site_tree

CSS_DIGEST = hashlib.sha256(b"body { color: black; }").hexdigest()[:8]


@pytest.fixture
def source_dir(site_settings):
    return site_settings.build.SOURCE_DIR


@pytest.mark.unit
class TestSitePipelineBuild:
    """Tests for SitePipeline.build."""

    def test_emits_every_output(self, site_settings, source_dir):
        make_site_tree(source_dir)

        bundle = SitePipeline(site_settings).build()

        assert sorted(asset.file_name for asset in bundle) == sorted(
            [
                f"assets/main-{CSS_DIGEST}.css",
                "index.html",
                "articles/premier.html",
                "articles/second.html",
                "articles/index.json",
                "en/index.html",
                "fr/index.html",
            ]
        )

    def test_article_pages(self, site_settings, source_dir):
        make_site_tree(source_dir)

        bundle = SitePipeline(site_settings).build()

        page = PageDocument(bundle.get("articles/premier.html").source)
        assert page.title == "Premier article - Evan Lajusticia"
        assert page.select_one(".article-meta").get_text() == "2024-03-01 · 1 min de lecture"
        assert page.select_one("link")["href"] == f"/assets/main-{CSS_DIGEST}.css"

    def test_article_index_newest_first(self, site_settings, source_dir):
        make_site_tree(source_dir)

        bundle = SitePipeline(site_settings).build()

        index = json.loads(bundle.get("articles/index.json").source)
        assert [entry["slug"] for entry in index] == ["second", "premier"]
        assert index[0] == {
            "slug": "second",
            "title": "Second article",
            "description": "Un article",
            "date": "2024-05-10",
            "readTime": "1 min de lecture",
            "url": "/articles/second",
            "tags": ["python"],
        }

    def test_home_page_asset_references(self, site_settings, source_dir):
        make_site_tree(source_dir)

        bundle = SitePipeline(site_settings).build()

        home = PageDocument(bundle.get("index.html").source)
        assert home.select_one("link")["href"] == f"/assets/main-{CSS_DIGEST}.css"

    def test_localized_pages(self, site_settings, source_dir):
        make_site_tree(source_dir)

        bundle = SitePipeline(site_settings).build()

        english = PageDocument(bundle.get("en/index.html").source)
        assert english.select_one("html")["lang"] == "en"
        assert english.select_one("h1").decode_contents() == "Hello <em>there</em>"
        assert english.description == "Portfolio EN"
        assert english.select_one("link")["href"] == f"/assets/main-{CSS_DIGEST}.css"

    def test_read_time_label_from_translations(self, site_settings, source_dir):
        make_site_tree(
            source_dir,
            translations={"fr": {"article": {"read_time": "Lecture : {{minutes}} min"}}},
        )

        bundle = SitePipeline(site_settings).build()

        index = json.loads(bundle.get("articles/index.json").source)
        assert index[0]["readTime"] == "Lecture : 1 min"

    def test_read_time_label_without_translations(self, site_settings, source_dir):
        make_site_tree(source_dir, translations={})

        pipeline = SitePipeline(site_settings)
        bundle = pipeline.build()

        assert pipeline.translator is None
        assert "en/index.html" not in bundle
        index = json.loads(bundle.get("articles/index.json").source)
        assert index[0]["readTime"] == "1 min de lecture"

    def test_read_time_translation_with_unknown_placeholder_fails(
        self, site_settings, source_dir
    ):
        make_site_tree(
            source_dir,
            translations={"fr": {"article": {"read_time": "{minutes} min, {words} mots"}}},
        )

        with pytest.raises(ContentBuildError, match="article.read_time"):
            SitePipeline(site_settings).build()

    def test_missing_template_with_articles_fails(self, site_settings, source_dir):
        make_site_tree(source_dir, template=None)

        with pytest.raises(ContentBuildError):
            SitePipeline(site_settings).build()

    def test_no_articles_needs_no_template(self, site_settings, source_dir):
        make_site_tree(source_dir, articles={}, template=None)

        bundle = SitePipeline(site_settings).build()

        assert "index.html" in bundle
        assert "articles/index.json" not in bundle

    def test_invalid_frontmatter_fails(self, site_settings, source_dir):
        make_site_tree(source_dir, articles={"broken": "---\ntitle: [x\n---\nbody\n"})

        with pytest.raises(ContentBuildError):
            SitePipeline(site_settings).build()

    def test_missing_home_page(self, site_settings, source_dir):
        make_site_tree(source_dir, home=None)

        bundle = SitePipeline(site_settings).build()

        assert "index.html" not in bundle
        assert "fr/index.html" not in bundle
        assert "articles/premier.html" in bundle

    def test_custom_site_name_and_speed(self, tmp_path):
        source_dir = make_site_tree(
            tmp_path / "site",
            articles={"long": make_article_markdown(title="Long", body="mot " * 500)},
        )
        settings = Settings(
            build=BuildSettings(SOURCE_DIR=source_dir, WORDS_PER_MINUTE=100),
        )
        settings.site.SITE_NAME = "Folio"

        bundle = SitePipeline(settings).build()

        page = PageDocument(bundle.get("articles/long.html").source)
        assert page.title == "Long - Folio"
        index = json.loads(bundle.get("articles/index.json").source)
        assert index[0]["readTime"] == "5 min de lecture"


@pytest.mark.unit
class TestSitePipelineRun:
    def test_run_writes_output(self, site_settings, source_dir):
        make_site_tree(source_dir)

        SitePipeline(site_settings).run()

        output = site_settings.build.OUTPUT_DIR
        assert (output / "index.html").is_file()
        assert (output / "articles" / "premier.html").is_file()
        assert (output / "en" / "index.html").is_file()

    def test_run_to_explicit_directory(self, site_settings, source_dir, tmp_path):
        make_site_tree(source_dir)

        SitePipeline(site_settings).run(tmp_path / "elsewhere")

        assert (tmp_path / "elsewhere" / "articles" / "index.json").is_file()
