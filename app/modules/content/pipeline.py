"""The site build: static assets, home page, articles, localized pages."""

import json
from pathlib import Path
from typing import List, Optional

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.models import TranslationKey
from infrastructure.i18n.translator import Translator
from infrastructure.logging import bind_log_context, get_module_logger
from modules.content.articles import ArticleProcessor, sort_newest_first
from modules.content.assets import (
    AssetBundle,
    emit_static_assets,
    rewrite_asset_references,
)
from modules.content.errors import ContentBuildError
from modules.content.localization import LocalizedPageBuilder
from modules.content.models import Article
from modules.content.templates import ArticleTemplate

logger = get_module_logger()

READ_TIME_KEY = TranslationKey.from_string("article.read_time")
ARTICLES_OUTPUT_DIR = "articles"


class SitePipeline:
    """Builds the whole site into an AssetBundle.

    Missing optional inputs (articles, static files, home page,
    translations) are logged and skipped; a missing template while
    articles exist stops the build.
    """

    def __init__(self, settings: Settings, translator: Optional[Translator] = None):
        self.settings = settings
        self.build_settings = settings.build
        self._translator = translator
        self._translator_loaded = translator is not None

    @property
    def translator(self) -> Optional[Translator]:
        if not self._translator_loaded:
            self._translator_loaded = True
            localization_dir = self.build_settings.resolve(
                self.build_settings.LOCALIZATION_DIR
            )
            try:
                self._translator = create_translator(
                    translations_dir=localization_dir,
                    fallback_language=self.settings.languages.DEFAULT_LANGUAGE,
                )
            except ValueError as e:
                logger.warning("localization_unavailable", error=str(e))
        return self._translator

    def read_time_label(self, minutes: int) -> str:
        """Read time label in the default language.

        Raises:
            ContentBuildError: If the label has a placeholder other than minutes.
        """
        translator = self.translator
        language = self.settings.languages.DEFAULT_LANGUAGE
        if translator is not None and translator.has_message(READ_TIME_KEY, language):
            try:
                return translator.translate_message(
                    READ_TIME_KEY, language, {"minutes": minutes}
                )
            except ValueError as e:
                raise ContentBuildError(
                    f"Invalid {READ_TIME_KEY} translation: {e}", source=language
                ) from e
        try:
            return self.build_settings.READ_TIME_TEMPLATE.format(minutes=minutes)
        except (KeyError, IndexError, ValueError) as e:
            raise ContentBuildError(f"Invalid READ_TIME_TEMPLATE: {e!r}") from e

    def build(self) -> AssetBundle:
        """Produce every output file in memory."""
        bundle = AssetBundle()
        with bind_log_context(source_dir=str(self.build_settings.SOURCE_DIR)):
            logger.info("build_started")
            asset_map = emit_static_assets(
                self.build_settings.resolve(self.build_settings.STATIC_DIR), bundle
            )
            home_html = self._emit_home(bundle, asset_map)
            articles = self._emit_articles(bundle, asset_map)
            if home_html is not None:
                self._emit_localized_pages(bundle, home_html)
            logger.info(
                "build_finished", asset_count=len(bundle), article_count=len(articles)
            )
        return bundle

    def run(self, output_dir: Optional[Path] = None) -> AssetBundle:
        """Build and write the site to output_dir (default: OUTPUT_DIR)."""
        bundle = self.build()
        bundle.write(
            output_dir or self.build_settings.OUTPUT_DIR,
            empty=self.build_settings.EMPTY_OUT_DIR,
        )
        return bundle

    def _emit_home(self, bundle: AssetBundle, asset_map: dict) -> Optional[str]:
        path = self.build_settings.resolve(self.build_settings.HOME_PAGE_PATH)
        if not path.is_file():
            logger.warning("home_page_missing", path=str(path))
            return None
        home_html, _ = rewrite_asset_references(path.read_text(encoding="utf-8"), asset_map)
        bundle.emit("index.html", home_html)
        return home_html

    def _emit_articles(self, bundle: AssetBundle, asset_map: dict) -> List[Article]:
        articles_dir = self.build_settings.resolve(self.build_settings.ARTICLES_DIR)
        if not articles_dir.is_dir():
            logger.warning("articles_dir_missing", articles_dir=str(articles_dir))
            return []
        if not any(articles_dir.glob("*.md")):
            logger.warning("no_markdown_articles", articles_dir=str(articles_dir))
            return []

        template_path = self.build_settings.resolve(self.build_settings.TEMPLATE_PATH)
        if not template_path.is_file():
            raise ContentBuildError("Article template not found", source=str(template_path))

        processor = ArticleProcessor(
            template=ArticleTemplate.from_file(template_path),
            site_name=self.settings.site.SITE_NAME,
            words_per_minute=self.build_settings.WORDS_PER_MINUTE,
            read_time_label=self.read_time_label,
        )
        articles = processor.process_directory(articles_dir)

        article_prefix = self.settings.transitions.ARTICLE_PATH_PREFIX
        for article in articles:
            page_html, _ = rewrite_asset_references(article.page_html, asset_map)
            bundle.emit(f"{ARTICLES_OUTPUT_DIR}/{article.slug}.html", page_html)

        index = [a.to_index_entry(article_prefix) for a in sort_newest_first(articles)]
        bundle.emit(
            f"{ARTICLES_OUTPUT_DIR}/index.json",
            json.dumps(index, indent=2, ensure_ascii=False),
        )
        logger.info("article_index_generated", count=len(index))
        return articles

    def _emit_localized_pages(self, bundle: AssetBundle, home_html: str) -> None:
        translator = self.translator
        if translator is None:
            return
        for asset in LocalizedPageBuilder(translator).build(home_html):
            bundle.emit(asset.file_name, asset.source)
