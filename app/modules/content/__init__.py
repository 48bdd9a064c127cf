"""Build-time content pipeline.

Main components:
- articles: ArticleProcessor (markdown + frontmatter -> article pages)
- rendering: markdown rendering, Pygments highlighting, read time
- templates: ArticleTemplate
- assets: AssetBundle, static fingerprinting, reference rewriting
- localization: per-language home pages
- pipeline: SitePipeline tying it together
"""

from modules.content.articles import ArticleProcessor, sort_newest_first
from modules.content.assets import AssetBundle
from modules.content.errors import ContentBuildError
from modules.content.localization import LocalizedPageBuilder, localize_html
from modules.content.models import Article, EmittedAsset
from modules.content.pipeline import SitePipeline
from modules.content.templates import ArticleTemplate

__all__ = [
    "ArticleProcessor",
    "sort_newest_first",
    "AssetBundle",
    "ContentBuildError",
    "LocalizedPageBuilder",
    "localize_html",
    "Article",
    "EmittedAsset",
    "SitePipeline",
    "ArticleTemplate",
]
