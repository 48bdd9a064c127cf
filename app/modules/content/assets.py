"""Emitted build assets and static file fingerprinting."""

import hashlib
import shutil
from pathlib import Path, PurePosixPath
from typing import Dict, Iterator, Optional, Tuple, Union

from bs4 import BeautifulSoup

from infrastructure.logging import get_module_logger
from modules.content.models import EmittedAsset

logger = get_module_logger()

FONT_SUFFIXES = {".ttf", ".otf", ".woff", ".woff2"}
IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".svg", ".gif", ".tiff", ".bmp", ".ico", ".webp"}
REFERENCE_ATTRIBUTES = (("link", "href"), ("script", "src"), ("img", "src"), ("source", "src"))


class AssetBundle:
    """Named files produced by one build, in emission order."""

    def __init__(self):
        self._assets: Dict[str, EmittedAsset] = {}

    def emit(self, file_name: str, source: Union[str, bytes]) -> EmittedAsset:
        if file_name in self._assets:
            logger.warning("asset_overwritten", file_name=file_name)
        asset = EmittedAsset(file_name=file_name, source=source)
        self._assets[file_name] = asset
        return asset

    def get(self, file_name: str) -> Optional[EmittedAsset]:
        return self._assets.get(file_name)

    def __contains__(self, file_name: str) -> bool:
        return file_name in self._assets

    def __iter__(self) -> Iterator[EmittedAsset]:
        return iter(self._assets.values())

    def __len__(self) -> int:
        return len(self._assets)

    def write(self, output_dir: Path, empty: bool = True) -> None:
        """Write every asset below output_dir."""
        output_dir = Path(output_dir)
        if empty and output_dir.exists():
            shutil.rmtree(output_dir)
        for asset in self:
            target = output_dir.joinpath(*PurePosixPath(asset.file_name).parts)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(asset.content)
        logger.info("assets_written", output_dir=str(output_dir), count=len(self))


def fingerprinted_name(relative: PurePosixPath, content: bytes) -> str:
    """Output name of a static file.

    Fonts go to fonts/ and images to img/ under their own names; anything
    else goes to assets/ with a content hash.
    """
    suffix = relative.suffix.lower()
    if suffix in FONT_SUFFIXES:
        return f"fonts/{relative.name}"
    if suffix in IMAGE_SUFFIXES:
        return f"img/{relative.name}"
    digest = hashlib.sha256(content).hexdigest()[:8]
    return f"assets/{relative.stem}-{digest}{relative.suffix}"


def emit_static_assets(static_dir: Path, bundle: AssetBundle) -> Dict[str, str]:
    """Emit every file of static_dir into the bundle.

    Returns:
        Mapping of source URL (``/main.css``) to emitted URL
        (``/assets/main-1a2b3c4d.css``).
    """
    static_dir = Path(static_dir)
    if not static_dir.is_dir():
        logger.info("static_dir_missing", static_dir=str(static_dir))
        return {}

    mapping = {}
    for path in sorted(p for p in static_dir.rglob("*") if p.is_file()):
        relative = PurePosixPath(path.relative_to(static_dir).as_posix())
        content = path.read_bytes()
        file_name = fingerprinted_name(relative, content)
        bundle.emit(file_name, content)
        mapping[f"/{relative}"] = f"/{file_name}"

    logger.info("static_assets_emitted", count=len(mapping))
    return mapping


def rewrite_asset_references(markup: str, mapping: Dict[str, str]) -> Tuple[str, int]:
    """Point href/src attributes at emitted asset names.

    Returns:
        The rewritten markup and the number of references changed.
    """
    if not mapping:
        return markup, 0

    soup = BeautifulSoup(markup, "html.parser")
    changed = 0
    for tag_name, attribute in REFERENCE_ATTRIBUTES:
        for tag in soup.find_all(tag_name):
            value = tag.get(attribute)
            if value in mapping:
                tag[attribute] = mapping[value]
                changed += 1
    return str(soup), changed
