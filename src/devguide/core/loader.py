"""Guide content loading.

Resolves catalog entries into presentation-ready sections. Asset reads run
in a worker thread so the event loop is never blocked. Read failures are
reported as content text rather than raised to the caller.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import TypedDict

from devguide.core.catalog import GUIDE_CATALOG, GuideCatalog, GuideEntry
from devguide.core.sources import AssetSource, PackageAssetSource

logger = logging.getLogger(__name__)


class GuideSectionDict(TypedDict, total=False):
    """Dictionary representation of a guide section."""

    id: int
    title: str
    content: str


@dataclass(frozen=True)
class GuideSection:
    """Resolved guide. Content is None when only metadata was requested."""

    id: int
    title: str
    content: str | None = None

    def to_dict(self) -> GuideSectionDict:
        """Convert to dictionary for JSON serialization."""
        result: GuideSectionDict = {"id": self.id, "title": self.title}
        if self.content is not None:
            result["content"] = self.content
        return result


class GuideLoader:
    """Loads guide sections from a catalog and an asset source.

    Holds no state between calls: every section is built fresh and every
    read opens and closes its own handle.
    """

    def __init__(
        self,
        catalog: GuideCatalog = GUIDE_CATALOG,
        source: AssetSource | None = None,
    ) -> None:
        """Initialize loader.

        Args:
            catalog: Guide catalog to resolve ids against
            source: Asset source for guide content (default: bundled assets)
        """
        self._catalog = catalog
        self._source = source if source is not None else PackageAssetSource()

    @property
    def catalog(self) -> GuideCatalog:
        """Guide catalog ids are resolved against."""
        return self._catalog

    @property
    def source(self) -> AssetSource:
        """Asset source guide content is read from."""
        return self._source

    async def resolve_content(self, locator: str) -> str:
        """Read the text of an asset.

        Args:
            locator: Asset locator (e.g., "guides/ui_layer_guide.md")

        Returns:
            Asset text verbatim, or an error message if the read failed
        """
        try:
            return await asyncio.to_thread(self._source.read_text, locator)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to load {locator}: {e}")
            return f"Error loading content for {locator}: {e}"

    async def get_section(self, guide_id: int) -> GuideSection | None:
        """Get a guide section with its content loaded.

        Args:
            guide_id: Guide identifier

        Returns:
            GuideSection with content, or None if the id is not in the catalog
        """
        entry = self._catalog.find_by_id(guide_id)
        if entry is None:
            logger.debug(f"Guide {guide_id} not found")
            return None

        content = await self.resolve_content(entry.locator)
        return GuideSection(id=entry.id, title=entry.title, content=content)

    def get_section_list(self) -> list[GuideSection]:
        """Get all guide sections without content, in catalog order."""
        return [_section_without_content(entry) for entry in self._catalog.list_entries()]


def _section_without_content(entry: GuideEntry) -> GuideSection:
    return GuideSection(id=entry.id, title=entry.title)
