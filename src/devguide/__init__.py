"""Bundled Android development guides.

Exposes the fixed guide catalog and the loader that resolves guide content.
"""

from .core.catalog import GUIDE_CATALOG, GuideCatalog, GuideEntry
from .core.loader import GuideLoader, GuideSection

__all__ = ["GUIDE_CATALOG", "GuideCatalog", "GuideEntry", "GuideLoader", "GuideSection"]
