"""Guide catalog.

Fixed, ordered table of guide metadata. Entries are identified by integer
ids assigned once in definition order. The catalog performs no I/O; content
is resolved separately by the loader.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from devguide.core.types import Locator


@dataclass(frozen=True)
class GuideEntry:
    """Catalog row: identifier, display title and content locator."""

    id: int
    title: str
    locator: Locator


class GuideCatalog:
    """Immutable guide table with O(1) id lookups.

    Stores entries in a tuple preserving definition order, with a
    separate id index for lookups.
    """

    __slots__ = ("_entries", "_id_index")

    def __init__(self, entries: Iterable[GuideEntry]) -> None:
        """Initialize catalog.

        Args:
            entries: Guide entries in display order

        Raises:
            ValueError: If ids are duplicated or an entry has an empty
                title or locator
        """
        self._entries = tuple(entries)
        self._id_index: dict[int, int] = {}
        for idx, entry in enumerate(self._entries):
            if entry.id in self._id_index:
                raise ValueError(f"Duplicate guide id: {entry.id}")
            if not entry.title:
                raise ValueError(f"Guide {entry.id} has an empty title")
            if not entry.locator:
                raise ValueError(f"Guide {entry.id} has an empty locator")
            self._id_index[entry.id] = idx

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[int, str, str]]) -> GuideCatalog:
        """Build a catalog from (id, title, locator) triples."""
        return cls(
            GuideEntry(id=guide_id, title=title, locator=Locator(locator))
            for guide_id, title, locator in rows
        )

    def list_entries(self) -> tuple[GuideEntry, ...]:
        """Return all entries in definition order."""
        return self._entries

    def find_by_id(self, guide_id: int) -> GuideEntry | None:
        """Get entry by id.

        Args:
            guide_id: Guide identifier

        Returns:
            GuideEntry if found, None otherwise
        """
        idx = self._id_index.get(guide_id)
        if idx is None:
            return None
        return self._entries[idx]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[GuideEntry]:
        return iter(self._entries)

    def __contains__(self, guide_id: object) -> bool:
        return guide_id in self._id_index


GUIDE_CATALOG = GuideCatalog.from_rows(
    [
        # Initial setup & core concepts
        (1, "Setting Up Your Development Environment", "guides/tools_and_environment_setup.md"),
        (2, "Mastering Version Control with Git", "guides/version_control_setup.md"),
        (3, "Designing Your App's Architecture", "guides/architecture_setup.md"),
        (4, "Building the Data Layer", "guides/data_layer_setup.md"),
        (5, "Crafting the User Interface (UI) Layer", "guides/ui_layer_guide.md"),
        (6, "Managing Project Dependencies", "guides/dependencies_setup.md"),
        (7, "Implementing Dependency Injection", "guides/dependency_injection_setup.md"),
        # Advanced topics & features
        (8, "Integrating with External Services & APIs", "guides/integrations_guide.md"),
        (9, "Understanding Background Tasks & WorkManager", "guides/background_tasks_guide.md"),
        (10, "Effective Concurrency in Android", "guides/concurrency_guide.md"),
        # Performance & optimization
        (11, "Optimizing Network Usage & Efficiency", "guides/network_efficiency_guide.md"),
        (12, "Optimizing Memory & CPU Performance", "guides/memory_and_cpu_optimization_guide.md"),
        (13, "Maximizing Battery Life", "guides/battery_optimization_guide.md"),
        (14, "Reducing Your App's Size", "guides/app_size_guide.md"),
        # Quality & reliability
        (15, "Enhancing App Security", "guides/security_guide.md"),
        (16, "Leveraging Debugging Tools", "guides/debugging_tools_guide.md"),
        (17, "Fundamentals of Unit Testing", "guides/unit_testing_guide.md"),
        (18, "Implementing UI Tests", "guides/ui_testing_guide.md"),
        (19, "Writing Instrumentation Tests", "guides/instrumentation_testing_guide.md"),
        (20, "Automating Builds & CI/CD Pipelines", "guides/automation_and_cicd_guide.md"),
        # Best practices & conclusion
        (21, "Adopting Android Development Best Practices", "guides/android_best_practices.md"),
    ]
)


def list_entries() -> tuple[GuideEntry, ...]:
    """Return all reference catalog entries in definition order."""
    return GUIDE_CATALOG.list_entries()


def find_by_id(guide_id: int) -> GuideEntry | None:
    """Get reference catalog entry by id, None if absent."""
    return GUIDE_CATALOG.find_by_id(guide_id)
