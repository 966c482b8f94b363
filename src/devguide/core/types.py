"""Core type definitions."""

from typing import NewType

# Relative asset path (e.g., "guides/ui_layer_guide.md")
# Opaque to everything except asset sources
Locator = NewType("Locator", str)
