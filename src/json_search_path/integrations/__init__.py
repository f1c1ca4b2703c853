"""Integrations subpackage for json-search-path.

Contains the pytest plugin, auto-discovered via the ``pytest11`` entry point
declared in pyproject.toml.  It has no dependency beyond pytest itself.
"""

from __future__ import annotations

__all__: list[str] = []
