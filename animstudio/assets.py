"""Asset import entry point."""

from __future__ import annotations

from typing import Iterable


class Assets:
    """Receives paths of files chosen for import."""

    def import_assets(self, paths: Iterable[str]) -> None:
        """Report each path to be imported on standard output."""
        for path in paths:
            print(f"Paths: {path}")