from __future__ import annotations

from typing import Iterable, Optional

from .state import ChooserEntry, build_entries, filter_entries


def run_chooser(pairs: Iterable[tuple[str, Optional[str]]]) -> Optional[str]:
    from .app import ChooserApp

    app = ChooserApp(build_entries(pairs))
    return app.run()


__all__ = ["ChooserEntry", "build_entries", "filter_entries", "run_chooser"]
