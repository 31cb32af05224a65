from __future__ import annotations

import sys
import webbrowser
from typing import Callable


def open_info_page(url: str, opener: Callable[[str], object] = webbrowser.open) -> None:
    # Fire-and-forget: callers never learn whether the page actually opened.
    try:
        opener(url)
    except Exception as e:
        print(f"Error opening URL {url}: {type(e).__name__}: {e}", file=sys.stderr)
