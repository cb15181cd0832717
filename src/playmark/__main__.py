"""Convert the bundled ``Markdown.md`` to a playground and back, printing both.

Only warnings and errors are logged; the per-run summary record stays at
``INFO`` and is not shown.
"""

from __future__ import annotations

import logging
import sys

from playmark.observability import set_level
from playmark.pipeline import load_markdown, run_pipeline


def main() -> int:
    set_level(logging.WARNING)
    result = run_pipeline(load_markdown())
    print(result.playground)
    print(result.markdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())
