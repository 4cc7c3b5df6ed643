"""Order number extraction from pasted free text."""
from __future__ import annotations

import re
from typing import List

ORDER_NUMBER_RE = re.compile(r"[0-9]{2,}")


def parse_order_numbers(text: str | None) -> List[str]:
    """Distinct runs of two or more digits, in first-seen order."""
    seen: dict[str, None] = {}
    for match in ORDER_NUMBER_RE.finditer(text or ""):
        seen.setdefault(match.group(0), None)
    return list(seen)
