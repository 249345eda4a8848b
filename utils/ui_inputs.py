"""Parsing for the free-text distance sweep on the Streamlit page."""

from __future__ import annotations

import math
from typing import List


def parse_distance_series(label: str, raw_text: str) -> List[float]:
    """Return the distances (km) listed in ``raw_text``, sorted and de-duplicated.

    Entries are separated by commas, semicolons or newlines. Raises
    ``ValueError`` naming the offending entry when one is not a finite,
    non-negative number, so the form can report it before any sweep runs.
    """

    tokens = raw_text.replace(";", ",").replace(",", "\n").splitlines()
    distances = set()
    for token in (t.strip() for t in tokens):
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            raise ValueError(f"{label} contains a non-numeric entry: '{token}'") from None
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{label} entries must be non-negative distances, got '{token}'")
        distances.add(value)
    return sorted(distances)
