"""Use-code vocabulary and hierarchical prefix matching.

Codes follow the annexed use table: a two-digit item number, then
underscore-separated subdivisions, e.g. ``"06_ro_2"`` is item (6), ro,
sub-item 2.  A rule covering a whole item or subdivision lists its prefix
(``"06"`` or ``"06_ro"``).
"""

from __future__ import annotations

from collections.abc import Iterable

from firecode.config import COMPOSITE_USE_PREFIXES

ALL_USE_CODES: tuple[str, ...] = (
    "01_i", "01_ro",
    "02_i", "02_ro", "02_ha", "02_ni",
    "03_i", "03_ro",
    "04",
    "05_i", "05_ro",
    "06_i_1", "06_i_2", "06_i_3", "06_i_4",
    "06_ro_1", "06_ro_2", "06_ro_3", "06_ro_4", "06_ro_5",
    "06_ha_1", "06_ha_2", "06_ha_3", "06_ha_4", "06_ha_5",
    "06_ni",
    "07", "08",
    "09_i", "09_ro",
    "10", "11",
    "12_i", "12_ro",
    "13_i", "13_ro",
    "14", "15",
    "16_i", "16_ro", "16_2", "16_3",
    "17", "18", "19", "20",
)

# Item groups that recur across several articles
SPECIFIED_USES = ("01", "02", "03", "04", "05_i", "06", "09_i")
"""Items (1)-(4), (5)i, (6) and (9)i: the "specified" (public-facing) uses."""


def code_matches(code: str | None, prefixes: Iterable[str]) -> bool:
    """Return True if *code* starts with any of *prefixes*.

    A missing or empty code never matches.
    """
    if not code:
        return False
    return any(code.startswith(prefix) for prefix in prefixes)


def is_composite(code: str | None) -> bool:
    """Return True for composite-use (mixed tenant) codes."""
    return code_matches(code, COMPOSITE_USE_PREFIXES)
