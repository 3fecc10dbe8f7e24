"""Tuning constants for family search, rescue clustering and the dashboard.

The scoring weights and the stopword list are empirical.  Changing any of
them changes family-search ranking and rescue-cluster labels on the
coordinator dashboard.

Family search weights
---------------------
SUBSTRING    +100   query and name contain one another
FULL_NAME    +50 - 15 * distance, when the whole-name distance is < 3
TOKEN        +30 per contained token pair, else +20 when distance < 3
VILLAGE      +40 on containment, else +20 when distance < 3
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Family search scoring
# ---------------------------------------------------------------------------

SUBSTRING_MATCH_SCORE: int = 100

FULL_NAME_BASE_SCORE: int = 50
FULL_NAME_DISTANCE_PENALTY: int = 15

TOKEN_CONTAINMENT_SCORE: int = 30
TOKEN_FUZZY_SCORE: int = 20

VILLAGE_CONTAINMENT_SCORE: int = 40
VILLAGE_FUZZY_SCORE: int = 20

# Edit distances strictly below this count as a fuzzy hit
MAX_EDIT_DISTANCE: int = 3

# ---------------------------------------------------------------------------
# Rescue report clustering
# ---------------------------------------------------------------------------

MIN_TOKEN_LENGTH: int = 3
MIN_SHARED_TOKENS: int = 2
LABEL_TOKEN_COUNT: int = 4
LABEL_SEPARATOR: str = " / "

STOPWORDS: frozenset[str] = frozenset({
    # English function words
    "the", "a", "an", "is", "in", "at", "to", "of", "and", "or", "my",
    "near", "from", "not", "could", "cannot", "can", "still", "was", "were",
    "has", "have", "had", "are", "am", "be", "been", "do", "did", "does",
    "i", "he", "she", "they", "we", "it",
    "its", "his", "her", "their", "our", "this", "that", "with", "for",
    "on", "up", "out", "but", "by", "who",
    # Numerals
    "two", "three", "four", "five",
    # Words every trapped report repeats
    "house", "stuck", "woman", "elderly",
    "father", "mother", "brother", "sister", "neighbors",
})

# ---------------------------------------------------------------------------
# Camps, resources and dispatch
# ---------------------------------------------------------------------------

DEFAULT_CAMPS: tuple[str, ...] = (
    "Meppadi Relief Camp",
    "Chooralmala School Camp",
    "Kalpetta Government Camp",
    "Mananthavady Town Camp",
    "Sulthan Bathery Camp",
)

DEFAULT_TEAM_SIZE: int = 3
DEFAULT_RESOURCE_STOCK: int = 100

# Camp stock counters drawn down by a registration's needs
STOCKED_RESOURCES: tuple[str, ...] = ("food", "water", "medicine")

# Needs considered when suggesting transfers between camps
REBALANCED_NEEDS: tuple[str, ...] = ("FOOD", "WATER", "MEDICINE", "SHELTER")

DISPATCH_TYPES: frozenset[str] = frozenset({"rescue", "medical"})
DISPATCH_ACTIVE: str = "Dispatched"
DISPATCH_WAITING: str = "Waiting for People"

# Minutes since a camp's last registration
FRESH_CAMP_MINUTES: int = 30
AGING_CAMP_MINUTES: int = 60
