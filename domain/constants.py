"""Domain-level constants for the verb catalog."""

# Level id -> display color
DEFAULT_LEVEL_COLORS: dict[str, str] = {
    "remember": "#0d6efd",
    "understand": "#198754",
    "apply": "#20c997",
    "analyse": "#6f42c1",
    "evaluate": "#fd7e14",
    "create": "#dc3545",
}
NEUTRAL_LEVEL_COLOR = "#6c757d"

# Rank given to levels with no usable `order` (raised past the largest declared rank if needed)
UNRANKED_ORDER = 999

DEFAULT_TAXONOMY_ID = "bloom-revised"

# Suitability tiers, most defensible first
SUITABILITY_TIERS = ("high", "context-dependent", "medium", "low")
SUITABILITY_RANK: dict[str, int] = {tier: i for i, tier in enumerate(SUITABILITY_TIERS)}
UNKNOWN_SUITABILITY_RANK = 9
DEFAULT_SUITABILITY = "medium"
