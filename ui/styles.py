from rich.style import Style
from rich.text import Text
from rich.theme import Theme

BRAND_GREEN = "#58CC02"
STREAK_ORANGE = "#FF9600"
XP_GOLD = "#FFC800"
SUCCESS_GREEN = "#27AE60"
ERROR_RED = "#C0392B"
INFO_BLUE = "#3498DB"
MUTED_GRAY = "#7F8C8D"
TEXT_WHITE = "#FFFFFF"

TIER_COLORS = {
    "bronze": "#CD7F32",
    "silver": "#C0C0C0",
    "gold": "#FFD700",
    "platinum": "#E5E4E2",
}

DEFAULT_THEME = Theme(
    {
        "primary": Style(color=BRAND_GREEN, bold=True),
        "secondary": Style(color=XP_GOLD, bold=True),
        "success": Style(color=SUCCESS_GREEN),
        "error": Style(color=ERROR_RED, bold=True),
        "info": Style(color=INFO_BLUE),
        "muted": Style(color=MUTED_GRAY),
        "option_label": Style(color=XP_GOLD, bold=True),
        "option_text": Style(color=TEXT_WHITE),
        "title": Style(color=BRAND_GREEN, bold=True),
        "subtitle": Style(color=MUTED_GRAY),
    }
)


def get_tier_style(tier: str) -> Style:
    """Get color style for an achievement tier."""
    return Style(color=TIER_COLORS.get(tier.lower(), TEXT_WHITE), bold=True)


def get_energy_style(energy: int, max_energy: int) -> Style:
    """Get color style based on remaining energy."""
    ratio = energy / max_energy if max_energy else 0
    if ratio >= 0.6:
        return Style(color=SUCCESS_GREEN, bold=True)
    elif ratio > 0:
        return Style(color=XP_GOLD)
    else:
        return Style(color=ERROR_RED, bold=True)


def create_energy_hearts(energy: int, max_energy: int) -> Text:
    """Render energy as filled and empty hearts."""
    hearts = Text()
    hearts.append("♥" * energy, Style(color=ERROR_RED, bold=True))
    hearts.append("♡" * (max_energy - energy), Style(color=MUTED_GRAY))
    return hearts
