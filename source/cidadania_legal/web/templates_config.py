from pathlib import Path

from cidadania_legal.models.content import CategoryIcon
from cidadania_legal.models.navigation import Route
from fastapi.templating import Jinja2Templates

from . import strings

# Symbolic icon tags resolved to the glyphs the templates render
ICON_GLYPHS: dict[CategoryIcon, str] = {
    CategoryIcon.SHOPPING_CART: "🛒",
    CategoryIcon.WORK: "💼",
    CategoryIcon.FAVORITE: "❤️",
    CategoryIcon.FAMILY: "👪",
    CategoryIcon.POLICE: "🚓",
    CategoryIcon.GAVEL: "⚖️",
    CategoryIcon.ACCOUNT_BALANCE: "🏛️",
    CategoryIcon.FEMALE: "♀️",
    CategoryIcon.CAMPAIGN: "📢",
}


def icon_glyph(icon: CategoryIcon) -> str:
    """Resolves a symbolic icon tag to a renderable glyph."""
    return ICON_GLYPHS.get(icon, "•")


# Create a single shared instance of Jinja2Templates
templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

# Inject strings and routes into the global environment so they are available in all templates
templates.env.globals["strings"] = strings
templates.env.globals["Route"] = Route
templates.env.filters["icon"] = icon_glyph
