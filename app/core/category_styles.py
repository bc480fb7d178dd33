# bestseatosky/app/core/category_styles.py
"""
Presentation metadata for directory categories.

One registry keyed by category slug. Templates and views go through
style_for(), which always returns a Style.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Style:
    gradient: str
    bg: str
    text: str
    border: str
    accent: str
    active_bg: str
    active_text: str = 'text-white'
    icon: str = '📍'
    verb: str = ''


CATEGORY_STYLES = {
    'eat': Style(
        gradient='from-orange-500 to-red-600', bg='bg-orange-50', text='text-amber-700',
        border='border-orange-200', accent='bg-amber-700', active_bg='bg-amber-700',
        icon='🍽️', verb='Eat',
    ),
    'stay': Style(
        gradient='from-indigo-500 to-purple-600', bg='bg-indigo-50', text='text-indigo-700',
        border='border-indigo-200', accent='bg-indigo-700', active_bg='bg-indigo-700',
        icon='🏔️', verb='Stay',
    ),
    'play': Style(
        gradient='from-emerald-500 to-green-600', bg='bg-emerald-50', text='text-emerald-700',
        border='border-emerald-200', accent='bg-emerald-700', active_bg='bg-emerald-700',
        icon='⛷️', verb='Play',
    ),
    'visit': Style(
        gradient='from-pink-500 to-rose-600', bg='bg-pink-50', text='text-pink-700',
        border='border-pink-200', accent='bg-pink-700', active_bg='bg-pink-700',
        icon='🌲', verb='Visit',
    ),
    'shop': Style(
        gradient='from-amber-500 to-red-500', bg='bg-orange-50', text='text-orange-700',
        border='border-orange-200', accent='bg-orange-700', active_bg='bg-orange-700',
        icon='🛍️', verb='Shop',
    ),
    'services': Style(
        gradient='from-sky-500 to-indigo-600', bg='bg-sky-50', text='text-sky-700',
        border='border-sky-200', accent='bg-sky-700', active_bg='bg-sky-700',
        icon='🧭', verb='Find Services',
    ),
}

# The 'eat' palette with a neutral icon and no verb
DEFAULT_STYLE = Style(
    gradient='from-orange-500 to-red-600', bg='bg-orange-50', text='text-amber-700',
    border='border-orange-200', accent='bg-amber-700', active_bg='bg-amber-700',
)

# Order of the top-level category paths (navigation, sitemap)
CATEGORY_SLUGS = tuple(CATEGORY_STYLES)


def style_for(category_slug):
    return CATEGORY_STYLES.get(category_slug or '', DEFAULT_STYLE)


def category_heading(category):
    """'Best Places to Eat' style heading for a category page."""
    verb = style_for(category.slug).verb or category.name
    return f"Best Places to {verb}"
