# bestseatosky/app/core/templatetags/site_tags.py
import json

from django import template
from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from core.category_styles import style_for

register = template.Library()

# Same escaping Django's json_script uses, so the payload can't close the tag
_JSON_SCRIPT_ESCAPES = {
    ord('>'): '\\u003E',
    ord('<'): '\\u003C',
    ord('&'): '\\u0026',
}


@register.filter(name='category_style')
def category_style(category_slug):
    """
    Usage: {% with style=listing.category_slug|category_style %}...{% endwith %}
    """
    return style_for(category_slug)


@register.simple_tag
def json_ld(data):
    """Renders data as a <script type="application/ld+json"> block."""
    payload = json.dumps(data, cls=DjangoJSONEncoder).translate(_JSON_SCRIPT_ESCAPES)
    return format_html('<script type="application/ld+json">{}</script>', mark_safe(payload))


@register.inclusion_tag('core/partials/stars.html')
def stars(rating, size='text-sm'):
    filled = int(rating or 0)
    return {'stars': [index < filled for index in range(5)], 'size': size}


@register.inclusion_tag('core/partials/price_level.html')
def price_level(level, size='text-sm'):
    level = level or 0
    return {'free': level == 0, 'dollars': [index < level for index in range(4)], 'size': size}
