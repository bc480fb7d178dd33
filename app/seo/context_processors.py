# bestseatosky/app/seo/context_processors.py
from django.db import DatabaseError

from .models import PageMetadata


def seo_tags(request):
    """
    Exposes the PageMetadata override for the current path, if one exists.
    Templates prefer it over the title and description the view provides.
    """
    try:
        metadata = PageMetadata.objects.filter(page_path=request.path).first()
    except DatabaseError:
        metadata = None
    return {'seo_override': metadata}
