# bestseatosky/app/blog/views.py
from django.shortcuts import render, get_object_or_404

from seo.selectors import get_all_seo_pages
from seo.structured_data import absolute_url, article_schema
from .models import Post

RELATED_GUIDE_COUNT = 3


def post_list(request):
    """
    Public page showing all PUBLISHED blog posts, newest first.
    """
    posts = Post.objects.published().order_by('-published_at')
    context = {
        'posts': posts,
        'meta_title': 'Sea to Sky Blog | Travel Tips & Local Guides',
        'meta_description': (
            'Travel tips, local guides, and insider knowledge for exploring Squamish, '
            'Whistler, and Pemberton along the Sea to Sky corridor.'
        ),
    }
    return render(request, 'blog/post_list.html', context)

def post_detail(request, slug):
    """
    Public page showing a single PUBLISHED blog post.
    """
    post = get_object_or_404(Post.objects.published(), slug=slug)

    context = {
        'post': post,
        'related_guides': get_all_seo_pages()[:RELATED_GUIDE_COUNT],
        'schema': article_schema(post),
        'meta_title': f"{post.title} | Best Sea to Sky Blog",
        'meta_description': post.meta_description or post.excerpt,
        'canonical_url': absolute_url(post.get_absolute_url()),
        'og_type': 'article',
        'og_image': post.featured_image,
    }
    return render(request, 'blog/post_detail.html', context)
