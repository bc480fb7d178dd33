# bestseatosky/app/seo/sitemaps.py
from django.conf import settings
from django.contrib.sitemaps import Sitemap
from django.urls import reverse

from blog.models import Post
from core.category_styles import CATEGORY_SLUGS
from directory.models import Listing
from .models import SeoPage


class CanonicalSitemap(Sitemap):
    protocol = 'https'

    def get_domain(self, site=None):
        return settings.CANONICAL_HOST


class StaticViewSitemap(CanonicalSitemap):
    changefreq = 'daily'

    def items(self):
        return ['home', *CATEGORY_SLUGS, 'guide_list', 'blog_list']

    def location(self, item):
        if item == 'home':
            return reverse('core:home')
        if item == 'guide_list':
            return reverse('seo:guide_list')
        if item == 'blog_list':
            return reverse('blog:post_list')
        return reverse('directory:category', kwargs={'category_slug': item})

    def priority(self, item):
        return 1.0 if item == 'home' else 0.9


class ListingSitemap(CanonicalSitemap):
    changefreq = 'weekly'
    priority = 0.8

    def items(self):
        return Listing.objects.published().select_related('category').order_by('pk')

    def lastmod(self, listing):
        return listing.updated_at


class GuideSitemap(CanonicalSitemap):
    changefreq = 'weekly'
    priority = 0.8

    def items(self):
        return SeoPage.objects.published().order_by('pk')

    def lastmod(self, page):
        return page.updated_at


class BlogPostSitemap(CanonicalSitemap):
    changefreq = 'monthly'
    priority = 0.6

    def items(self):
        return Post.objects.published().order_by('-published_at')

    def lastmod(self, post):
        return post.updated_at


sitemaps = {
    'static': StaticViewSitemap,
    'listings': ListingSitemap,
    'guides': GuideSitemap,
    'blog': BlogPostSitemap,
}
