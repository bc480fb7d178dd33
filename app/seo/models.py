# bestseatosky/app/seo/models.py
from django.db import models
from django.urls import reverse

from directory.models import PublishStatus


class PageMetadata(models.Model):
    page_name = models.CharField(max_length=100, unique=True, help_text="A unique name for this page, e.g., 'Home Page', 'Advertise'.")
    page_path = models.CharField(max_length=255, unique=True, help_text="The exact path, e.g., '/', '/advertise/', '/blog/'.")
    meta_title = models.CharField(max_length=255, help_text="The title tag for the page (60 chars).")
    meta_description = models.CharField(max_length=160, help_text="The meta description for the page (160 chars).")

    class Meta:
        ordering = ['page_path']
        verbose_name_plural = "Page metadata"

    def __str__(self):
        return f"{self.page_name} ({self.page_path})"


class SeoPageQuerySet(models.QuerySet):
    def published(self):
        return self.filter(status=PublishStatus.PUBLISHED)


class SeoPage(models.Model):
    """
    A curated "best of" guide. Each of category, tag and town narrows the
    listings shown; a blank one places no constraint on that axis.
    """
    slug = models.SlugField(max_length=255, unique=True)
    title = models.CharField(max_length=255)
    meta_description = models.CharField(max_length=300, blank=True)
    h1_text = models.CharField(max_length=255, blank=True, help_text="Page heading, defaults to the title.")
    intro_content = models.TextField(blank=True)

    category = models.ForeignKey('directory.Category', related_name='seo_pages', on_delete=models.SET_NULL, null=True, blank=True)
    tag = models.ForeignKey('directory.Tag', related_name='seo_pages', on_delete=models.SET_NULL, null=True, blank=True)
    town = models.ForeignKey('directory.Town', related_name='seo_pages', on_delete=models.SET_NULL, null=True, blank=True)

    schema_json = models.JSONField(null=True, blank=True, help_text="Replaces the generated JSON-LD when set.")
    canonical_url = models.URLField(max_length=500, blank=True)
    status = models.CharField(max_length=20, choices=PublishStatus.choices, default=PublishStatus.DRAFT, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SeoPageQuerySet.as_manager()

    class Meta:
        db_table = 'seo_pages'
        ordering = ['title']
        verbose_name = "Guide"

    def __str__(self):
        return self.title

    @property
    def heading(self):
        return self.h1_text or self.title

    def get_absolute_url(self):
        return reverse('seo:guide_detail', kwargs={'slug': self.slug})
