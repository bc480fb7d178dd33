# bestseatosky/app/directory/models.py
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.urls import reverse
from phonenumber_field.modelfields import PhoneNumberField


class PublishStatus(models.TextChoices):
    DRAFT = 'draft', 'Draft'
    PUBLISHED = 'published', 'Published'


class Category(models.Model):
    slug = models.SlugField(max_length=50, unique=True, help_text="URL path segment, e.g. 'eat'.")
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    icon = models.CharField(max_length=16, blank=True)
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'categories'
        ordering = ['display_order', 'name']
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('directory:category', kwargs={'category_slug': self.slug})


class Town(models.Model):
    slug = models.SlugField(max_length=50, unique=True)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'towns'
        ordering = ['display_order', 'name']

    def __str__(self):
        return self.name


class Tag(models.Model):
    slug = models.SlugField(max_length=50)
    name = models.CharField(max_length=100)
    category = models.ForeignKey(Category, related_name='tags', on_delete=models.CASCADE)

    class Meta:
        db_table = 'tags'
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(fields=['category', 'slug'], name='unique_tag_slug_per_category'),
        ]

    def __str__(self):
        return f"{self.category.name} - {self.name}"


class ListingQuerySet(models.QuerySet):
    def published(self):
        return self.filter(status=PublishStatus.PUBLISHED)

    def with_relations(self):
        """Category, town and tags in a fixed number of queries."""
        return self.select_related('category', 'town').prefetch_related('tags')

    def by_rating(self):
        return self.order_by(
            models.F('google_rating').desc(nulls_last=True),
            models.F('google_review_count').desc(nulls_last=True),
        )


class Listing(models.Model):
    slug = models.SlugField(max_length=255, unique=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    short_description = models.CharField(max_length=300, blank=True)
    category = models.ForeignKey(Category, related_name='listings', on_delete=models.SET_NULL, null=True, blank=True)
    town = models.ForeignKey(Town, related_name='listings', on_delete=models.SET_NULL, null=True, blank=True)
    tags = models.ManyToManyField(Tag, through='ListingTag', related_name='listings', blank=True)

    address = models.CharField(max_length=255, blank=True)
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    phone = PhoneNumberField(blank=True)
    email = models.EmailField(blank=True)
    website = models.CharField(max_length=500, blank=True)
    hours = models.JSONField(default=dict, blank=True, help_text="e.g. {\"monday\": {\"open\": \"09:00\", \"close\": \"17:00\"}}")

    price_level = models.PositiveSmallIntegerField(
        default=0,
        validators=[MaxValueValidator(4)],
        help_text="0 means free, 1-4 maps to $-$$$$."
    )
    google_rating = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(5)]
    )
    google_review_count = models.PositiveIntegerField(null=True, blank=True)
    google_place_id = models.CharField(max_length=255, blank=True)

    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.CharField(max_length=300, blank=True)
    schema_type = models.CharField(max_length=100, blank=True, help_text="schema.org type, defaults to LocalBusiness.")
    schema_json = models.JSONField(null=True, blank=True, help_text="Replaces the generated JSON-LD when set.")

    featured_image_url = models.URLField(max_length=500, blank=True)
    images = models.JSONField(default=list, blank=True)

    status = models.CharField(max_length=20, choices=PublishStatus.choices, default=PublishStatus.DRAFT, db_index=True)
    featured = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ListingQuerySet.as_manager()

    class Meta:
        db_table = 'listings'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def category_slug(self):
        return self.category.slug if self.category_id else None

    @property
    def town_slug(self):
        return self.town.slug if self.town_id else None

    @property
    def tag_slugs(self):
        # Uses the prefetch cache when the queryset came from with_relations()
        return {tag.slug for tag in self.tags.all()}

    @property
    def price_range(self):
        if not self.price_level:
            return 'Free'
        return '$' * self.price_level

    def get_absolute_url(self):
        return reverse('directory:listing_detail', kwargs={
            'category_slug': self.category_slug or 'eat',
            'slug': self.slug,
        })


class ListingTag(models.Model):
    listing = models.ForeignKey(Listing, on_delete=models.CASCADE)
    tag = models.ForeignKey(Tag, on_delete=models.CASCADE)

    class Meta:
        db_table = 'listing_tags'
        unique_together = ('listing', 'tag')

    def __str__(self):
        return f"{self.listing} / {self.tag}"
