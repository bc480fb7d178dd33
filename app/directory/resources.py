# bestseatosky/app/directory/resources.py
from import_export import resources, fields
from import_export.widgets import BooleanWidget, ForeignKeyWidget, ManyToManyWidget
from .models import Category, Listing, Tag, Town


class CategoryResource(resources.ModelResource):
    class Meta:
        model = Category
        import_id_fields = ['slug']
        fields = ('id', 'slug', 'name', 'description', 'icon', 'display_order')
        export_order = ('id', 'slug', 'name', 'description', 'icon', 'display_order')
        skip_unchanged = True
        report_skipped = True


class TownResource(resources.ModelResource):
    class Meta:
        model = Town
        import_id_fields = ['slug']
        fields = ('id', 'slug', 'name', 'description', 'latitude', 'longitude', 'display_order')
        export_order = ('id', 'slug', 'name', 'description', 'latitude', 'longitude', 'display_order')
        skip_unchanged = True
        report_skipped = True


class TagResource(resources.ModelResource):
    category = fields.Field(
        column_name='category',
        attribute='category',
        widget=ForeignKeyWidget(Category, field='slug')
    )

    class Meta:
        model = Tag
        import_id_fields = ['category', 'slug']
        fields = ('id', 'slug', 'name', 'category')
        export_order = ('id', 'slug', 'name', 'category')
        skip_unchanged = True
        report_skipped = True


class ListingResource(resources.ModelResource):
    category = fields.Field(
        column_name='category',
        attribute='category',
        widget=ForeignKeyWidget(Category, field='slug')
    )
    town = fields.Field(
        column_name='town',
        attribute='town',
        widget=ForeignKeyWidget(Town, field='slug')
    )
    # Tag slugs repeat across categories, so tags are exported by primary key
    tags = fields.Field(
        column_name='tags',
        attribute='tags',
        widget=ManyToManyWidget(Tag, field='pk', separator=',')
    )
    featured = fields.Field(
        column_name='featured',
        attribute='featured',
        widget=BooleanWidget()
    )

    class Meta:
        model = Listing
        import_id_fields = ['slug']
        fields = (
            'id', 'slug', 'name', 'category', 'town', 'tags', 'short_description', 'description',
            'address', 'phone', 'email', 'website', 'price_level', 'google_rating',
            'google_review_count', 'google_place_id', 'status', 'featured', 'featured_image_url',
        )
        export_order = fields
        skip_unchanged = True
        report_skipped = True
