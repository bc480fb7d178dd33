import tinymce.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Post',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('slug', models.SlugField(blank=True, help_text='A unique URL-friendly path. Leave blank to auto-generate from title.', max_length=255, unique=True)),
                ('meta_description', models.CharField(blank=True, max_length=300)),
                ('featured_image', models.URLField(blank=True, max_length=500)),
                ('excerpt', models.TextField(blank=True)),
                ('content', tinymce.models.HTMLField(blank=True)),
                ('author', models.CharField(blank=True, help_text='Shown as the byline. Defaults to the site name.', max_length=100)),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('published', 'Published')], default='draft', max_length=10)),
                ('published_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'blog_posts',
                'ordering': ['-published_at', '-created_at'],
            },
        ),
    ]
