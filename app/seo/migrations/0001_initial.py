import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('directory', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PageMetadata',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('page_name', models.CharField(help_text="A unique name for this page, e.g., 'Home Page', 'Advertise'.", max_length=100, unique=True)),
                ('page_path', models.CharField(help_text="The exact path, e.g., '/', '/advertise/', '/blog/'.", max_length=255, unique=True)),
                ('meta_title', models.CharField(help_text='The title tag for the page (60 chars).', max_length=255)),
                ('meta_description', models.CharField(help_text='The meta description for the page (160 chars).', max_length=160)),
            ],
            options={
                'verbose_name_plural': 'Page metadata',
                'ordering': ['page_path'],
            },
        ),
        migrations.CreateModel(
            name='SeoPage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('slug', models.SlugField(max_length=255, unique=True)),
                ('title', models.CharField(max_length=255)),
                ('meta_description', models.CharField(blank=True, max_length=300)),
                ('h1_text', models.CharField(blank=True, help_text='Page heading, defaults to the title.', max_length=255)),
                ('intro_content', models.TextField(blank=True)),
                ('schema_json', models.JSONField(blank=True, help_text='Replaces the generated JSON-LD when set.', null=True)),
                ('canonical_url', models.URLField(blank=True, max_length=500)),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('published', 'Published')], db_index=True, default='draft', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='seo_pages', to='directory.category')),
                ('tag', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='seo_pages', to='directory.tag')),
                ('town', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='seo_pages', to='directory.town')),
            ],
            options={
                'verbose_name': 'Guide',
                'db_table': 'seo_pages',
                'ordering': ['title'],
            },
        ),
    ]
