# bestseatosky/app/directory/urls.py
from django.urls import path
from . import views

app_name = 'directory'

urlpatterns = [
    path('api/search/', views.api_search, name='api_search'),
    path('<slug:category_slug>/', views.category, name='category'),
    path('<slug:category_slug>/<slug:slug>/', views.listing_detail, name='listing_detail'),
]
