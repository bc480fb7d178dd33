# bestseatosky/app/leads/urls.py
from django.urls import path
from . import views

app_name = 'leads'

urlpatterns = [
    path('get-listed/', views.get_listed, name='get_listed'),
    path('api/get-listed/', views.api_get_listed, name='api_get_listed'),
]
