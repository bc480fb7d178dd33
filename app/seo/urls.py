# bestseatosky/app/seo/urls.py
from django.urls import path
from . import views

app_name = 'seo'

urlpatterns = [
    path('', views.guide_list, name='guide_list'),
    path('<slug:slug>/', views.guide_detail, name='guide_detail'),
]
