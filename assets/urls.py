from django.urls import path
from . import views

urlpatterns = [
    path('list/', views.list_assets, name='list_assets'),
    path('create/', views.create_asset, name='create_asset'),
    path('assign/', views.assign_asset, name='assign_asset'),
]
