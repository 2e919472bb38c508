from django.urls import path
from . import views

urlpatterns = [
    path('list/', views.list_tickets, name='list_tickets'),
    path('create/', views.create_ticket, name='create_ticket'),
    path('update-status/', views.update_ticket_status, name='update_ticket_status'),
    path('assign/', views.assign_ticket, name='assign_ticket'),
    path('search/', views.search_tickets, name='search_tickets'),
]
