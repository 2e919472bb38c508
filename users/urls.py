from django.urls import path
from . import views

urlpatterns = [
    path("login/", views.login_user, name="login"),
    path("logout/", views.logout_user, name="logout"),
    path("me/", views.current_user, name="current_user"),
    path("list/", views.list_users, name="list_users"),
    path("create/", views.create_user, name="create_user"),
    path("update-role/", views.update_user_role, name="update_user_role"),
]
