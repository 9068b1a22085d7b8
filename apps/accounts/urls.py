from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # POST /api/login - Shared password login
    path('login', views.login, name='login'),
]
