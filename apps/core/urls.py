from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # GET /api/health - Readiness probe
    path('health', views.health_check, name='health-check'),
]
