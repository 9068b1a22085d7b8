from django.urls import path
from . import views

app_name = 'participants'

urlpatterns = [
    # GET    /api/participants          - List participants in rotation order
    # POST   /api/participants          - Add participant (back of rotation)
    path('participants', views.participant_collection, name='participant-list'),

    # PUT    /api/participants/reorder  - Apply a new rotation order
    path('participants/reorder', views.reorder, name='participant-reorder'),

    # PUT    /api/participants/{id}     - Rename participant
    # DELETE /api/participants/{id}     - Delete participant (no history)
    path('participants/<int:participant_id>', views.participant_detail, name='participant-detail'),

    # GET    /api/reorder-history       - Reorder audit trail
    path('reorder-history', views.reorder_history, name='reorder-history'),
]
