from django.urls import path
from . import views

app_name = 'purchases'

urlpatterns = [
    # GET    /api/purchases                      - Unified purchase history
    # POST   /api/purchases                      - Record a purchase
    # DELETE /api/purchases                      - Clear all purchase history
    path('purchases', views.purchase_collection, name='purchase-list'),

    # DELETE /api/purchases/{id}?type=coffee|external - Delete one purchase
    path('purchases/<int:purchase_id>', views.purchase_detail, name='purchase-detail'),
]
