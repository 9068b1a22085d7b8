from django.urls import path
from . import views

app_name = 'rotation'

urlpatterns = [
    # GET  /api/next-buyer              - Whose turn it is
    path('next-buyer', views.next_buyer, name='next-buyer'),

    # POST /api/purchases/out-of-order  - Purchase out of turn + reconcile rotation
    path('purchases/out-of-order', views.out_of_order_purchase, name='out-of-order-purchase'),
]
