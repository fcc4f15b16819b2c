"""
Wallets URL Configuration
"""
from django.urls import path
from . import views

urlpatterns = [
    path('trade_types', views.getTradeTypes, name='get-trade-types'),
]
