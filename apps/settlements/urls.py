from django.urls import path
from . import views

app_name = 'settlements'

urlpatterns = [
    path('settlement/', views.settlement, name='settlement'),
    path('balances/', views.balances, name='balances'),
]
