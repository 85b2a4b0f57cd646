from django.urls import path
from . import views

app_name = 'journeys'

urlpatterns = [
    path('', views.journey_list, name='journey-list'),
    path('archive/', views.archive, name='journey-archive'),
    path('<uuid:journey_id>/', views.journey_detail, name='journey-detail'),
]
