from django.urls import path
from . import views

app_name = 'ledger'

urlpatterns = [
    # People
    path('people/', views.people, name='people'),

    # Friends
    path('friends/', views.friends, name='friends'),
    path('friends/<uuid:friend_id>/', views.friend_detail, name='friend-detail'),

    # Groups
    path('groups/', views.groups, name='groups'),
    path('groups/<uuid:group_id>/', views.group_detail, name='group-detail'),

    # Expenses
    path('expenses/', views.expenses, name='expenses'),
    path('activity/', views.activity, name='activity'),
    path('reset/', views.reset, name='reset'),
]
