from django.urls import path

from connections import views

urlpatterns = [
    path('auth/signup', views.signup, name='signup'),
    path('auth/login', views.login, name='login'),
    path('auth/logout', views.logout, name='logout'),
    path('auth/me', views.me, name='me'),
    path('auth/onboarding', views.onboard, name='onboarding'),
    path('users', views.recommended_users, name='recommended_users'),
    path('users/friends', views.my_friends, name='my_friends'),
    path('users/friend-requests', views.friend_requests, name='friend_requests'),
    path('users/friend-requests/<int:user_id>', views.send_friend_request, name='send_friend_request'),
    path('users/friend-requests/<uuid:request_id>/accept', views.accept_friend_request, name='accept_friend_request'),
    path('users/friend-requests/<uuid:request_id>/reject', views.reject_friend_request, name='reject_friend_request'),
    path('users/outgoing-friend-requests', views.outgoing_friend_requests, name='outgoing_friend_requests'),
]
