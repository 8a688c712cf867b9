from django.urls import path

from . import views


urlpatterns = [
    path( 'register', views.RegisterView.as_view(), name = 'api-register' ),
    path( 'login', views.LoginView.as_view(), name = 'api-login' ),
    path( 'logout', views.LogoutView.as_view(), name = 'api-logout' ),
    path( 'user', views.CurrentUserView.as_view(), name = 'api-user' ),
    path( 'user/profile', views.ProfileView.as_view(), name = 'api-user-profile' ),
    path( 'user/password', views.PasswordView.as_view(), name = 'api-user-password' ),
]
