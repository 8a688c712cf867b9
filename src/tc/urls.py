from django.contrib import admin
from django.urls import include, path, re_path

from . import views

urlpatterns = [

    path( 'admin/', admin.site.urls ),

    re_path( r'^health$', views.HealthView.as_view(), name = 'health' ),

    re_path( r'^api/', include( 'tc.apps.api.urls' )),

]

handler404 = 'tc.views.custom_404_handler'
handler500 = 'tc.views.custom_500_handler'
