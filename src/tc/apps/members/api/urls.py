from django.urls import path

from . import views


urlpatterns = [
    path( 'trips/<int:trip_id>/share', views.TripShareView.as_view(), name = 'api-trip-share' ),
    path( 'trips/<int:trip_id>/members', views.TripMemberCollectionView.as_view(), name = 'api-trip-member-collection' ),
    path( 'trips/<int:trip_id>/members/<int:user_id>', views.TripMemberItemView.as_view(), name = 'api-trip-member-item' ),
]
