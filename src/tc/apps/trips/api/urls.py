from django.urls import path

from . import views


urlpatterns = [
    path( 'trips', views.TripCollectionView.as_view(), name = 'api-trip-collection' ),
    path( 'trips/<int:trip_id>', views.TripItemView.as_view(), name = 'api-trip-item' ),
    path( 'trips/<int:trip_id>/tags', views.TripTagCollectionView.as_view(), name = 'api-trip-tag-collection' ),
    path( 'shared-trips', views.SharedTripCollectionView.as_view(), name = 'api-shared-trip-collection' ),
    path( 'trip-tags', views.UserTripTagCollectionView.as_view(), name = 'api-user-trip-tag-collection' ),
    path( 'trip-tags/<int:tag_id>', views.TripTagItemView.as_view(), name = 'api-trip-tag-item' ),
]
