from django.urls import path

from . import views


urlpatterns = [
    path( 'trips/<int:trip_id>/accommodations', views.TripAccommodationCollectionView.as_view(), name = 'api-trip-accommodation-collection' ),
    path( 'accommodations/<int:accommodation_id>', views.AccommodationItemView.as_view(), name = 'api-accommodation-item' ),
]
