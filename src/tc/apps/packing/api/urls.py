from django.urls import path

from . import views


urlpatterns = [
    path( 'trips/<int:trip_id>/packing-items', views.TripPackingItemCollectionView.as_view(), name = 'api-trip-packing-item-collection' ),
    path( 'packing-items', views.UserPackingItemCollectionView.as_view(), name = 'api-packing-item-collection' ),
    path( 'packing-items/<int:item_id>', views.PackingItemItemView.as_view(), name = 'api-packing-item-item' ),
    path( 'packing-categories', views.PackingCategoryCollectionView.as_view(), name = 'api-packing-category-collection' ),
]
