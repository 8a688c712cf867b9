from django.urls import path

from . import views


urlpatterns = [
    path( 'trips/<int:trip_id>/schedules', views.TripScheduleCollectionView.as_view(), name = 'api-trip-schedule-collection' ),
    path( 'schedules', views.UserScheduleCollectionView.as_view(), name = 'api-schedule-collection' ),
    path( 'schedules/<int:schedule_id>', views.ScheduleItemView.as_view(), name = 'api-schedule-item' ),
]
