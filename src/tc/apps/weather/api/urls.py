from django.urls import path

from . import views


# next-trip and forecast/ must precede the catch-all location pattern.
urlpatterns = [
    path( 'weather/next-trip', views.NextTripWeatherView.as_view(), name = 'api-weather-next-trip' ),
    path( 'weather/forecast/<str:location>', views.LocationForecastView.as_view(), name = 'api-weather-forecast' ),
    path( 'weather/<str:location>', views.LocationWeatherView.as_view(), name = 'api-weather-location' ),
]
