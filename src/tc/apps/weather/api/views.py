from django.apps import apps

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from tc.apps.api.messages import APIMessages as M
from tc.apps.api.views import TcApiView


class WeatherViewMixin:

    @property
    def weather_service(self):
        return apps.get_app_config( 'weather' ).weather_service


class NextTripWeatherView( WeatherViewMixin, TcApiView ):
    """
    GET /api/weather/next-trip
    Current weather at the destination of the soonest upcoming trip.
    """

    def get( self, request: Request ) -> Response:
        weather_data = self.weather_service.get_next_trip_weather( request.user )
        if weather_data is None:
            return self.message_response( M.NO_UPCOMING_TRIPS, status.HTTP_404_NOT_FOUND )
        return Response( weather_data.to_dict() )


class LocationWeatherView( WeatherViewMixin, TcApiView ):
    """
    GET /api/weather/{location}
    Always 200; a provider outage yields a placeholder (isPlaceholder).
    """

    def get( self, request: Request, location: str ) -> Response:
        weather_data = self.weather_service.get_weather( location )
        return Response( weather_data.to_dict() )


class LocationForecastView( WeatherViewMixin, TcApiView ):
    """
    GET /api/weather/forecast/{location}
    One entry per day; empty list when the provider is unavailable.
    """

    def get( self, request: Request, location: str ) -> Response:
        forecast = self.weather_service.get_forecast( location )
        return Response([ weather_data.to_dict() for weather_data in forecast ])
