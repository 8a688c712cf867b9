from django.apps import AppConfig


class WeatherConfig( AppConfig ):
    default_auto_field = "django.db.models.BigAutoField"
    name = "tc.apps.weather"

    def ready( self ):
        # One service per process, built from settings; views get it from
        # here and tests swap in their own.
        from .services import WeatherService
        self.weather_service = WeatherService.from_settings()
        return
