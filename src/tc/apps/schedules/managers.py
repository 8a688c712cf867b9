from django.db import models


class ScheduleManager(models.Manager):

    def for_trip(self, trip):
        return self.filter( trip = trip ).order_by( 'day', 'time', 'id' )

    def for_user(self, user):
        """Schedules of every trip the user owns or is a member of."""
        from tc.apps.trips.models import Trip
        return self.filter(
            trip__in = Trip.objects.for_user( user ).values( 'id' ),
        ).order_by( 'day', 'time', 'id' )
