from django.db import models


class TripManager(models.Manager):

    def owned_by(self, user):
        """Trips where user is the owner."""
        return self.filter( owner = user )

    def shared_with(self, user):
        """Trips where user holds a membership but is not the owner."""
        return self.filter( members__user = user ).exclude( owner = user ).distinct()

    def for_user(self, user):
        """
        Owned trips plus trips shared with the user, each trip once,
        most recent start date first.
        """
        return self.filter(
            models.Q( owner = user ) | models.Q( members__user = user )
        ).distinct().order_by( '-start_date', '-id' )

    def upcoming_for_user(self, user, on_date):
        """ Readable trips starting on or after on_date, soonest first. """
        return self.for_user( user ).filter(
            start_date__gte = on_date,
        ).order_by( 'start_date', 'id' )


class TripTagManager(models.Manager):

    def for_trip(self, trip):
        return self.filter( trip = trip ).order_by( 'name', 'id' )

    def for_user(self, user):
        """Tags across every trip the user can read."""
        from .models import Trip
        return self.filter(
            trip__in = Trip.objects.for_user( user ).values( 'id' ),
        ).order_by( 'trip_id', 'name', 'id' )
