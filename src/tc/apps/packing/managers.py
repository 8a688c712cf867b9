from django.db import models


class PackingCategoryManager(models.Manager):

    def ordered(self):
        return self.all().order_by( 'name', 'id' )


class PackingItemManager(models.Manager):

    def for_trip(self, trip):
        return self.filter( trip = trip ).order_by( 'category_id', 'name', 'id' )

    def for_user(self, user):
        """Packing items of every trip the user owns or is a member of."""
        from tc.apps.trips.models import Trip
        return self.filter(
            trip__in = Trip.objects.for_user( user ).values( 'id' ),
        ).order_by( 'trip_id', 'category_id', 'name', 'id' )
