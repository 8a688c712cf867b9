from django.db import models


class AccommodationManager(models.Manager):

    def for_trip(self, trip):
        return self.filter( trip = trip ).order_by( 'check_in', 'id' )
