from django.core.validators import MinValueValidator
from django.db import models

from tc.apps.trips.models import Trip

from . import managers

DEFAULT_CATEGORY_COLOR = '#888888'


class PackingCategory(models.Model):
    """ Global (not trip-scoped) grouping for packing items. """

    objects = managers.PackingCategoryManager()

    name = models.CharField(
        max_length = 100,
    )
    color = models.CharField(
        max_length = 32,
        default = DEFAULT_CATEGORY_COLOR,
    )

    class Meta:
        verbose_name = 'Packing Category'
        verbose_name_plural = 'Packing Categories'

    def __str__(self):
        return self.name


class PackingItem(models.Model):

    objects = managers.PackingItemManager()

    trip = models.ForeignKey(
        Trip,
        on_delete = models.CASCADE,
        related_name = 'packing_items',
    )
    # Deleting a category keeps its items, uncategorized.
    category = models.ForeignKey(
        PackingCategory,
        on_delete = models.SET_NULL,
        null = True,
        blank = True,
        related_name = 'items',
    )
    name = models.CharField(
        max_length = 200,
    )
    quantity = models.PositiveIntegerField(
        default = 1,
        validators = [ MinValueValidator( 1 ) ],
    )
    is_packed = models.BooleanField(
        default = False,
    )

    class Meta:
        verbose_name = 'Packing Item'
        verbose_name_plural = 'Packing Items'

    def __str__(self):
        return f'{self.name} x{self.quantity}'
