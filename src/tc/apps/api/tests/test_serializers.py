import logging

from django.test import SimpleTestCase

from rest_framework import serializers

from tc.apps.api.serializers import StrictFieldsMixin

logging.disable(logging.CRITICAL)


class SampleSerializer( StrictFieldsMixin, serializers.Serializer ):
    name = serializers.CharField()
    isPacked = serializers.BooleanField( source = 'is_packed', required = False )
    id = serializers.IntegerField( read_only = True )


class StrictFieldsMixinTestCase(SimpleTestCase):

    def test_known_fields_accepted(self):
        serializer = SampleSerializer( data = { 'name': 'Socks', 'isPacked': True }, partial = True )
        self.assertTrue( serializer.is_valid() )
        self.assertEqual( serializer.validated_data, { 'name': 'Socks', 'is_packed': True } )

    def test_unknown_fields_rejected(self):
        serializer = SampleSerializer( data = { 'name': 'Socks', 'tripId': 3, 'owner': 1 }, partial = True )
        self.assertFalse( serializer.is_valid() )
        self.assertEqual( sorted( serializer.errors.keys() ), [ 'owner', 'tripId' ] )

    def test_read_only_fields_rejected(self):
        serializer = SampleSerializer( data = { 'id': 5 }, partial = True )
        self.assertFalse( serializer.is_valid() )
        self.assertIn( 'id', serializer.errors )
