from collections.abc import Mapping

from rest_framework import serializers

from .messages import APIMessages as M


class StrictFieldsMixin:
    """
    Rejects request keys that are not writable fields of the serializer.

    PATCH serializers use this so a partial update names exactly which
    attributes may change; anything else (ids, derived flags, typos) is a
    validation error instead of being silently dropped.
    """

    def to_internal_value( self, data ):
        if isinstance( data, Mapping ):
            writable_names = {
                name for name, field in self.fields.items() if not field.read_only
            }
            unknown_names = sorted( set( data.keys() ) - writable_names )
            if unknown_names:
                raise serializers.ValidationError({
                    name: [ M.UNKNOWN_FIELD ] for name in unknown_names
                })
        return super().to_internal_value( data )
