"""
Model field for persisting LabeledEnum members as their lowercase names.

Assignment accepts members or case-insensitive names; attribute access
always yields members (or, for a strict field, the unrecognized raw value).
Choices stay out of the column definition so adding a member never needs
a migration.
"""
from django import forms
from django.core.exceptions import ValidationError
from django.db import models

from .enums import LabeledEnum


class LabeledEnumDescriptor:

    def __init__( self, field ):
        self.field = field
        return

    def __get__( self, instance, owner ):
        if instance is None:
            return self.field
        raw_value = instance.__dict__.get( self.field.attname )
        try:
            return self.field.to_python( raw_value )
        except ValidationError:
            return raw_value

    def __set__( self, instance, value ):
        instance.__dict__[ self.field.attname ] = value
        return


class LabeledEnumField( models.CharField ):

    description = 'LabeledEnum member stored by lowercase name'

    def __init__( self, enum_class, *args, use_safe_conversion = True, **kwargs ):
        if not issubclass( enum_class, LabeledEnum ):
            raise TypeError( f'{enum_class} must be a subclass of LabeledEnum' )
        self.enum_class = enum_class
        self.use_safe_conversion = use_safe_conversion

        longest_name = max( len( str( member )) for member in enum_class )
        kwargs.setdefault( 'max_length', max( 32, longest_name + 10 ))
        kwargs.setdefault( 'default', str( enum_class.default() ))
        super().__init__( *args, **kwargs )
        return

    def deconstruct( self ):
        name, path, args, kwargs = super().deconstruct()
        kwargs.update({
            'enum_class': self.enum_class,
            'use_safe_conversion': self.use_safe_conversion,
        })
        return name, path, args, kwargs

    def to_python( self, value ):
        if value is None or isinstance( value, self.enum_class ):
            return value
        if self.use_safe_conversion:
            return self.enum_class.from_name_safe( str( value ))
        try:
            return self.enum_class.from_name( str( value ))
        except ValueError as e:
            raise ValidationError( str( e ))

    def from_db_value( self, value, expression, connection ):
        return self.to_python( value )

    def get_prep_value( self, value ):
        member = self.to_python( value )
        return None if member is None else str( member )

    def value_to_string( self, obj ):
        return self.get_prep_value( self.value_from_object( obj ))

    def validate( self, value, model_instance ):
        # CharField's own choice check would compare members to strings.
        models.Field.validate( self, self.get_prep_value( value ), model_instance )
        return

    def formfield( self, **kwargs ):
        defaults = {
            'form_class': forms.TypedChoiceField,
            'choices': self.enum_class.choices(),
            'coerce': self.to_python,
        }
        defaults.update( kwargs )
        return models.Field.formfield( self, **defaults )

    def contribute_to_class( self, cls, name, **kwargs ):
        super().contribute_to_class( cls, name, **kwargs )
        setattr( cls, name, LabeledEnumDescriptor( self ))
        return
