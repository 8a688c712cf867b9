"""
Tests for custom Django model fields.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import models
from django.test import TestCase

from tc.apps.common.enums import LabeledEnum
from tc.apps.common.model_fields import LabeledEnumField

logging.disable(logging.CRITICAL)


class SampleEnum(LabeledEnum):
    FIRST = ('First Option', 'The first option')
    SECOND = ('Second Option', 'The second option')
    THIRD = ('Third Option', 'The third option')


class SampleModel(models.Model):
    safe_field = LabeledEnumField(SampleEnum)
    strict_field = LabeledEnumField(SampleEnum, use_safe_conversion=False)

    class Meta:
        app_label = 'common'
        managed = False


class LabeledEnumTestCase(TestCase):

    def test_str_is_lowercase_name(self):
        self.assertEqual( str( SampleEnum.SECOND ), 'second' )

    def test_auto_numbering(self):
        self.assertEqual( [ x.value for x in SampleEnum ], [ 1, 2, 3 ] )

    def test_from_name_is_case_insensitive(self):
        self.assertEqual( SampleEnum.from_name( ' Third ' ), SampleEnum.THIRD )

    def test_from_name_rejects_unknown(self):
        with self.assertRaises( ValueError ):
            SampleEnum.from_name( 'fourth' )

    def test_from_name_safe_returns_default(self):
        self.assertEqual( SampleEnum.from_name_safe( 'fourth' ), SampleEnum.FIRST )

    def test_choices(self):
        self.assertEqual( SampleEnum.choices()[0], ( 'first', 'First Option' ) )


class LabeledEnumFieldTestCase(TestCase):

    def test_field_accepts_enum_instance(self):
        obj = SampleModel()
        obj.safe_field = SampleEnum.SECOND
        self.assertEqual( obj.safe_field, SampleEnum.SECOND )

    def test_field_accepts_mixed_case_string(self):
        obj = SampleModel()
        obj.safe_field = 'ThIrD'
        self.assertIs( obj.safe_field, SampleEnum.THIRD )

    def test_safe_field_returns_default_for_invalid(self):
        obj = SampleModel()
        obj.safe_field = 'invalid'
        self.assertEqual( obj.safe_field, SampleEnum.FIRST )

    def test_strict_field_returns_raw_invalid_value(self):
        obj = SampleModel()
        obj.strict_field = 'invalid'
        self.assertEqual( obj.strict_field, 'invalid' )

    def test_default_is_first_member(self):
        obj = SampleModel()
        self.assertEqual( obj.safe_field, SampleEnum.FIRST )

    def test_get_prep_value_stores_lowercase(self):
        field = SampleModel._meta.get_field( 'safe_field' )
        self.assertEqual( field.get_prep_value( SampleEnum.SECOND ), 'second' )
        self.assertEqual( field.get_prep_value( 'SECOND' ), 'second' )

    def test_strict_prep_value_rejects_invalid(self):
        field = SampleModel._meta.get_field( 'strict_field' )
        with self.assertRaises( ValidationError ):
            field.get_prep_value( 'bogus' )

    def test_deconstruct_preserves_enum_class(self):
        field = SampleModel._meta.get_field( 'strict_field' )
        _, _, _, kwargs = field.deconstruct()
        self.assertIs( kwargs['enum_class'], SampleEnum )
        self.assertFalse( kwargs['use_safe_conversion'] )
