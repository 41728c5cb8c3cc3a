from collections import namedtuple
from dataclasses import dataclass
from datetime import date
from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace
import uuid

from django.core.files.base import File
from django.test import SimpleTestCase
from django.test import override_settings

from simple_serializer import is_collection
from simple_serializer import normalize
from simple_serializer.utils import coerce_id
from simple_serializer.utils import get_setting
from simple_serializer.utils import is_id_name

from .utils import Cart
from .utils import ListManager


Point = namedtuple('Point', ['x', 'y'])

@dataclass
class Size:
    width: int
    height: int

class Dumpable(object):
    def model_dump(self):
        return {'when' : date(2000, 1, 1)}

class Named(object):
    def __str__(self):
        return 'named'

class OnlyIter(object):
    def __iter__(self):
        return iter([1, 2])

class IterAndItems(OnlyIter):
    def items(self):
        return []


class IsCollectionTests(SimpleTestCase):

    def test_collections(self):
        for candidate in ([], (1,), {1}, frozenset(), (i for i in []), 
                          OnlyIter()):
            self.assertTrue(is_collection(candidate), candidate)

    def test_single_records(self):
        for candidate in ({}, {'a' : 1}, IterAndItems(), Point(1, 2), 
                          SimpleNamespace(id=1), 1, None):
            self.assertFalse(is_collection(candidate), candidate)

    def test_strings_are_not_collections(self):
        for candidate in ('abc', b'abc', bytearray(b'abc')):
            self.assertFalse(is_collection(candidate), candidate)

    def test_items_attribute_is_not_key_pairs(self):
        self.assertTrue(is_collection(Cart([1, 2])))


class NormalizeTests(SimpleTestCase):

    def test_scalars_pass_through(self):
        for value in (None, True, False, 0, 1.5, 'text'):
            self.assertIs(normalize(value), value)

    def test_dates(self):
        self.assertEqual(normalize(date(2000, 1, 1)), '2000-01-01')
        self.assertEqual(normalize(datetime(2000, 1, 1, 12, 30)), 
                         '2000-01-01T12:30:00')

    def test_encoder_types(self):
        value = uuid.UUID('12345678123456781234567812345678')
        self.assertEqual(normalize(value), str(value))
        self.assertEqual(normalize(Decimal('1.50')), '1.50')

    def test_containers_are_normalized_recursively(self):
        self.assertEqual(normalize({'a' : [date(2000, 1, 1), (1, 2)], 
                                    1 : {'b' : Decimal('2')}}), 
                         {'a' : ['2000-01-01', [1, 2]], '1' : {'b' : '2'}})

    def test_plain_data_conversions(self):
        self.assertEqual(normalize(Dumpable()), {'when' : '2000-01-01'})
        self.assertEqual(normalize(Size(1, 2)), {'width' : 1, 'height' : 2})
        self.assertEqual(normalize(Point(1, 2)), {'x' : 1, 'y' : 2})

    def test_files_use_their_name(self):
        self.assertEqual(normalize(File(None, name='uploads/a.txt')), 
                         'uploads/a.txt')

    def test_managers_are_expanded(self):
        manager = ListManager([date(2000, 1, 1), Decimal('3')])
        self.assertEqual(normalize(manager), ['2000-01-01', '3'])

    def test_items_attribute_object_is_a_list(self):
        self.assertEqual(normalize(Cart([date(2000, 1, 1)])), ['2000-01-01'])

    def test_falls_back_to_str(self):
        self.assertEqual(normalize(Named()), 'named')


class IdTests(SimpleTestCase):

    def test_is_id_name(self):
        self.assertTrue(is_id_name('id'))
        self.assertTrue(is_id_name('owner_id'))
        self.assertFalse(is_id_name('identifier'))
        self.assertFalse(is_id_name('paid'))

    def test_coerce_id(self):
        self.assertEqual(coerce_id(5), '5')
        self.assertEqual(coerce_id('5'), '5')
        self.assertIsNone(coerce_id(None))


class SettingsTests(SimpleTestCase):

    def test_default(self):
        self.assertEqual(get_setting('DEFINITION_SUFFIX', 'Serializer'), 
                         'Serializer')

    @override_settings(SIMPLE_SERIALIZER=None)
    def test_setting_set_to_none(self):
        self.assertEqual(get_setting('LOGGER', 'simple_serializer'), 
                         'simple_serializer')

    @override_settings(SIMPLE_SERIALIZER={'LOGGER' : 'api'})
    def test_configured(self):
        self.assertEqual(get_setting('LOGGER', 'simple_serializer'), 'api')
        self.assertIsNone(get_setting('STRICT_KEYS'))
