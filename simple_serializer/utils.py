'''
Created on Mar 2, 2016

@author: derigible

Utility functions to be used in the serialization framework. These generally
are not useful except within this framework.
'''

from collections.abc import Mapping
from dataclasses import asdict, is_dataclass

from django.conf import settings
from django.core.files.base import File
from django.core.serializers.json import DjangoJSONEncoder
from django.db.models.manager import Manager

from .errors import MissingSourceProperty


SETTINGS_NAME = 'SIMPLE_SERIALIZER'

_encoder = DjangoJSONEncoder()


def get_setting(key, default=None):
    '''
    Get a value out of the SIMPLE_SERIALIZER dictionary in the project
    settings. If the settings have not been configured (the serializer is
    being used outside of a Django project), the default is returned.
    
    @param key: the key in the SIMPLE_SERIALIZER dictionary
    @param default: the value to use when the key is not set
    @return the configured value or the default
    '''
    if not settings.configured:
        return default
    return (getattr(settings, SETTINGS_NAME, None) or {}).get(key, default)

def is_id_name(name):
    """
    Whether an attribute name looks like a record identifier.
    """
    return name == 'id' or name.endswith('_id')

def is_collection(candidate):
    """
    A collection iterates over its elements but not over key-value pairs. The
    pair check must come first since mappings (and named tuples, through
    _asdict) also support plain iteration, and they are single records. Only
    an items() method counts as pairs; a plain items attribute does not. Since
    strings are also iterable they are never treated as collections.
    """
    if isinstance(candidate, (str, bytes, bytearray)):
        return False
    if isinstance(candidate, Mapping) or hasattr(candidate, '_asdict'):
        return False
    if callable(getattr(candidate, 'items', None)):
        return False
    return hasattr(candidate, '__iter__')

def read_source(record, name):
    '''
    Read the named value off of a record. Mappings are read by key, anything
    else by attribute.
    
    @param record: the object being serialized
    @param name: the attribute or key name
    @return the raw value
    @raise MissingSourceProperty: if the record does not have the value
    '''
    if isinstance(record, Mapping):
        try:
            return record[name]
        except KeyError as e:
            raise MissingSourceProperty(record, name) from e
    try:
        return getattr(record, name)
    except AttributeError as e:
        raise MissingSourceProperty(record, name) from e

def coerce_id(value):
    """
    Convert an identifier to a string. None stays None.
    """
    return value if value is None else str(value)

def normalize(value):
    '''
    Turn an attribute value into data that the json encoder will accept.
    Values that know how to represent themselves as plain data are asked to do
    so (pydantic-style models and dataclasses), containers are normalized
    recursively, and anything the DjangoJSONEncoder understands (dates, times,
    decimals, uuids) is converted the way the encoder would. Everything else
    falls back to its string representation.
    
    @param value: the raw value
    @return the plain data
    '''
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    model_dump = getattr(value, 'model_dump', None)
    if callable(model_dump):
        return normalize(model_dump())
    if is_dataclass(value) and not isinstance(value, type):
        return normalize(asdict(value))
    if hasattr(value, '_asdict'):
        return normalize(value._asdict())
    if isinstance(value, Mapping):
        return {str(k) : normalize(v) for k, v in value.items()}
    if isinstance(value, File):
        return value.name
    if isinstance(value, Manager):
        return [normalize(v) for v in value.all()]
    if is_collection(value):
        return [normalize(v) for v in value]
    try:
        return _encoder.default(value)
    except TypeError:
        return str(value)
