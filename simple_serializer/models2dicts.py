'''
Created on Mar 2, 2016

@author: derigible

This module takes objects (or a list-like set of objects) and converts them
into dictionaries following a serializer definition. Sub-records are nested
under their key and collections are nested as lists, each serialized with
their own definition:

    {
        ... (attributes),
        "sub_record" : {
            ... (sub-record's attributes)
        },
        "collection" : [
            {... (first item's attributes)},
            ...
        ]
    }

The serializer keeps no state about the object it is working on, so a single
instance can be reused (and shared) for any number of calls.
'''

from django.db.models.manager import Manager

from .definitions import Definition
from .errors import InvalidDefinitionReference
from .extensions import get_logger
from .registry import definitions as default_registry
from .utils import coerce_id
from .utils import is_collection
from .utils import normalize
from .utils import read_source


class Serializer(object):
    """
    Serializes objects with a definition.
    """

    def __init__(self, definition, logger=None, registry=None):
        '''
        @param definition: the Definition, or the name it was registered under
        @param logger: the logger to use; see extensions.get_logger
        @param registry: the registry to resolve a name against
        '''
        if isinstance(definition, str):
            registry = default_registry if registry is None else registry
            definition = registry.get(definition)
        elif not isinstance(definition, Definition):
            raise InvalidDefinitionReference(definition)
        self.definition = definition
        self._logger = logger

    @property
    def logger(self):
        return get_logger(self)

    @classmethod
    def serialize_all(cls, definition, obj):
        return cls(definition).serialize(obj)

    def serialize(self, obj):
        '''
        Serialize a single object or a collection of objects. Related managers
        are expanded with all().
        
        @param obj: the object, the collection, or None
        @return None if obj is None, a list of dictionaries if obj is a
                collection, else a dictionary
        '''
        if obj is None:
            return None
        if isinstance(obj, Manager):
            obj = obj.all()
        if is_collection(obj):
            self.logger.debug("Serializing a collection with '%s'.", 
                              self.definition.name)
            return [self.serialize_single(o) for o in obj]
        return self.serialize_single(obj)

    def serialize_single(self, obj):
        '''
        Serialize one object into a dictionary. Attributes are written first,
        then sub-records, then collections; a later key overwrites an earlier
        one of the same name.
        
        @param obj: the object, or None
        @return the dictionary, or None
        '''
        if obj is None:
            return None
        rslt = {}
        rslt.update(self._attributes_to_dict(obj))
        rslt.update(self._sub_records_to_dict(obj))
        rslt.update(self._collections_to_dict(obj))
        return rslt

    def _attributes_to_dict(self, obj):
        coerce = self.definition.coerce_ids_to_string
        vals = {}
        for spec in self.definition.attributes:
            value = _resolve(obj, spec)
            if spec.is_id and coerce:
                vals[spec.key] = coerce_id(value)
            else:
                vals[spec.key] = normalize(value)
        return vals

    def _sub_records_to_dict(self, obj):
        vals = {}
        for spec in self.definition.sub_records:
            value = _resolve(obj, spec)
            if value is not None:
                value = Serializer(spec.definition, 
                                   self._logger).serialize_single(value)
            vals[spec.key] = value
        return vals

    def _collections_to_dict(self, obj):
        vals = {}
        for spec in self.definition.collections:
            records = _resolve(obj, spec)
            if records is None:
                records = []
            elif isinstance(records, Manager):
                records = records.all()
            serializer = Serializer(spec.definition, self._logger)
            vals[spec.key] = [serializer.serialize_single(r) for r in records]
        return vals


def _resolve(obj, spec):
    """
    The computed value if the spec has a compute callable, otherwise the
    value read off of the object.
    """
    if spec.compute is not None:
        return spec.compute(obj)
    return read_source(obj, spec.name)

def serialize(definition, obj):
    """
    Serialize obj with the definition (or registered name).
    """
    return Serializer(definition).serialize(obj)

serialize_all = serialize
