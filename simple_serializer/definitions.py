'''
Created on Mar 2, 2016

@author: derigible

Declaration of serializer definitions. A definition lists which attributes
of an object to copy, which single related objects (sub-records) to nest and
which collections of related objects to nest. It is declared once, usually at
module load, with a DefinitionBuilder:

    ItemSerializer = (DefinitionBuilder('ItemSerializer')
                      .attributes('id', 'name')
                      .build())

    OrderSerializer = (DefinitionBuilder('OrderSerializer')
                       .attributes('id', 'customer_id')
                       .attribute('total', compute=lambda o: o.total())
                       .belongs_to('customer', definition=CustomerSerializer)
                       .has_many('items')
                       .build())

The "items" collection above finds ItemSerializer by name. A definition is
derived from another by passing it in as the base; the derived builder starts
with a copy of the base's specs and anything added to it is not seen by the
base:

    DetailedItemSerializer = (DefinitionBuilder('DetailedItemSerializer',
                                                base=ItemSerializer)
                              .attribute('description')
                              .build())

Built definitions are immutable.
'''

from collections import namedtuple
import logging

from .errors import DuplicateOutputKey
from .errors import InvalidDefinitionReference
from .registry import definitions as default_registry
from .utils import get_setting
from .utils import is_id_name


logger = logging.getLogger(__name__)

AttributeSpec = namedtuple('AttributeSpec', ['name', 'key', 'is_id', 'compute'])
SubRecordSpec = namedtuple('SubRecordSpec', 
                           ['name', 'key', 'definition', 'compute'])
CollectionSpec = namedtuple('CollectionSpec', 
                            ['name', 'key', 'definition', 'compute'])


class _SpecAccess(object):
    """
    The read side shared by the builder and the built definition. Subclasses
    set _attributes, _sub_records and _collections.
    """

    __slots__ = ()

    def snapshot_attributes(self):
        return list(self._attributes)

    def snapshot_sub_records(self):
        return list(self._sub_records)

    def snapshot_collections(self):
        return list(self._collections)

    def attribute_names(self):
        return [spec.name for spec in self._attributes]

    def sub_record_names(self):
        return [spec.name for spec in self._sub_records]

    def collection_names(self):
        return [spec.name for spec in self._collections]

    def output_keys(self):
        """
        Every output key in the order the serializer writes them.
        """
        return [spec.key for specs in (self._attributes, 
                                       self._sub_records, 
                                       self._collections) 
                for spec in specs]


class Definition(_SpecAccess):
    """
    An immutable, named description of what to pull out of an object. Create
    these with a DefinitionBuilder.
    """

    __slots__ = ('_name', '_base', '_attributes', '_sub_records', 
                 '_collections', '_coerce_ids_to_string')

    def __init__(self, name, attributes=(), sub_records=(), collections=(), 
                 coerce_ids_to_string=False, base=None):
        self._name = name
        self._base = base
        self._attributes = tuple(attributes)
        self._sub_records = tuple(sub_records)
        self._collections = tuple(collections)
        self._coerce_ids_to_string = bool(coerce_ids_to_string)

    @property
    def name(self):
        return self._name

    @property
    def base(self):
        return self._base

    @property
    def attributes(self):
        return self._attributes

    @property
    def sub_records(self):
        return self._sub_records

    @property
    def collections(self):
        return self._collections

    @property
    def coerce_ids_to_string(self):
        return self._coerce_ids_to_string

    def serialize(self, obj):
        '''
        Serialize an object or a collection of objects with this definition.
        
        @param obj: the object, collection, or None
        @return a dict, a list of dicts, or None
        '''
        from .models2dicts import Serializer
        return Serializer(self).serialize(obj)

    def __repr__(self):
        return "<Definition {}>".format(self._name)


class DefinitionBuilder(_SpecAccess):
    """
    Collects the specs for a definition. Every declaration method returns the
    builder so calls can be chained, and build() returns the Definition.
    """

    def __init__(self, name, base=None, coerce_ids_to_string=None, 
                 registry=None):
        if base is not None and not isinstance(base, Definition):
            raise InvalidDefinitionReference(base)
        self.name = name
        self.base = base
        self.registry = default_registry if registry is None else registry
        if base is not None:
            self._attributes = base.snapshot_attributes()
            self._sub_records = base.snapshot_sub_records()
            self._collections = base.snapshot_collections()
            inherited = base.coerce_ids_to_string
        else:
            self._attributes = []
            self._sub_records = []
            self._collections = []
            inherited = get_setting('COERCE_IDS_TO_STRING', False)
        self._coerce_ids_to_string = (inherited if coerce_ids_to_string is None 
                                      else coerce_ids_to_string)

    def coerce_ids_to_string(self, flag=True):
        """
        Serialize identifier attributes as strings.
        """
        self._coerce_ids_to_string = flag
        return self

    def attribute(self, name, key=None, is_id=None, compute=None):
        '''
        Declare an attribute to copy. The value is read off of the object by
        name unless compute is given, in which case compute(obj) is used.
        
        @param name: the attribute name on the object
        @param key: the output key; defaults to name
        @param is_id: whether the attribute is an identifier; guessed from the
                      name ("id" or ending in "_id") by default
        @param compute: a callable taking the object and returning the value
        @return the builder
        '''
        key = name if key is None else key
        if is_id is None:
            is_id = is_id_name(name)
        self._check_key(key)
        self._attributes.append(AttributeSpec(name, key, is_id, compute))
        return self

    def attributes(self, *names):
        """
        Declare several attributes at once, using the defaults.
        """
        for name in names:
            self.attribute(name)
        return self

    def sub_record(self, name, key=None, definition=None, compute=None):
        '''
        Declare a related object to nest. It is serialized with the given
        definition, or with the definition registered under the name built
        from the association name (sub_object -> SubObjectSerializer).
        
        @param name: the attribute name of the related object
        @param key: the output key; defaults to name
        @param definition: a Definition, a builder, or a registered name
        @param compute: a callable taking the object and returning the
                        related object
        @return the builder
        '''
        if definition is None:
            definition = self.registry.lookup_sub_record(name)
        else:
            definition = self._resolve(definition)
        key = name if key is None else key
        self._check_key(key)
        self._sub_records.append(SubRecordSpec(name, key, definition, compute))
        return self

    has_one = sub_record
    belongs_to = sub_record

    def collection(self, name, key=None, definition=None, compute=None):
        '''
        Declare a collection of related objects to nest as a list. Each item
        is serialized with the given definition, or with the definition
        registered under the singular form of the name
        (collection_items -> CollectionItemSerializer).
        
        @param name: the attribute name of the collection
        @param key: the output key; defaults to name
        @param definition: a Definition, a builder, or a registered name
        @param compute: a callable taking the object and returning the
                        collection
        @return the builder
        '''
        if definition is None:
            definition = self.registry.lookup_collection(name)
        else:
            definition = self._resolve(definition)
        key = name if key is None else key
        self._check_key(key)
        self._collections.append(CollectionSpec(name, key, definition, compute))
        return self

    has_many = collection

    def build(self, register=True):
        '''
        Create the immutable definition.
        
        @param register: add the definition to the registry so it can be
                         found by name
        @return the Definition
        '''
        definition = Definition(self.name, 
                                self._attributes, 
                                self._sub_records, 
                                self._collections, 
                                coerce_ids_to_string=self._coerce_ids_to_string,
                                base=self.base)
        if register:
            self.registry.register(definition)
        return definition

    def _resolve(self, definition):
        if isinstance(definition, Definition):
            return definition
        if isinstance(definition, DefinitionBuilder):
            return definition.build(register=False)
        if isinstance(definition, str):
            return self.registry.get(definition)
        raise InvalidDefinitionReference(definition)

    def _check_key(self, key):
        """
        Two specs writing to one key is allowed, the later phase overwrites
        the earlier, but it is almost never intended.
        """
        if key not in self.output_keys():
            return
        if get_setting('STRICT_KEYS', False):
            raise DuplicateOutputKey(self.name, key)
        logger.warning("'%s' declares the output key '%s' more than once.", 
                       self.name, key)
