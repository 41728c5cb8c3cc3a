"""
A package to make serialization of objects into plain data easier. Serializer
definitions declare, once per shape of object, which attributes to copy and
which related objects and collections to nest, and the serializer walks the
objects and produces dictionaries and lists ready to be sent as json. It
does not query for anything; it only shapes objects that are already loaded.
"""

__version__ = '0.3.0'

from .definitions import AttributeSpec
from .definitions import CollectionSpec
from .definitions import Definition
from .definitions import DefinitionBuilder
from .definitions import SubRecordSpec
from .errors import DefinitionNotFound
from .errors import DuplicateOutputKey
from .errors import InvalidDefinitionReference
from .errors import MissingSourceProperty
from .errors import SerializerError
from .models2dicts import Serializer
from .models2dicts import serialize
from .models2dicts import serialize_all
from .registry import DefinitionRegistry
from .registry import definitions
from .utils import is_collection
from .utils import normalize
