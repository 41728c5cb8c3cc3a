'''
Created on Mar 2, 2016

@author: derigible

The table of known serializer definitions. Definitions register themselves
here when built so that other definitions can refer to them by name, either
explicitly or by the naming convention:

    sub-record "sub_object"         -> "SubObjectSerializer"
    collection "collection_items"   -> "CollectionItemSerializer"

The convention is only one way of finding a definition. Passing the
definition (or its registered name) in explicitly always works.
'''

import logging

import inflection

from .errors import DefinitionNotFound
from .utils import get_setting


logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = 'Serializer'


class DefinitionRegistry(object):
    """
    Maps a registered name to a Definition. Written to when definitions are
    declared, only read afterwards.
    """

    def __init__(self, suffix=None):
        self._suffix = suffix
        self._definitions = {}

    @property
    def suffix(self):
        if self._suffix is not None:
            return self._suffix
        return get_setting('DEFINITION_SUFFIX', DEFAULT_SUFFIX)

    def register(self, definition):
        '''
        Add a definition under its name. Registering a name a second time
        replaces the earlier definition.
        
        @param definition: the Definition to register
        @return the definition
        '''
        if definition.name in self._definitions:
            logger.warning("Replacing serializer definition '%s'.", 
                           definition.name)
        else:
            logger.debug("Registered serializer definition '%s'.", 
                         definition.name)
        self._definitions[definition.name] = definition
        return definition

    def get(self, name):
        '''
        Get the definition registered under the name.
        
        @param name: the registered name
        @return the Definition
        @raise DefinitionNotFound: if nothing is registered under the name
        '''
        try:
            return self._definitions[name]
        except KeyError:
            raise DefinitionNotFound(name) from None

    def conventional_name(self, name, collection=False):
        """
        The name a definition is expected to be registered under for the
        association name. Collections are singularized first.
        """
        if collection:
            name = inflection.singularize(name)
        return "{}{}".format(inflection.camelize(name), self.suffix)

    def lookup_sub_record(self, name):
        return self._lookup(name, False)

    def lookup_collection(self, name):
        return self._lookup(name, True)

    def _lookup(self, name, collection):
        guess = self.conventional_name(name, collection)
        if guess not in self._definitions:
            raise DefinitionNotFound(guess, 
                        "No serializer definition given for '{}' and none is "
                        "registered as '{}'.".format(name, guess))
        return self._definitions[guess]

    def names(self):
        return list(self._definitions)

    def clear(self):
        self._definitions.clear()

    def __contains__(self, name):
        return name in self._definitions

    def __len__(self):
        return len(self._definitions)


#the process-wide registry used when none is given
definitions = DefinitionRegistry()
