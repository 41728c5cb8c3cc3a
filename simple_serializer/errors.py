'''
Created on Mar 2, 2016

@author: derigible

The errors raised by the serializer package. Declaration errors are
ImproperlyConfigured errors so Django reports them like any other
misconfiguration when the module declaring the definitions is loaded.
'''

from django.core.exceptions import ImproperlyConfigured


class SerializerError(Exception):
    """
    Base error for everything raised by the serializer package.
    """
    pass

class DefinitionNotFound(SerializerError, ImproperlyConfigured):
    """
    Raised when a sub-record or collection does not name its definition and
    no definition is registered under the conventional name, or when a name
    is passed in that was never registered.
    """

    def __init__(self, name, msg=None):
        self.name = name
        super(DefinitionNotFound, self).__init__(
                        msg or "No serializer definition registered as "
                        "'{}'.".format(name)
                        )

class InvalidDefinitionReference(SerializerError, ImproperlyConfigured):
    """
    Raised when something that is not a serializer definition is passed in
    where one is expected.
    """

    def __init__(self, reference):
        self.reference = reference
        super(InvalidDefinitionReference, self).__init__(
                        "{!r} does not appear to be a serializer "
                        "definition.".format(reference)
                        )

class DuplicateOutputKey(SerializerError, ImproperlyConfigured):
    """
    Raised at declaration time when two specs of one definition write to the
    same output key and STRICT_KEYS is turned on.
    """

    def __init__(self, definition_name, key):
        self.definition_name = definition_name
        self.key = key
        super(DuplicateOutputKey, self).__init__(
                        "'{}' declares the output key '{}' more than "
                        "once.".format(definition_name, key)
                        )

class MissingSourceProperty(SerializerError, AttributeError):
    """
    Raised while serializing when the record does not have the attribute (or
    key, for mappings) a spec reads. This is a programming error and is
    never swallowed by the serializer.
    """

    def __init__(self, record, name):
        self.record = record
        self.source_name = name
        super(MissingSourceProperty, self).__init__(
                        "{} has no attribute or key '{}'.".format(
                                                    type(record).__name__, 
                                                    name)
                        )
