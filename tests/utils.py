'''
Helpers shared by the test modules.
'''

from types import SimpleNamespace

from django.db.models.manager import Manager

from simple_serializer import DefinitionBuilder
from simple_serializer import DefinitionRegistry


def record(**kwargs):
    """
    A plain object with the given attributes.
    """
    return SimpleNamespace(**kwargs)

class RegistryMixin(object):
    """
    Gives each test its own registry so definitions don't leak between tests.
    """

    def setUp(self):
        super(RegistryMixin, self).setUp()
        self.registry = DefinitionRegistry()

    def builder(self, name, **kwargs):
        kwargs.setdefault('registry', self.registry)
        return DefinitionBuilder(name, **kwargs)

class ListManager(Manager):
    """
    A related manager stand-in whose all() returns the rows it was given.
    """

    def __init__(self, rows):
        super(ListManager, self).__init__()
        self.rows = rows

    def all(self):
        return list(self.rows)

class Cart(object):
    """
    An iterable object that keeps its elements in a plain items attribute.
    """

    def __init__(self, items):
        self.items = items

    def __iter__(self):
        return iter(self.items)
