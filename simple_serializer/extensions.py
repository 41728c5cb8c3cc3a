'''
Created on Mar 4, 2016

@author: derigible

Small conveniences for serializers used inside a Django project. None of the
serializer depends on these being configured; outside of a project the
defaults are used.

Compute callables that need a url can use the url_helpers:

    (DefinitionBuilder('ObjectSerializer')
     .attribute('id')
     .attribute('url', compute=lambda o: url_helpers.reverse(
                                            'object-detail', 
                                            kwargs={'pk' : o.id}))
     .build())
'''

import logging

from django.urls import reverse

from .utils import get_setting


DEFAULT_LOGGER = 'simple_serializer'


def get_logger(serializer=None):
    '''
    Return the serializer's own logger if one was given to it, otherwise the
    logger named by the LOGGER setting.
    
    @param serializer: the serializer asking for the logger
    @return the logger
    '''
    own = getattr(serializer, '_logger', None)
    if own is not None:
        return own
    return logging.getLogger(get_setting('LOGGER', DEFAULT_LOGGER))

class UrlHelpers(object):
    """
    Shortcuts to the project's url configuration.
    """

    def reverse(self, viewname, *args, **kwargs):
        """
        The same as django.urls.reverse.
        """
        return reverse(viewname, *args, **kwargs)

    def absolute(self, path, rootcall=''):
        '''
        Produce a hyperlink for the path. Only prefixes the path if the
        rootcall is not empty.
        
        @param path: the path to the entity
        @param rootcall: the http(s)://domain
        @return the hyperlink, or the path if there is no rootcall
        '''
        if rootcall:
            return "{}/{}".format(rootcall.rstrip('/'), path.lstrip('/'))
        return path


url_helpers = UrlHelpers()
