'''
Created on Mar 4, 2016

@author: derigible

The public methods for getting serialized data out of a Django view. Pass in
the definition (or the name it was registered under) and the object or
queryset to serialize.
'''

from django.http.response import JsonResponse as jr
from django.core.serializers.json import DjangoJSONEncoder as djson

from .models2dicts import Serializer
from .serializers import _serialize_json
from .serializers import _with_extra


def to_json(definition, obj, extra=None):
    '''
    Serialize obj to a json string.
    
    @param definition: the Definition or its registered name
    @param obj: the object or collection to serialize
    @param extra: any extra data to serialize that is not a part of the
                  definition
    @return the json string
    '''
    return _serialize_json(definition, obj, extra)

def serialize_to_response(definition, obj, extra=None, status=200):
    '''
    Serialize obj and return it as a django JsonResponse. Collections are
    sent as a json array.
    
    @param definition: the Definition or its registered name
    @param obj: the object or collection to serialize
    @param extra: any extra data to serialize that is not a part of the
                  definition
    @param status: the status code of the response
    @return the JsonResponse object
    '''
    data = _with_extra(Serializer(definition).serialize(obj), extra)
    return jr(data, encoder=djson, safe=False, status=status)
