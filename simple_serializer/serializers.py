'''
Created on Mar 4, 2016

@author: derigible

Methods that turn serialized data into json text. The data is already plain
by the time it gets here, the DjangoJSONEncoder only has to deal with any
extra data passed in alongside it.
'''

import json

from django.core.serializers.json import DjangoJSONEncoder as djson

from .models2dicts import Serializer


def _serialize_json(definition, obj, extra=None):
    """
    Serialize obj into json with the definition. Any extra values that are
    not a part of the definition can be passed in with the extra param, in
    which case the serialized data is put under "data" and the extra values
    under "extra". This needs to be json serializable data.
    """
    rslt = _with_extra(Serializer(definition).serialize(obj), extra)
    return json.dumps(rslt, cls=djson)

def _with_extra(data, extra):
    if extra is None:
        return data
    return {"data" : data, "extra" : extra}
