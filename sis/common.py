from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

# shared code

# Enumeration
#
# A small named-constant table. Each entry is a (value, label)
# tuple, with an optional third "display" element. Labels are
# available as attributes:
#
#     POLICIES = Enumeration(
#             (0, 'OPEN'),
#             (1, 'AJAX_ONLY', 'AJAX requests only'),
#         )
#
#     POLICIES.AJAX_ONLY
#     >>> 1
#
class Enumeration(object):

    _enumerated_list = None
    _enumerated_dict = None
    _enumerated_display = None

    def __init__(self, *args, **kwargs):
        self._enumerated_list = list(kwargs.get('choices', args))

        # (value, label) pairs, suitable for a choices= argument
        self.choices = [ (t[0], t[1]) for t in self._enumerated_list ]

        # reverse each of the tuples and use them to build a dict,
        # indexed by name
        self._enumerated_dict = dict([ (t[1], t[0]) for t in self._enumerated_list ])

        # display labels indexed by value, falling back to the label
        self._enumerated_display = dict([ (t[0], t[2] if len(t) > 2 else t[1]) for t in self._enumerated_list ])

    # look up an attribute, if it is not found
    # elsewhere (we look up the name in our set
    # of enumerations)
    def __getattr__(self, attr):
        if attr.startswith('_') or attr not in self._enumerated_dict:
            # pretend we're a real attribute, and throw a similar exception,
            # instead of KeyError from a dict lookup
            raise AttributeError(attr)
        return self._enumerated_dict[attr]

    # look up a value to get the name
    # NOTE: returns None if no match is found
    def get_label(self, value):
        for t in self._enumerated_list:
            if t[0] == value:
                return t[1]
        return None

    # look up a value to get the display label
    # NOTE: returns None if no match is found
    def get_display(self, value):
        return self._enumerated_display.get(value, None)

    # accept either the name or the number, but always
    # give back the number
    # NOTE: names not part of the enumeration raise KeyError
    def get_value(self, label):
        if isinstance(label, str):
            return self._enumerated_dict[label]
        else:
            # already a value
            return label

    # methods to make the class iterable
    def __len__(self):
        return len(self._enumerated_list)

    def __iter__(self):
        return self._enumerated_list.__iter__()

    def __getitem__(self, key):
        return self._enumerated_list[key]

    # without this, 'in' tests by iterating, which isn't useful;
    # we want to test if a label is in the enumeration
    def __contains__(self, key):
        return key in self._enumerated_dict

# several settings name a class by its dotted path (the translator
# class, for instance); this imports it and turns a bad path into
# a configuration error that names the setting
def import_from_setting(setting_name, dotted_path):
    try:
        return import_string(dotted_path)
    except ImportError as e:
        raise ImproperlyConfigured('%s refers to %r, which cannot be imported: %s' % (setting_name, dotted_path, e))
