from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.http import Http404

from sis.ajax.policy import policies as default_policies

import re

# the action gate
#
# Controllers expose their actions as methods named <action>_action.
# An action registered as AJAX_ONLY (see sis.ajax.policy) may only be
# reached by an XMLHttpRequest; anything else gets a 404, not a 403,
# so a plain browser request can't tell the action exists.
#
# The gate works from a handler identifier that the dispatching code
# attaches to the request before the action runs:
#
#     <module>.<ControllerClass>::<action>_action
#
# Both hooks (PreExecuteMiddleware and AjaxController.dispatch) go
# through the same guard() call.

ACTION_SUFFIX = '_action'
HANDLER_ATTRIBUTE = 'sis_handler'
NOT_FOUND_MESSAGE = 'Only ajax request available for this action.'

_suffix_re = re.compile(re.escape(ACTION_SUFFIX) + '$')

def handler_identifier(controller_class, action):
    return '%s.%s::%s%s' % (controller_class.__module__, controller_class.__qualname__, action, ACTION_SUFFIX)

# jQuery and friends set this header; Django dropped
# HttpRequest.is_ajax() so we check it directly
def is_xhr(request):
    return request.headers.get('X-Requested-With') == 'XMLHttpRequest'

class ActionGate(object):

    # base_class is the controller base whose own methods are never
    # actions, even when their names end in the suffix
    def __init__(self, controller_class, registry = None, base_class = None):
        self.controller_class = controller_class
        self.registry = registry if registry is not None else default_policies
        self.base_class = base_class

    # is <action_name>_action a method of the controller, and not one
    # of the base class helpers?
    def is_action(self, action_name):
        if not action_name:
            return False
        method_name = action_name + ACTION_SUFFIX
        if self.base_class is not None and hasattr(self.base_class, method_name):
            return False
        return callable(getattr(self.controller_class, method_name, None))

    def is_restricted_action(self, action_name):
        return self.is_action(action_name) and self.registry.is_ajax_only(self.controller_class, action_name)

    # strip "<controller>::" and the trailing suffix
    def resolve_action_name(self, request):
        identifier = getattr(request, HANDLER_ATTRIBUTE, None) or ''
        return _suffix_re.sub('', identifier.split('::')[-1])

    # NOTE: request may be None (e.g. an action invoked outside of
    # a request cycle), in which case the action name must be given
    def guard(self, request, action_name = None):
        if action_name is None:
            action_name = self.resolve_action_name(request) if request is not None else ''

        if self.is_restricted_action(action_name) and (request is None or not is_xhr(request)):
            raise Http404(NOT_FOUND_MESSAGE)

# where the gate fires: 'dispatch' (AjaxController.dispatch, the
# default) or 'middleware' (PreExecuteMiddleware.process_view); the
# other hook stands down so the gate runs once per request
GATE_STRATEGIES = ('dispatch', 'middleware')

def gate_strategy():
    strategy = settings.SIS_AJAX_GATE_STRATEGY
    if strategy not in GATE_STRATEGIES:
        raise ImproperlyConfigured('SIS_AJAX_GATE_STRATEGY must be one of %s, not %r' % (', '.join(GATE_STRATEGIES), strategy))
    return strategy
