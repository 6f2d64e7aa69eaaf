from django.conf import settings
from django.utils.deprecation import MiddlewareMixin

from sis.ajax.gate import HANDLER_ATTRIBUTE, gate_strategy, handler_identifier
from sis.ajax.views import AjaxController

import logging
import time

logger = logging.getLogger('sis.ajax')

# runs the action gate before the view is called
#
# settings:
#
#   SIS_AJAX_GATE_STRATEGY  must be 'middleware' for this to guard anything;
#                           with 'dispatch' the controller guards itself
#   SIS_AJAX_DUMP_INFO      also report each controller request and its time
#
# Add it to MIDDLEWARE after the session and auth middleware:
#
#   'sis.ajax.middleware.PreExecuteMiddleware',
#
# Only views made with AjaxController.as_view() are looked at;
# everything else passes straight through.
#
class PreExecuteMiddleware(MiddlewareMixin):

    def process_view(self, request, view_func, view_args, view_kwargs):
        controller_class = getattr(view_func, 'view_class', None)
        if controller_class is None or not issubclass(controller_class, AjaxController):
            return None

        action = view_kwargs.get('action') or getattr(view_func, 'view_initkwargs', {}).get('action') or controller_class.action
        if not action:
            # the controller will 404 on its own
            return None

        setattr(request, HANDLER_ATTRIBUTE, handler_identifier(controller_class, action))
        if settings.SIS_AJAX_DUMP_INFO:
            request._sis_started = time.monotonic()

        if gate_strategy() == 'middleware':
            controller_class.get_gate().guard(request)
        return None

    def process_response(self, request, response):
        started = getattr(request, '_sis_started', None)
        if started is not None:
            logger.debug('AJAX request time: %s %.3fs %s', request.method, time.monotonic() - started, getattr(request, HANDLER_ATTRIBUTE, request.path))
        return response
