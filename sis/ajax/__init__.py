# functions and views for supporting AJAX requests and responses
#
# this is a high-level package that exports most symbols from
# sub-modules; see those modules for implementation details

# We define some standards around how WE will be doing AJAX:
#
# 1. Controllers group actions.
#
#    A controller is a class-based view (AjaxController) with one
#    method per action, named <action>_action. urls.py picks the
#    action with as_view(action = ...) or an <action> URL parameter.
#
# 2. Some actions are AJAX-only.
#
#    Those are listed in the policy registry (sis.ajax.policy), with
#    an explicit register() call next to the controller. A request
#    to one of them that isn't an XMLHttpRequest gets a 404 (NOT a
#    403: we don't admit the action exists). The check runs before
#    the action, either in the controller's dispatch or in
#    PreExecuteMiddleware, depending on SIS_AJAX_GATE_STRATEGY.
#
# 3. All AJAX responses are JSON in one of two formats.
#
#    {
#        'success': <bool>,
#        'successText': <translated message, or ''>,
#        'errorText': <translated message, or ''>,
#        # ... any extra data the action adds, merged last
#    }
#
#    or, when the client should navigate somewhere else,
#
#    {
#        'redirect': <url>
#    }
#
#    Messages are passed as translation keys. A key without a
#    translation becomes '' (and is logged), never the raw key.
#
#    NOTE: ALL formatted responses are returned with HTTP status
#    200 (OK), including errors.
#
# 4. Internal errors stay internal.
#
#    An unexpected exception in an action is logged and the client
#    gets errorText for 'internal_error'. Only AjaxDomainError, whose
#    message is itself a translation key, shows its message.

from sis.ajax.errors import AjaxDomainError
from sis.ajax.gate import ActionGate, handler_identifier, is_xhr
from sis.ajax.policy import ACCESS_POLICIES, ActionPolicyRegistry, policies
from sis.ajax.responses import AjaxResponseBase, AjaxEnvelopeResponse, AjaxRedirectResponse, ResponseFormatter
from sis.ajax.translation import CatalogTranslator, DjangoTranslator
from sis.ajax.views import AjaxController
