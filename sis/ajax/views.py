from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.urls import reverse
from django.views.generic import View

from sis.ajax.errors import AjaxDomainError
from sis.ajax.gate import ACTION_SUFFIX, HANDLER_ATTRIBUTE, ActionGate, gate_strategy, handler_identifier
from sis.ajax.policy import policies
from sis.ajax.responses import INTERNAL_ERROR, AjaxEnvelopeResponse, AjaxRedirectResponse, ResponseFormatter
from sis.common import import_from_setting
from sis.email import send_mail
from sis.view_mixins import AjaxLoginRequiredMixin

from email.utils import formataddr
import logging
import sys

logger = logging.getLogger('sis.ajax')

# an AJAX controller base class
#
# A controller groups several actions; each one is a method named
# <action>_action and is wired in urls.py either with a fixed action
#
#     path('profile/save', ProfileController.as_view(action = 'save')),
#
# or with an <action> URL parameter
#
#     path('profile/<slug:action>', ProfileController.as_view()),
#
# Actions that must only be reached through XMLHttpRequest are
# registered with the policy registry (see sis.ajax.policy); a plain
# request to one of them gets a 404.
#
# Actions build their replies with ajax_response() and friends. All
# of these are JSON with HTTP status 200; failure is signalled by
# success = False in the body.
#
# Collaborators are injected through as_view() (or default from
# settings), e.g. as_view(translator = CatalogTranslator({...})).
#
class AjaxController(AjaxLoginRequiredMixin, View):

    # these attributes must be present or the as_view method
    # will not allow them to be set
    action = None
    translator = None
    translation_domain = None
    authorization_url = None
    email_from = None
    catch_exceptions = None
    policy_registry = policies

    def __init__(self, **kwargs):
        super(AjaxController, self).__init__(**kwargs)

        if self.translator is None:
            self.translator = import_from_setting('SIS_AJAX_TRANSLATOR', settings.SIS_AJAX_TRANSLATOR)()
        if self.translation_domain is None:
            self.translation_domain = settings.SIS_AJAX_TRANSLATION_DOMAIN
        if self.email_from is None:
            self.email_from = tuple(settings.SIS_EMAIL_FROM)
        if self.catch_exceptions is None:
            self.catch_exceptions = settings.SIS_AJAX_CATCH_EXCEPTIONS

        self.formatter = ResponseFormatter(self.translator, logger, self.translation_domain, self.get_translation_parameters())

    @classmethod
    def get_gate(cls):
        return ActionGate(cls, cls.policy_registry, AjaxController)

    #
    # the action gate
    #

    # is <action>_action defined here and registered as AJAX-only?
    def is_ajax_action(self, action):
        return self.get_gate().is_restricted_action(action)

    def get_action_name(self, request):
        return self.get_gate().resolve_action_name(request)

    # runs before every action when SIS_AJAX_GATE_STRATEGY is
    # 'dispatch'; raises Http404 for a non-AJAX call to an AJAX-only
    # action
    def pre_execute(self, request):
        self.get_gate().guard(request)

    def dispatch(self, request, *args, **kwargs):
        action = kwargs.pop('action', None) or self.action
        if not action:
            raise Http404('No action given.')
        self.action = action
        self.kwargs = kwargs

        # the middleware may already have done this
        if getattr(request, HANDLER_ATTRIBUTE, None) is None:
            setattr(request, HANDLER_ATTRIBUTE, handler_identifier(self.__class__, action))

        if gate_strategy() == 'dispatch':
            self.pre_execute(request)

        if not self.get_gate().is_action(action):
            raise Http404('Unknown action.')

        # special handling: if an exception occurs in an action, we
        # DO NOT want to return Django's HTML-formatted 500 page.
        # Instead, catch the exception and return an AJAX-formatted
        # error. 404s and 403s still go to Django.
        try:
            if settings.SIS_AJAX_DUMP_INFO:
                logger.debug('AJAX request: %s %s %s', request.method, request.path, request.POST if request.method == 'POST' else request.GET)

            results = super(AjaxController, self).dispatch(request, *args, **kwargs)

            if settings.SIS_AJAX_DUMP_INFO:
                logger.debug('AJAX result: %s', results.content)
            return results

        except (Http404, PermissionDenied):
            raise

        except AjaxDomainError as e:
            return self.ajax_error_response(e, e.data)

        except Exception as e:
            if not self.catch_exceptions:
                raise

            # this is how Django logs the exception (see
            # django.core.handlers.exception), so the admins still
            # get their mail while the client gets a sane reply
            logging.getLogger('django.request').error('Internal Server Error: %s', request.path,
                exc_info = sys.exc_info(),
                extra = {
                    'status_code': 500,
                    'request': request,
                }
            )
            return self.ajax_exception_response(e)

    # every HTTP method goes to the action; it can look at
    # request.method itself if it cares
    def handle(self, request, *args, **kwargs):
        return getattr(self, self.action + ACTION_SUFFIX)(request, *args, **kwargs)

    get = post = put = patch = delete = handle

    #
    # responses
    #

    # the standard envelope; see ResponseFormatter.envelope
    def ajax_response(self, success, success_text = '', error_text = '', data = None):
        return AjaxEnvelopeResponse(self.formatter.envelope(success, success_text, error_text, data))

    # unexpected failure: the message goes to the log, the client
    # only gets 'internal_error'
    # NOTE: dispatch has already logged the traceback to django.request;
    # this line is the exception response's own log entry and is
    # wanted as well, for exceptions handled by the action itself
    def ajax_exception_response(self, e):
        logger.error(str(e))
        return self.ajax_response(False, '', INTERNAL_ERROR)

    # expected failure: the exception message is a translation key
    # and is shown to the client
    def ajax_error_response(self, e, data = None):
        return self.ajax_response(False, '', str(e), data)

    def ajax_redirect_response(self, route_name, url = ''):
        return AjaxRedirectResponse(self.formatter.redirect(route_name, url, reverse)['redirect'])

    def get_authorization_url(self):
        return self.authorization_url or settings.SIS_AJAX_AUTHORIZATION_URL

    def ajax_no_auth_response(self):
        return self.ajax_redirect_response('', self.get_authorization_url())

    #
    # translation
    #

    def translate(self, msg):
        return self.formatter.translate(msg)

    # substitution variables for every translation; none yet
    def get_translation_parameters(self):
        return {}

    def set_translation_domain(self, domain):
        self.translation_domain = domain
        self.formatter.domain = domain
        return domain

    def get_translation_domain(self):
        return self.translation_domain

    #
    # email
    #

    def set_email_from(self, address, name = None):
        self.email_from = (address, name)

    def get_email_from(self):
        address, name = self.email_from
        return formataddr((name, address)) if name else address

    # renders <template_name>/subject.txt and <template_name>/body.*
    # (see sis.email) and sends them to a single address
    def send_email(self, to_address, template_name, template_vars = None):
        return send_mail(template_name, [ to_address ], self.get_email_from(), template_vars)
