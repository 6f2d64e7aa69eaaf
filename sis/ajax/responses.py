from django.core.serializers.json import DjangoJSONEncoder
from django.http import HttpResponse
from django.urls import reverse

from sis.ajax.translation import DEFAULT_DOMAIN

import json
import logging

# AJAX responses
#
# Every response built here is JSON with HTTP status 200, including
# failures; the client looks at the body, not the status, to decide
# what happened. There are exactly two body shapes:
#
#   the envelope    { 'success': bool, 'successText': str, 'errorText': str, ...extras }
#   a redirect      { 'redirect': url }
#
# Clients must not assume every response is an envelope.

INTERNAL_ERROR = 'internal_error'

# Base AJAX response class. Expects a fully-formatted response
# blob to be present at initialization.
#
class AjaxResponseBase(HttpResponse):

    def __init__(self, response, *args, **kwargs):
        kwargs.setdefault('content_type', 'application/json')
        super(AjaxResponseBase, self).__init__(*args, **kwargs)
        self.content = json.dumps(response, cls = DjangoJSONEncoder)

# the success/failure envelope; the dict is kept on the response
# so views and tests don't have to decode it again
#
class AjaxEnvelopeResponse(AjaxResponseBase):

    def __init__(self, envelope):
        for key in ('success', 'successText', 'errorText'):
            if key not in envelope:
                raise ValueError('AJAX envelope requested but the %r key is missing' % key)
        self.envelope = envelope
        super(AjaxEnvelopeResponse, self).__init__(envelope)

# AJAX redirect response
#
# the browser won't follow a 30x for an XHR the way we want, so the
# target goes in the body and the client-side handler navigates
#
class AjaxRedirectResponse(AjaxResponseBase):

    def __init__(self, url):
        self.envelope = { 'redirect': url }
        super(AjaxRedirectResponse, self).__init__(self.envelope)

# builds envelopes
#
# Message keys are translated through the injected translator. A key
# the translator hands back unchanged has no translation: it is logged
# at CRITICAL and replaced by an empty string, so the client never
# sees a raw key.
#
# NOTE: extras are merged LAST and win over everything, including
# success/successText/errorText. That lets a caller clobber the
# computed fields. Callers rely on it.
#
class ResponseFormatter(object):

    def __init__(self, translator, logger = None, domain = DEFAULT_DOMAIN, parameters = None):
        self.translator = translator
        self.logger = logger if logger is not None else logging.getLogger('sis.ajax')
        self.domain = domain
        # per-call substitution variables; reserved, currently always empty
        self.parameters = parameters if parameters is not None else {}

    def prototype(self):
        return {
                'success': False,
                'successText': '',
                'errorText': '',
            }

    def translate(self, key):
        return self.translator.translate(key, self.parameters, self.domain)

    def translate_or_clear(self, key):
        translated = self.translate(key)
        if translated == key:
            self.logger.critical('Missing translation: "%s"', key)
            return ''
        return translated

    def envelope(self, success, success_text = '', error_text = '', extra = None):
        response = self.prototype()

        if success_text:
            success_text = self.translate_or_clear(success_text)

        if not success and not error_text:
            error_text = INTERNAL_ERROR

        if error_text:
            error_text = self.translate_or_clear(error_text)

        response['success'] = success
        response['successText'] = success_text
        response['errorText'] = error_text

        if extra:
            response.update(extra)

        return response

    # NOTE: a non-empty url wins; the route is only resolved otherwise
    def redirect(self, route_name, url = '', resolver = reverse):
        return { 'redirect': url if url else resolver(route_name) }
