# default settings for the sis package
#
# pull these into your project's settings.py and override below:
#
#   from sis.settings_sis import *

# where the action gate runs: 'dispatch' has every AjaxController
# check itself before running an action; 'middleware' leaves it to
# sis.ajax.middleware.PreExecuteMiddleware, which then MUST be in
# MIDDLEWARE or AJAX-only actions are not guarded at all
SIS_AJAX_GATE_STRATEGY = 'dispatch'

# translator used by controllers that aren't given one; any class
# with translate(key, parameters, domain) will do
SIS_AJAX_TRANSLATOR = 'sis.ajax.translation.DjangoTranslator'

# default translation domain for response messages; controllers
# can change it with set_translation_domain()
SIS_AJAX_TRANSLATION_DOMAIN = 'messages'

# catalogs for sis.ajax.translation.CatalogTranslator, shaped
# { domain: { key: text } }
SIS_AJAX_CATALOGS = {}

# where unauthenticated AJAX callers are sent
SIS_AJAX_AUTHORIZATION_URL = '/'

# turn exceptions escaping an action into an 'internal_error'
# envelope; set False to let Django render its 500 page instead
SIS_AJAX_CATCH_EXCEPTIONS = True

# set this to True to log all AJAX requests/responses (and their
# timing, with the middleware) at DEBUG
# NOTE: the default should ALWAYS BE OFF
SIS_AJAX_DUMP_INFO = False

# by default email will appear to originate from a single
# (typically non-replyable) address; YOU SHOULD SET THIS
# as it's totally app-specific
SIS_EMAIL_FROM = ('noreply@example.com', 'noreply')

# template directory holding one folder per email message
SIS_EMAIL_TEMPLATE_BASE = 'email'

# set this to a list of email addresses to capture all
# outbound email and direct it to the list instead (for
# debugging)
SIS_EMAIL_OVERRIDE_TOLIST = None

# if this is set to True, then attempts to send email that
# fail will be quietly ignored; this should NEVER be set to
# True in production
SIS_EMAIL_FAIL_SILENTLY = False

# global defaults about login requirements
LOGIN_REQUIRED_DEFAULT = False
LOGIN_REDIRECT_LOCATION_DEFAULT = '/'
LOGIN_SESSION_KEY_DEFAULT = 'appuser_id'
