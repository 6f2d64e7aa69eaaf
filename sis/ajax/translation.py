from django.conf import settings
from django.utils import translation

# translators
#
# The response formatter only needs an object with
#
#     translate(key, parameters, domain) -> str
#
# and treats a result equal to the key as "no translation". Both
# translators below follow that convention, as does gettext itself.

DEFAULT_DOMAIN = 'messages'

# fill in %(name)s placeholders; an empty parameter mapping leaves
# the text alone so that a literal '%' in a message survives
def _substitute(text, parameters):
    if parameters:
        return text % parameters
    return text

# Django's own catalogs (LOCALE_PATHS, app locale directories)
#
# gettext has a single domain per project, so the default domain
# maps to plain gettext and any other domain is used as the message
# context (msgctxt) through pgettext.
#
class DjangoTranslator(object):

    def translate(self, key, parameters = None, domain = DEFAULT_DOMAIN):
        if domain and domain != DEFAULT_DOMAIN:
            text = translation.pgettext(domain, key)
        else:
            text = translation.gettext(key)

        if text == key:
            # leave missing translations untouched so the caller sees them
            return key
        return _substitute(text, parameters)

# in-memory catalogs, shaped { domain: { key: text } }
#
# Useful for small deployments and for tests; with no catalogs
# given, the SIS_AJAX_CATALOGS setting is used.
#
class CatalogTranslator(object):

    def __init__(self, catalogs = None):
        if catalogs is None:
            catalogs = settings.SIS_AJAX_CATALOGS
        self.catalogs = catalogs

    def translate(self, key, parameters = None, domain = DEFAULT_DOMAIN):
        text = self.catalogs.get(domain, {}).get(key)
        if text is None:
            return key
        return _substitute(text, parameters)
