# logging for a site built on sis
#
# Records from the sis.* loggers (sis.ajax, sis.email) go to the
# console at INFO and above. A translation key with no catalog
# entry is reported on sis.ajax at CRITICAL, so it shows up even
# with a quiet console.
#
# Exceptions an AJAX controller catches are still written to
# django.request at ERROR, which mails them to ADMINS when DEBUG is
# off. Loggers configured elsewhere are kept.
#
#   from sis.settings_logging import LOGGING

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s'
        },
        'simple': {
            'format': '%(levelname)s %(message)s'
        },
    },
    'handlers': {
        'null': {
            'level': 'DEBUG',
            'class': 'logging.NullHandler',
        },
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'simple'
        },
        'mail_admins': {
            'level': 'ERROR',
            'class': 'django.utils.log.AdminEmailHandler',
            'include_html': True,
        }
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'propagate': True,
            'level': 'INFO',
        },
        'django.request': {
            'handlers': ['mail_admins'],
            'level': 'ERROR',
            'propagate': False,
        },
        'sis': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True,
        },
    }
}
