from django.conf import settings
from django.core.mail import EmailMessage
from django.template.loader import get_template, select_template

import logging
import os.path

logger = logging.getLogger('sis.email')

# You will need to define some values in your settings file
# in order to use this, in addition to the regular email
# settings (see sis.settings_sis for the defaults).
#
#   SIS_EMAIL_FROM                  (address, name) pair mail appears to come from
#   SIS_EMAIL_TEMPLATE_BASE         base directory in templates that contains email
#   SIS_EMAIL_OVERRIDE_TOLIST       if set, replaces ALL email destination addresses with this list (for debugging)
#   SIS_EMAIL_FAIL_SILENTLY         whether to ignore errors in email; DO NOT set True for production
#
# Email templates are stored in folders, one per message:
#
#   <email_template_base>/<template_name>/subject.txt       subject line of message
#   <email_template_base>/<template_name>/body.txt          plaintext body of message
#   <email_template_base>/<template_name>/body.html         HTML body of message (used if there is no body.txt)
#
# The subject is rendered first and handed to the body template as
# {{ subject }}, so an HTML body can put it in its <title>.

SUBJECT_KEY = 'subject'

# prep and send an email message
#
# returns the number of messages delivered (0 or 1), the same as
# Django's own send_mail
def send_mail(template_name, tolist, from_email, data = None):
    if isinstance(tolist, str):
        tolist = [ tolist ]
    # copy, since we add the subject to it
    data = dict(data) if data is not None else {}

    # make sure the path has been lower-cased
    template_path = os.path.join(settings.SIS_EMAIL_TEMPLATE_BASE, template_name.lower())

    # fetch the templates
    # NOTE: if the templates do not exist, TemplateDoesNotExist is raised
    subject_template = get_template(os.path.join(template_path, 'subject.txt'))
    body_template = select_template([ os.path.join(template_path, 'body.txt'), os.path.join(template_path, 'body.html') ])
    html_type = body_template.origin.name.endswith('.html')

    # headers can't contain newlines, so the subject is flattened
    subject = ' '.join(subject_template.render(data).split())
    data[SUBJECT_KEY] = subject
    body = body_template.render(data)

    # send the email
    if settings.SIS_EMAIL_OVERRIDE_TOLIST:
        logger.warning('sending email to %r instead of %r', settings.SIS_EMAIL_OVERRIDE_TOLIST, tolist)
        tolist = list(settings.SIS_EMAIL_OVERRIDE_TOLIST)
    else:
        logger.info('sending email %r to %r', template_name, tolist)

    msg = EmailMessage(subject, body, from_email, tolist)
    if html_type:
        msg.content_subtype = 'html'
    return msg.send(fail_silently = settings.SIS_EMAIL_FAIL_SILENTLY)
