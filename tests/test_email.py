"""
Template email sending from controllers.

Run: python -m pytest tests/test_email.py -v
"""

import pytest
from django.template import TemplateDoesNotExist

from sis.ajax.ajax_test import AjaxTestController
from sis.email import SUBJECT_KEY, send_mail


@pytest.fixture
def controller():
    return AjaxTestController()


def test_send_email(controller, mailoutbox):
    data = { 'name': 'Ann' }
    assert controller.send_email('ann@example.com', 'welcome', data) == 1

    assert len(mailoutbox) == 1
    message = mailoutbox[0]
    assert message.subject == 'Welcome, Ann'
    assert message.body == 'Hello Ann.\nSubject was: Welcome, Ann\n'
    assert message.to == [ 'ann@example.com' ]
    assert message.from_email == 'noreply <noreply@example.com>'
    assert message.content_subtype == 'plain'
    # the caller's data is left alone
    assert data == { 'name': 'Ann' }


def test_template_name_is_lower_cased(controller, mailoutbox):
    controller.send_email('ann@example.com', 'Welcome', { 'name': 'Ann' })
    assert mailoutbox[0].subject == 'Welcome, Ann'


def test_html_body_and_flattened_subject(controller, mailoutbox):
    controller.send_email('bob@example.com', 'invoice', { 'number': 42 })
    message = mailoutbox[0]
    assert message.subject == 'Invoice 42'
    assert message.content_subtype == 'html'
    assert '<title>Invoice 42</title>' in message.body


def test_set_email_from(controller, mailoutbox):
    assert controller.email_from == ('noreply@example.com', 'noreply')

    controller.set_email_from('billing@example.com', 'Billing')
    controller.send_email('ann@example.com', 'welcome', { 'name': 'Ann' })
    assert mailoutbox[0].from_email == 'Billing <billing@example.com>'

    controller.set_email_from('bare@example.com')
    assert controller.get_email_from() == 'bare@example.com'


def test_email_from_setting(settings):
    settings.SIS_EMAIL_FROM = ('shop@example.com', 'Shop')
    assert AjaxTestController().get_email_from() == 'Shop <shop@example.com>'


def test_override_tolist(settings, mailoutbox, caplog):
    settings.SIS_EMAIL_OVERRIDE_TOLIST = [ 'qa@example.com' ]
    send_mail('welcome', 'ann@example.com', 'noreply@example.com', { 'name': 'Ann' })
    assert mailoutbox[0].to == [ 'qa@example.com' ]
    assert any(r.name == 'sis.email' and 'qa@example.com' in r.getMessage() for r in caplog.records)


def test_missing_template(controller, mailoutbox):
    with pytest.raises(TemplateDoesNotExist):
        controller.send_email('ann@example.com', 'no-such-mail', {})
    assert mailoutbox == []


def test_subject_key():
    assert SUBJECT_KEY == 'subject'
