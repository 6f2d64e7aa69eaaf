"""
Access policy registry and the Enumeration it is built on.

Run: python -m pytest tests/test_policy.py -v
"""

import pytest

from sis.ajax.ajax_test import AjaxTestController
from sis.ajax.policy import ACCESS_POLICIES, ActionPolicyRegistry, policies
from sis.common import Enumeration


class Parent(object):
    pass


class Child(Parent):
    pass


def test_enumeration_lookups():
    assert ACCESS_POLICIES.OPEN == 0
    assert ACCESS_POLICIES.AJAX_ONLY == 1
    assert ACCESS_POLICIES.get_label(1) == 'AJAX_ONLY'
    assert ACCESS_POLICIES.get_display(1) == 'XMLHttpRequest only'
    assert ACCESS_POLICIES.get_value('OPEN') == 0
    assert ACCESS_POLICIES.get_value(1) == 1
    assert 'AJAX_ONLY' in ACCESS_POLICIES
    assert 'NOPE' not in ACCESS_POLICIES
    assert len(ACCESS_POLICIES) == 2


def test_enumeration_unknown_attribute():
    colors = Enumeration((0, 'RED'), (1, 'GREEN'))
    assert colors.choices == [ (0, 'RED'), (1, 'GREEN') ]
    assert colors.get_display(1) == 'GREEN'
    assert colors.get_label(7) is None
    with pytest.raises(AttributeError):
        colors.BLUE


def test_unregistered_action_is_open():
    registry = ActionPolicyRegistry()
    assert registry.policy_for(Parent, 'save') == ACCESS_POLICIES.OPEN
    assert not registry.is_ajax_only(Parent, 'save')


def test_register_defaults_to_ajax_only():
    registry = ActionPolicyRegistry()
    registry.register(Parent, 'save')
    assert registry.is_ajax_only(Parent, 'save')
    assert not registry.is_ajax_only(Parent, 'load')
    assert len(registry) == 1


def test_register_accepts_labels():
    registry = ActionPolicyRegistry()
    registry.register(Parent, 'save', 'AJAX_ONLY')
    assert registry.policy_for(Parent, 'save') == ACCESS_POLICIES.AJAX_ONLY


def test_register_rejects_unknown_policy():
    registry = ActionPolicyRegistry()
    with pytest.raises(ValueError):
        registry.register(Parent, 'save', 7)
    with pytest.raises(ValueError):
        registry.register(Parent, 'save', 'SOMETIMES')
    assert len(registry) == 0


def test_subclass_inherits_and_overrides():
    registry = ActionPolicyRegistry()
    registry.register_ajax_only(Parent, 'save', 'delete')
    assert registry.is_ajax_only(Child, 'save')
    assert registry.is_ajax_only(Child, 'delete')

    registry.register(Child, 'save', ACCESS_POLICIES.OPEN)
    assert not registry.is_ajax_only(Child, 'save')
    assert registry.is_ajax_only(Parent, 'save')


def test_unregister_and_clear():
    registry = ActionPolicyRegistry()
    registry.register(Parent, 'save')
    registry.unregister(Parent, 'save')
    registry.unregister(Parent, 'never-registered')
    assert not registry.is_ajax_only(Parent, 'save')

    registry.register(Parent, 'save')
    registry.clear()
    assert len(registry) == 0


def test_sample_controller_registrations():
    assert policies.is_ajax_only(AjaxTestController, 'success')
    assert policies.policy_for(AjaxTestController, 'page') == ACCESS_POLICIES.OPEN
    assert policies.policy_for(AjaxTestController, 'echo') == ACCESS_POLICIES.OPEN
