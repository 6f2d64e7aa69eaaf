from sis.common import Enumeration

# access policies for controller actions
#
# Every action is OPEN unless it has been registered otherwise.
# AJAX_ONLY actions answer 404 to anything but an XMLHttpRequest
# (see sis.ajax.gate).
#
ACCESS_POLICIES = Enumeration(
        (0, 'OPEN', 'Any request'),
        (1, 'AJAX_ONLY', 'XMLHttpRequest only'),
    )

# a static table of (controller class, action name) -> policy
#
# The table is filled by explicit register() calls, normally at the
# bottom of the module that defines the controller, so it is complete
# once the URL configuration has been imported:
#
#     class ProfileController(AjaxController):
#         def save_action(self, request, *args, **kwargs):
#             ...
#
#     policies.register(ProfileController, 'save', ACCESS_POLICIES.AJAX_ONLY)
#
# Lookups walk the controller's MRO, so a subclass inherits the
# policies registered on its parents and may override them with its
# own registration.
#
class ActionPolicyRegistry(object):

    def __init__(self):
        self._table = {}

    def register(self, controller_class, action, policy = ACCESS_POLICIES.AJAX_ONLY):
        try:
            policy = ACCESS_POLICIES.get_value(policy)
        except KeyError:
            raise ValueError('unknown access policy %r for action %r' % (policy, action))
        if ACCESS_POLICIES.get_label(policy) is None:
            raise ValueError('unknown access policy %r for action %r' % (policy, action))
        self._table[(controller_class, action)] = policy

    # convenience for the common case
    def register_ajax_only(self, controller_class, *actions):
        for action in actions:
            self.register(controller_class, action, ACCESS_POLICIES.AJAX_ONLY)

    def unregister(self, controller_class, action):
        self._table.pop((controller_class, action), None)

    def policy_for(self, controller_class, action):
        for klass in controller_class.__mro__:
            policy = self._table.get((klass, action))
            if policy is not None:
                return policy
        return ACCESS_POLICIES.OPEN

    def is_ajax_only(self, controller_class, action):
        return self.policy_for(controller_class, action) == ACCESS_POLICIES.AJAX_ONLY

    def clear(self):
        self._table.clear()

    def __len__(self):
        return len(self._table)

# the process-wide registry used by controllers unless they are
# given their own
policies = ActionPolicyRegistry()
