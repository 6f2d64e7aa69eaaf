# an expected, caller-meaningful failure
#
# The message is a translation key, and it IS shown to the client
# (translated) as the envelope's errorText. Use it for things like
# "email_taken"; anything else that escapes an action is treated as
# an internal error and the client only ever sees 'internal_error'.
#
# Extra envelope data may be attached:
#
#     raise AjaxDomainError('quota_exceeded', data = { 'limit': 10 })
#
class AjaxDomainError(Exception):

    def __init__(self, message, data = None):
        super(AjaxDomainError, self).__init__(message)
        self.data = data if data is not None else {}
