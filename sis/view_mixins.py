from django.conf import settings
from django.http import HttpResponseRedirect


#LoginRequiredMixin
#This mixin allows our views to be auth controlled and we can change the settings from the URLS.py level
#
#A url might look like:
# path('backoffice/members', <View>.as_view(login_required = True, login_redirect_location = '/backoffice/login'))
#
#You can also set global defaults for your entire application in settings:
# LOGIN_REQUIRED_DEFAULT
# LOGIN_SESSION_KEY_DEFAULT
# LOGIN_REDIRECT_LOCATION_DEFAULT
class LoginRequiredMixin(object):

    #Whether the login is required for this view; None means use LOGIN_REQUIRED_DEFAULT
    login_required = None
    #Session Key used when logged in to determine if they are logged in or not
    login_session_key = None
    #Redirect Location to go when ensuring fails
    login_redirect_location = None

    def get_login_required(self):
        if self.login_required is None:
            return settings.LOGIN_REQUIRED_DEFAULT
        return self.login_required

    def get_login_session_key(self):
        return self.login_session_key or settings.LOGIN_SESSION_KEY_DEFAULT

    def get_login_redirect_location(self):
        return self.login_redirect_location or settings.LOGIN_REDIRECT_LOCATION_DEFAULT

    #What to do when you aren't logged in for a get response
    #By default it will do an http response redirect to the redirect location
    def _get_if_not_logged_in(self, *args, **kwargs):
        return HttpResponseRedirect(self.get_login_redirect_location())

    #What to do when you aren't logged in for a Post response
    #By default it will do whatever _get_if_not_logged_in() does
    def _post_if_not_logged_in(self, *args, **kwargs):
        return self._get_if_not_logged_in(*args, **kwargs)

    #This will check if you are logged in currently and dispatch a type response if you are not.
    def _check_login(self, request, *args, **kwargs):
        if request.session.get(self.get_login_session_key()) is None:
            handler = getattr(self, '_' + request.method.lower() + '_if_not_logged_in', self._get_if_not_logged_in)
            return handler(request, *args, **kwargs)

    #WARNING: Be very careful when overriding this function.  This almost always needs to run first.
    def dispatch(self, request, *args, **kwargs):
        if self.get_login_required():
            response = self._check_login(request, *args, **kwargs)
            if response:
                return response
        return super(LoginRequiredMixin, self).dispatch(request, *args, **kwargs)


#AjaxLoginRequiredMixin
#AJAX callers get the JSON redirect to the authorization page instead of a 302
#The view must provide ajax_no_auth_response() (AjaxController does)
class AjaxLoginRequiredMixin(LoginRequiredMixin):

    def _get_if_not_logged_in(self, *args, **kwargs):
        return self.ajax_no_auth_response()
