from joinauth.common.exceptions import AppBaseException

class ApplicationLayerException(AppBaseException):
    '''Base for application layer'''


### Auth
class AuthBaseException(ApplicationLayerException):
    '''Base for every "Unauthorized" outcome. Subclasses stay distinguishable for tests and logs,
    the HTTP boundary renders all of them the same way.'''

class TokenMissingException(AuthBaseException):
    '''Authorization header absent or empty'''

class CredentialsException(AuthBaseException):
    '''Token present but malformed or with a bad signature'''

class TokenExpiredException(AuthBaseException):
    '''Token signature is fine, validity window is over'''

class NotAdminException(AuthBaseException):
    '''Token is valid but its subject is not the admin principal'''

class InvalidCredentials(AuthBaseException):
    '''Login with a wrong password or without username/password'''
