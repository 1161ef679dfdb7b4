from joinauth.common.exceptions import AppBaseException


class DomainLayerException(AppBaseException):
    '''Business rule violations. Messages are safe to show to clients.'''


class ModelIntegrityError(Exception):
    '''Adapter for storage integrity violations. `orig` keeps the driver error for logs.'''
    def __init__(self, *args, orig: Exception | None = None):
        super().__init__(*args)
        self.orig = orig

class VersionError(DomainLayerException):
    '''Row changed between read and write'''


#Users
class BaseUserException(DomainLayerException): ...

class UserValueError(BaseUserException):
    '''Invalid user data'''

class MissingFields(UserValueError):
    '''A required field is absent or empty. The message names all of them.'''

class UserDoesNotExist(BaseUserException): ...

class UserIntegrityError(ModelIntegrityError, BaseUserException):
    '''Write rejected by a users table constraint'''

class UserAlreadyExists(UserIntegrityError):
    '''Email, username or id already taken'''


#Join codes
class BaseJoinCodeException(DomainLayerException): ...

class InvalidJoinCode(BaseJoinCodeException):
    '''Code is unknown or already consumed'''
