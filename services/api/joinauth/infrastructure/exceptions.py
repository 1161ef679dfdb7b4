from joinauth.common.exceptions import AppBaseException


class StorageException(AppBaseException):
    """Storage backend failed outside of a single query"""

class StorageBootError(StorageException):
    '''Database did not answer within the configured attempts'''

class StorageNotInitialzied(StorageException):
    '''Storage manager used after close()'''


class MailDeliveryError(AppBaseException):
    '''Outbound mail server refused or failed to deliver a message'''
