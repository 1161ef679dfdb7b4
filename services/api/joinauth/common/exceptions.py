import traceback


class AppBaseException(Exception):
    """Root of every error raised on purpose. Anything else reaching the HTTP layer is a bug."""

class ConfigurationError(AppBaseException):
    """Environment lacks a required setting or holds a malformed one"""


def describe_exception(e: BaseException) -> str:
    '''Exception type, message and full traceback (causes included) for log lines'''
    return f'{type(e).__name__}: {e}\n{"".join(traceback.format_exception(e))}'
