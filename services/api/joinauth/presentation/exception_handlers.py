import joinauth.domain.exceptions as domexc
import joinauth.application.exceptions as appexc
import joinauth.common.exceptions as exc
from fastapi.responses import JSONResponse

import logging

logger = logging.getLogger('joinauth')


def register_exception_handlers(app):

    @app.exception_handler(appexc.AuthBaseException)
    async def auth_exception_handler(request, e: appexc.AuthBaseException):
        #Gate failures all look alike from the outside
        logger.info(f'[AUTH] {request.method} {request.url.path} rejected: {type(e).__name__}: {e}')
        detail = "Invalid credentials" if isinstance(e, appexc.InvalidCredentials) else "Unauthorized"
        return JSONResponse({"detail": detail}, status_code=401)


    @app.exception_handler(domexc.BaseUserException)
    async def user_exception_handler(request, e: domexc.BaseUserException):
        mapping = {
            domexc.UserValueError: 400,
            domexc.MissingFields: 400,
            domexc.UserDoesNotExist: 404,
            domexc.UserAlreadyExists: 409,
            domexc.UserIntegrityError: 409,
        }
        status = mapping.get(type(e), 500)
        if status == 500:
            logger.error(f'[USERS] Unmapped user error: {exc.describe_exception(e)}')
            return JSONResponse({"detail": "Internal server error"}, status_code=status)
        return JSONResponse({"detail": str(e)}, status_code=status)


    @app.exception_handler(domexc.BaseJoinCodeException)
    async def join_code_exception_handler(request, e: domexc.BaseJoinCodeException):
        return JSONResponse({"detail": "Invalid join code"}, status_code=400)


    @app.exception_handler(domexc.VersionError)
    async def version_exception_handler(request, e: domexc.VersionError):
        return JSONResponse({"detail": "Record was changed concurrently, please retry"}, status_code=409)


    @app.exception_handler(exc.AppBaseException)
    async def app_exception_handler(request, e: exc.AppBaseException):
        logger.error(f'[APP] {request.method} {request.url.path} failed: {exc.describe_exception(e)}')
        return JSONResponse({"detail": "Internal server error"}, status_code=500)
