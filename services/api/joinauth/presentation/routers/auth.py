#Fastapi
from fastapi import APIRouter, status

#Project files
import joinauth.presentation.schemas as schemas
import joinauth.application.dependencies as appdeps

import logging

logger = logging.getLogger('joinauth')
router = APIRouter(
    tags = ["auth"],
    responses={500: {"description": "Internal server error"}}
    )



@router.post("/login", responses={
    401: {"description":"Wrong password or missing field"},
    404: {"description":"No user with such username"},
    },
    description='If credentials are valid returns a token to be used in Authorization header as "Bearer [token]"')
async def login(auth_service: appdeps.AuthServiceDependency, form_data: schemas.UserLoginModel) -> schemas.LoginResponse:
    result = await auth_service.login(form_data.model_dump())
    return schemas.LoginResponse(token=result.token, is_admin=result.is_admin)


@router.post("/signUp", responses={
    400: {"description":"Missing field or invalid join code"},
    409: {"description":"Email already exists"},
    },
    status_code=status.HTTP_201_CREATED,
    description='Creates an account. Requires a join code received via /join. The code is single-use.')
async def sign_up(user_service: appdeps.UserServiceDependency, signup_data: schemas.SignUpModel) -> schemas.UserEnvelope:
    user = await user_service.register(signup_data)
    return schemas.UserEnvelope(message="User created successfully", user=user)


@router.post("/join", responses={
    422: {"description":"Receiver is not a valid email"},
    },
    description='Mails a fresh join code to the receiver')
async def send_join_code(join_code_service: appdeps.JoinCodeServiceDependency, join_request: schemas.JoinRequest) -> schemas.MessageResponse:
    await join_code_service.send_join_code(join_request.receiver)
    return schemas.MessageResponse(message="Join code sent successfully")
