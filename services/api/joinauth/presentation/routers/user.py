#Fastapi
from fastapi import APIRouter, Path
#Project files
import joinauth.application.dependencies as deps
import joinauth.presentation.schemas as schemas
#Typing
import typing as t


########################################
#                Setup                 #
########################################

router = APIRouter(
    tags = ["users"],
    responses={
        401: {"description": "Missing, malformed or expired token"},
        404: {"description": "Requested resource is not found"},
    }
    )

import logging
logger = logging.getLogger('joinauth')


########################################
#        GETTING USER PROFILE          #
########################################

@router.post('/user')
async def whoami(
        user_service: deps.UserServiceDependency,
        identity: deps.CurrentIdentityDependency,
    ) -> schemas.UserDTO:
    '''Returns the record of the token's subject'''
    return await user_service.get_user(identity.subject)


########################################
#             USER CRUD                #
########################################

@router.put("/users/{user_id}", description="Update a user. Provide only those fields that need to be changed, empty values are ignored.", responses= {
    200: {"description":"User updated"},
    409: {"description":"Email or username already taken"},
    })
async def update_user(
    user_service: deps.UserServiceDependency,
    identity: deps.CurrentIdentityDependency,
    new_user_data: schemas.UserUpdateModel,
    user_id: t.Annotated[str, Path(description='id of a user to edit')],
    ) -> schemas.UserEnvelope:
    logger.info(f'[USERS] Subject {identity.subject} updates user id={user_id}')
    user = await user_service.update(user_id, new_user_data)
    return schemas.UserEnvelope(message="User updated successfully", user=user)


@router.delete('/users/{user_id}', tags=['admin'], responses= {
    200: {"description":"User deleted successfully"},
})
async def delete_user(
    user_service: deps.UserServiceDependency,
    admin: deps.AdminIdentityDependency,
    user_id: t.Annotated[str, Path(description='id of a user to delete')],
    ) -> schemas.MessageResponse:
    await user_service.delete(user_id)
    return schemas.MessageResponse(message="User deleted successfully")


@router.post('/admin', tags=['admin'])
async def list_users(
        user_service: deps.UserServiceDependency,
        admin: deps.AdminIdentityDependency,
    ) -> list[schemas.UserDTO]:
    '''Every user except the admin account'''
    return await user_service.list_all()
