import pytest
import joinauth.presentation.schemas as schemas
from tests.conftest import ADMIN_ID
from tests.helpers.users import create_user_in_db, fetch_user
from tests.helpers.tokens import token_for, expired_token_for, auth_header


@pytest.fixture
def admin_headers(config):
    return auth_header(token_for(config, ADMIN_ID))


########################################
#        GETTING USER PROFILE          #
########################################

async def test_whoami(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    response = await async_client.post('/user', headers=auth_header(token_for(config, user.id)))
    assert response.status_code == 200
    dto = schemas.UserDTO.model_validate(response.json())
    assert dto.id == user.id
    assert dto.username == 'JoDo19'
    assert 'passwordHash' not in response.json()


async def test_whoami_any_scheme_is_accepted(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    response = await async_client.post('/user', headers=auth_header(token_for(config, user.id), scheme='Token'))
    assert response.status_code == 200


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {'Authorization': ''},
        {'Authorization': 'Bearer'},
        {'Authorization': 'Bearer not.a.jwt'},
    ]
)
async def test_whoami_rejects_bad_tokens(async_client, headers):
    response = await async_client.post('/user', headers=headers)
    assert response.status_code == 401
    assert response.json() == {'detail': 'Unauthorized'}


async def test_whoami_expired_token(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    response = await async_client.post('/user', headers=auth_header(expired_token_for(config, user.id)))
    assert response.status_code == 401


async def test_whoami_foreign_signature(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    foreign = config.model_copy(update={'JWT_SECRET': 'some-other-secret-which-is-long-enough-too'})
    response = await async_client.post('/user', headers=auth_header(token_for(foreign, user.id)))
    assert response.status_code == 401


async def test_whoami_deleted_subject(async_client, config):
    response = await async_client.post('/user', headers=auth_header(token_for(config, 'gone')))
    assert response.status_code == 404


########################################
#               Update                 #
########################################

async def test_partial_update_changes_only_given_field(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    response = await async_client.put(
        f'/users/{user.id}',
        json={'firstName': 'Jane', 'lastName': ''},
        headers=auth_header(token_for(config, user.id)),
    )
    assert response.status_code == 200
    body = response.json()
    assert body['message'] == 'User updated successfully'
    assert body['user']['firstName'] == 'Jane'

    stored = await fetch_user(database_manager, user.id)
    assert stored.model_dump(exclude={'first_name', 'version'}) == user.model_dump(exclude={'first_name', 'version'})
    assert stored.first_name == 'Jane'


async def test_update_password_allows_new_login(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    response = await async_client.put(
        f'/users/{user.id}', json={'password': 'n3wpass'}, headers=auth_header(token_for(config, user.id))
    )
    assert response.status_code == 200

    old = await async_client.post('/login', json={'username': 'JoDo19', 'password': '12341234'})
    new = await async_client.post('/login', json={'username': 'JoDo19', 'password': 'n3wpass'})
    assert old.status_code == 401
    assert new.status_code == 200


async def test_update_is_open_to_any_authenticated_user(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    other = await create_user_in_db(database_manager, email='jane@example.com', first_name='Jane')
    response = await async_client.put(
        f'/users/{user.id}', json={'mobile': '0700000000'}, headers=auth_header(token_for(config, other.id))
    )
    assert response.status_code == 200
    assert response.json()['user']['mobile'] == '0700000000'


async def test_update_failures(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    await create_user_in_db(database_manager, email='jane@example.com', first_name='Jane')
    headers = auth_header(token_for(config, user.id))

    response = await async_client.put(f'/users/{user.id}', json={'firstName': 'X'})
    assert response.status_code == 401

    response = await async_client.put('/users/nobody', json={'firstName': 'X'}, headers=headers)
    assert response.status_code == 404

    response = await async_client.put(f'/users/{user.id}', json={'email': 'jane@example.com'}, headers=headers)
    assert response.status_code == 409
    assert (await fetch_user(database_manager, user.id)).email == 'john.doe@example.com'


########################################
#               Delete                 #
########################################

async def test_delete_requires_token(async_client, database_manager):
    user = await create_user_in_db(database_manager)
    response = await async_client.delete(f'/users/{user.id}')
    assert response.status_code == 401
    assert await fetch_user(database_manager, user.id) is not None


async def test_delete_rejects_non_admin(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    response = await async_client.delete(f'/users/{user.id}', headers=auth_header(token_for(config, user.id)))
    assert response.status_code == 401
    assert response.json() == {'detail': 'Unauthorized'}
    assert await fetch_user(database_manager, user.id) is not None


async def test_delete_as_admin(async_client, database_manager, admin_headers):
    user = await create_user_in_db(database_manager)
    response = await async_client.delete(f'/users/{user.id}', headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {'message': 'User deleted successfully'}
    assert await fetch_user(database_manager, user.id) is None

    response = await async_client.delete(f'/users/{user.id}', headers=admin_headers)
    assert response.status_code == 404


########################################
#             Admin list               #
########################################

async def test_admin_lists_everyone_but_admin(async_client, database_manager, admin_headers):
    await create_user_in_db(database_manager)
    await create_user_in_db(database_manager, email='jane@example.com', first_name='Jane')

    response = await async_client.post('/admin', headers=admin_headers)
    assert response.status_code == 200
    users = [schemas.UserDTO.model_validate(u) for u in response.json()]
    assert sorted(u.username for u in users) == ['JaDo19', 'JoDo19']
    assert all('passwordHash' not in u for u in response.json())


async def test_admin_list_rejects_non_admin(async_client, config, database_manager):
    user = await create_user_in_db(database_manager)
    response = await async_client.post('/admin', headers=auth_header(token_for(config, user.id)))
    assert response.status_code == 401
    response = await async_client.post('/admin')
    assert response.status_code == 401
