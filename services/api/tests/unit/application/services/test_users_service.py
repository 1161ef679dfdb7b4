import pytest
from pytest_mock import MockerFixture
import joinauth.application.services as svc
import joinauth.domain.models as dmod
import joinauth.domain.exceptions as domexc
import joinauth.presentation.schemas as schemas
from tests.mocks import FakeHasher, AsyncHasherAdapter


@pytest.fixture
def hasher():
    return AsyncHasherAdapter(FakeHasher())

@pytest.fixture
def user_data():
    return dict(
        id='u1',
        email='john.doe@example.com',
        username='JoDo19',
        first_name='John',
        last_name='Doe',
        date_nais='1990-01-01',
        mobile='0600000000',
    )

@pytest.fixture
def signup_data():
    return schemas.SignUpModel(
        join='abc123',
        email='john.doe@example.com',
        password='12341234',
        first_name='John',
        last_name='Doe',
        date_nais='1990-01-01',
        mobile='0600000000',
    )

@pytest.fixture
def suite(mocker: MockerFixture, hasher):
    user_repo = mocker.AsyncMock()
    user_repo.get_by_username.return_value = None
    user_repo.get_by_email.return_value = None
    user_repo.create.side_effect = lambda user: user.model_copy(update={'id': 'new-id', 'version': 0})
    join_codes = mocker.AsyncMock(spec=svc.JoinCodeService)
    join_codes.check_join_code.return_value = True
    uow = mocker.AsyncMock()
    service = svc.UserService(user_repo, join_codes, hasher, uow)
    return service, user_repo, join_codes, uow


async def test_register(suite, signup_data):
    service, user_repo, join_codes, uow = suite
    user = await service.register(signup_data)

    assert user == schemas.UserDTO(
        id='new-id', email='john.doe@example.com', username='JoDo19',
        first_name='John', last_name='Doe', date_nais='1990-01-01', mobile='0600000000',
    )
    created: dmod.User = user_repo.create.await_args.args[0]
    assert created.password_hash == 'hashed:12341234'
    join_codes.consume_join_code.assert_awaited_once_with('abc123')
    uow.commit.assert_awaited_once()


async def test_register_picks_free_username(suite, signup_data):
    service, user_repo, *_ = suite
    taken = {'JoDo19', 'JoDo192'}
    user_repo.get_by_username.side_effect = lambda username: object() if username in taken else None

    user = await service.register(signup_data)
    assert user.username == 'JoDo193'


async def test_register_missing_field(suite, signup_data):
    service, user_repo, join_codes, uow = suite
    with pytest.raises(domexc.MissingFields, match='mobile'):
        await service.register(signup_data.model_copy(update={'mobile': None}))
    join_codes.check_join_code.assert_not_awaited()
    uow.commit.assert_not_awaited()


async def test_register_invalid_join_code(suite, signup_data):
    service, user_repo, join_codes, uow = suite
    join_codes.check_join_code.return_value = False
    with pytest.raises(domexc.InvalidJoinCode):
        await service.register(signup_data)
    user_repo.create.assert_not_awaited()
    join_codes.consume_join_code.assert_not_awaited()


async def test_register_duplicate_email(suite, signup_data, user_data):
    service, user_repo, join_codes, uow = suite
    user_repo.get_by_email.return_value = dmod.User(**user_data, password_hash='x')
    with pytest.raises(domexc.UserAlreadyExists, match='Email already exists'):
        await service.register(signup_data)
    join_codes.consume_join_code.assert_not_awaited()
    uow.commit.assert_not_awaited()


async def test_user_service_get_user(suite, user_data):
    service, user_repo, *_ = suite
    user_repo.get_by_id.return_value = dmod.User(**user_data, password_hash='somehash', version=0)
    user = await service.get_user('u1')
    assert user == schemas.UserDTO.model_validate(user_data)
    user_repo.get_by_id.assert_awaited_once_with('u1')


async def test_user_service_get_missing_user(suite):
    service, user_repo, *_ = suite
    user_repo.get_by_id.return_value = None
    with pytest.raises(domexc.UserDoesNotExist):
        await service.get_user('nobody')


async def test_user_service_update(suite, user_data):
    service, user_repo, _, uow = suite
    user_repo.get_by_id.return_value = dmod.User(**user_data, password_hash='somehash', version=0)
    user_repo.update.side_effect = lambda user: user

    updated = await service.update('u1', schemas.UserUpdateModel(first_name='Jane', last_name=''))
    assert updated.first_name == 'Jane'
    assert updated.last_name == 'Doe'
    uow.commit.assert_awaited_once()


async def test_user_service_delete(suite, user_data):
    service, user_repo, _, uow = suite
    target = dmod.User(**user_data, password_hash='somehash', version=0)
    user_repo.get_by_id.return_value = target
    await service.delete('u1')
    user_repo.delete.assert_awaited_once_with(target)
    uow.commit.assert_awaited_once()


@pytest.mark.parametrize("method, args", [("update", ('nobody', schemas.UserUpdateModel())), ("delete", ('nobody',))])
async def test_user_service_missing_target(suite, method, args):
    service, user_repo, _, uow = suite
    user_repo.get_by_id.return_value = None
    with pytest.raises(domexc.UserDoesNotExist):
        await getattr(service, method)(*args)
    uow.commit.assert_not_awaited()


async def test_user_service_list_hides_admin(suite, user_data):
    service, user_repo, *_ = suite
    user_repo.list.return_value = [dmod.User(**user_data, password_hash='somehash', version=0)]
    user_list = await service.list_all()
    assert user_list == [schemas.UserDTO.model_validate(user_data)]
    user_repo.list.assert_awaited_once_with(exclude_usernames=('admin',))
