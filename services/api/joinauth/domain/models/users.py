import typing as t
import pydantic as p
from joinauth.domain.services import IPasswordHasherAsync
import joinauth.domain.exceptions as domexc

#Fields a user (or an admin) may change through a partial update
UPDATABLE_FIELDS = ('first_name', 'last_name', 'mobile', 'date_nais', 'email', 'username')


class User(p.BaseModel):
    model_config = p.ConfigDict(validate_assignment=True)

    id: str|None = None
    email: str
    username: str
    password_hash: str
    first_name: str
    last_name: str
    date_nais: str
    mobile: str
    version: int|None = None

    @staticmethod
    def derive_username(first_name: str, last_name: str, date_nais: str) -> str:
        """Two leading characters of first name, last name and birth date.
        Shorter inputs yield a shorter username."""
        return f"{first_name[:2]}{last_name[:2]}{date_nais[:2]}"

    @staticmethod
    def require_fields(**fields: t.Any) -> None:
        missing = [name for name, value in fields.items() if not value]
        if missing:
            raise domexc.MissingFields(f"All fields are required. Missing: {', '.join(missing)}")

    @staticmethod
    async def create(
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        date_nais: str,
        mobile: str,
        hasher: IPasswordHasherAsync,
        username: str|None = None,
    ) -> "User":
        User.require_fields(
            email=email, password=password, first_name=first_name,
            last_name=last_name, date_nais=date_nais, mobile=mobile
        )
        return User(
            email=email,
            username=username or User.derive_username(first_name, last_name, date_nais),
            password_hash=await hasher.hash(password),
            first_name=first_name,
            last_name=last_name,
            date_nais=date_nais,
            mobile=mobile,
        )

    async def apply_changes(self, changes: dict[str, t.Any], hasher: IPasswordHasherAsync) -> None:
        """Partial update. Absent and falsy values leave the field untouched,
        so a field can not be cleared to an empty string this way."""
        if password := changes.get('password'):
            self.password_hash = await hasher.hash(password)
        for field in UPDATABLE_FIELDS:
            if value := changes.get(field):
                setattr(self, field, value)

    async def check_password(self, password: str, hasher: IPasswordHasherAsync) -> bool:
        return await hasher.verify(password, self.password_hash)
