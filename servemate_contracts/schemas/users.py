"""
User schemas.

- User:            full record (password included, write side)
- UserResponse:    read projection, password removed
- CreateUser:      no id/audit fields
- UpdateUser:      partial, at least one field
- UserSearch:      filters + pagination
- UserLogin / UserCredentials / UserId / UserList
"""

from typing import Optional

from pydantic import EmailStr, Field, model_validator

from .. import clock
from ..base import ContractModel, check_range
from ..derive import derive
from ..enums import UserRole, UserSortColumn
from ..registry import register_schema
from ..types import CoercedDateTime, PositiveInt, QueryBool, upper_enum
from .search import Page, SearchCriteria


Role = upper_enum(UserRole)

AUDIT_FIELDS = ['id', 'created_at', 'updated_at', 'last_login']


class User(ContractModel):
    """A staff account."""

    id: PositiveInt
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    role: Role
    is_active: QueryBool = True
    password: str = Field(min_length=6, max_length=128, description="Write-only")
    created_at: CoercedDateTime = Field(default_factory=clock.now)
    updated_at: CoercedDateTime = Field(default_factory=clock.now)
    last_login: Optional[CoercedDateTime] = None


UserResponse = derive(
    User, 'UserResponse',
    omit=['password'],
    doc="User as returned to clients (no password).",
)

CreateUser = derive(
    User, 'CreateUser',
    omit=AUDIT_FIELDS,
    doc="Payload for creating a user. id and timestamps are server-assigned.",
)

UpdateUser = derive(
    User, 'UpdateUser',
    omit=AUDIT_FIELDS,
    partial=True,
    require_any=True,
    doc="Partial user update. At least one field must be provided.",
)

UserId = derive(User, 'UserId', pick=['id'])

UserLogin = derive(User, 'UserLogin', pick=['email', 'password'])

UserCredentials = derive(
    User, 'UserCredentials',
    pick=['id', 'email', 'role', 'is_active', 'password'],
    doc="What an auth service loads to verify a login (password is the stored hash).",
)


class UserSearch(derive(User, 'UserSearchBase', pick=['id', 'name', 'role', 'is_active'],
                        partial=True, base=SearchCriteria)):
    """Search/filter params for listing users."""

    email: Optional[str] = Field(default=None, description="Email filter (partial match)")
    created_after: Optional[CoercedDateTime] = None
    created_before: Optional[CoercedDateTime] = None
    sort_by: UserSortColumn = UserSortColumn.ID

    @model_validator(mode='after')
    def check_created_range(self) -> 'UserSearch':
        check_range(self, 'created_after', 'created_before')
        return self


class UserList(Page[UserResponse]):
    """Paginated users."""


for _schema in (User, UserResponse, CreateUser, UpdateUser, UserId, UserLogin,
                UserCredentials, UserSearch, UserList):
    register_schema(_schema)
