"""User and role repository implementations"""

from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...domain.repositories.user_repository import IUserRepository, IRoleRepository
from ...domain.entities.user import User
from ...domain.value_objects.entity_ids import UserId
from ...domain.enums import RoleName
from ...core.exceptions import ConfigurationFault, AlreadyExists
from ..orm.user_model import UserModel, RoleModel


class UserRepositoryImpl(IUserRepository):
    """Repository implementation for User aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID"""
        model = self.session.get(UserModel, user_id.value)
        return self._map_to_entity(model) if model else None

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        model = self.session.query(UserModel).filter(UserModel.username == username).first()
        return self._map_to_entity(model) if model else None

    async def exists_by_username(self, username: str) -> bool:
        return self.session.query(UserModel.id).filter(UserModel.username == username).first() is not None

    async def exists_by_email(self, email: str) -> bool:
        return self.session.query(UserModel.id).filter(UserModel.email == email).first() is not None

    async def exists_by_mobile_number(self, mobile_number: str) -> bool:
        return self.session.query(UserModel.id).filter(
            UserModel.mobile_number == mobile_number
        ).first() is not None

    async def add(self, user: User) -> User:
        """Add a new user"""
        model = UserModel(
            username=user.username,
            email=user.email,
            mobile_number=user.mobile_number,
            hashed_password=user.hashed_password,
            full_name=user.full_name,
            email_verified=user.email_verified,
            mobile_verified=user.mobile_verified,
            active=user.active,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login_at=user.last_login_at,
        )
        model.roles = self._load_roles(user.roles)
        self.session.add(model)
        try:
            self.session.flush()
        except IntegrityError:
            # Lost a race against a concurrent registration
            raise AlreadyExists("Username, email or mobile number is already in use")

        # The database assigns the ID
        user.id = UserId(model.id)
        return user

    async def update(self, user: User) -> User:
        """Update an existing user"""
        existing = self.session.get(UserModel, user.id.value)
        if existing:
            self._update_model_from_entity(existing, user)
            self.session.flush()
        return user

    def _load_roles(self, names) -> list:
        roles = []
        for name in names:
            role = self.session.query(RoleModel).filter(RoleModel.name == name).first()
            if role is None:
                raise ConfigurationFault(f"Error: Role {name.value} is not found.")
            roles.append(role)
        return roles

    def _update_model_from_entity(self, model: UserModel, user: User) -> None:
        """Update ORM model from domain entity"""
        model.email = user.email
        model.mobile_number = user.mobile_number
        model.hashed_password = user.hashed_password
        model.full_name = user.full_name
        model.email_verified = user.email_verified
        model.mobile_verified = user.mobile_verified
        model.active = user.active
        model.updated_at = user.updated_at
        model.last_login_at = user.last_login_at
        if {role.name for role in model.roles} != set(user.roles):
            model.roles = self._load_roles(user.roles)

    def _map_to_entity(self, model: UserModel) -> User:
        """Map ORM model to domain entity"""
        return User(
            id=UserId(model.id),
            username=model.username,
            email=model.email,
            mobile_number=model.mobile_number,
            hashed_password=model.hashed_password,
            full_name=model.full_name,
            email_verified=model.email_verified,
            mobile_verified=model.mobile_verified,
            active=model.active,
            roles={RoleName(role.name) for role in model.roles},
            created_at=model.created_at,
            updated_at=model.updated_at,
            last_login_at=model.last_login_at
        )


class RoleRepositoryImpl(IRoleRepository):
    """Reference data: the fixed set of roles"""

    def __init__(self, session: Session):
        self.session = session

    async def add(self, name: RoleName) -> None:
        self.session.add(RoleModel(name=name))
        self.session.flush()

    async def count(self) -> int:
        return self.session.query(RoleModel).count()
