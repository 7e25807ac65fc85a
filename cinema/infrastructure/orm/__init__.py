"""Infrastructure ORM Models"""

from .user_model import UserModel, RoleModel, user_roles
from .verification_model import VerificationModel
from .purchase_model import PurchaseModel
from .movie_model import MovieModel, MovieGenreModel

__all__ = [
    'UserModel',
    'RoleModel',
    'user_roles',
    'VerificationModel',
    'PurchaseModel',
    'MovieModel',
    'MovieGenreModel',
]
