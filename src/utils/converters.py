"""Conversion helpers between database models and schemas."""

from models.category import CategoryModel
from models.user import UserModel
from schemas.user import Category, User


def user_to_model(user: User) -> UserModel:
    return UserModel(
        user_id=user.user_id,
        fullname=user.fullname,
        email=user.email,
        username=user.username,
        password_hash=user.password_hash,
        role_id=user.role_id,
        profile_picture=user.profile_picture,
        created_at=user.created_at,
    )


def model_to_user(model: UserModel) -> User:
    return User(
        user_id=model.user_id,
        fullname=model.fullname,
        email=model.email,
        username=model.username,
        password_hash=model.password_hash,
        role_id=model.role_id,
        profile_picture=model.profile_picture,
        created_at=model.created_at,
    )


def model_to_category(model: CategoryModel) -> Category:
    return Category(category_id=model.category_id, name=model.name)
