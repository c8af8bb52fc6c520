"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from .user import UserSchema


class SignUpSchema(Schema):
    """Variables of the ``signUp`` operation."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    avatar = fields.String(load_default=None, allow_none=True, validate=validate.Length(max=2048))


class SignInSchema(Schema):
    """Variables of the ``signIn`` operation."""

    email = fields.String(required=True, validate=validate.Length(min=1, max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


class AuthUserSchema(Schema):
    """Response payload pairing a user with its bearer token."""

    user = fields.Nested(UserSchema, required=True)
    token = fields.String(required=True)
