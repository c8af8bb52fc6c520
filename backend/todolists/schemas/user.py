"""User resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields


class UserSchema(Schema):
    """Public representation of a user entity."""

    id = fields.String(required=True)
    name = fields.String(required=True)
    email = fields.Email(required=True)
    avatar = fields.String(allow_none=True)
