"""Account and profile Marshmallow schemas (camelCase on the wire)."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class _Lenient(Schema):
    """Ignore unknown keys; required-field checks happen in the services."""

    class Meta:
        unknown = EXCLUDE


class SignUpSchema(_Lenient):
    """Input payload for ``POST /signup``."""

    full_name = fields.String(data_key="fullName", load_default=None)
    email = fields.String(load_default=None)
    password = fields.String(load_default=None)
    headline = fields.String(load_default=None)


class SignInSchema(_Lenient):
    """Input payload for ``POST /signin``."""

    email = fields.String(load_default=None)
    password = fields.String(load_default=None)


class ProfileUpdateSchema(_Lenient):
    """Input payload for ``POST /update-profile``.

    Omitted sequences load as ``None`` and are stored as empty lists.
    """

    email = fields.String(load_default=None)
    work_history = fields.List(fields.Dict(), data_key="workHistory", load_default=None)
    education = fields.List(fields.Dict(), load_default=None)
    skills = fields.List(fields.String(), load_default=None)
    interests = fields.List(fields.String(), load_default=None)


class ProfileQuerySchema(_Lenient):
    """Query string for ``GET /profile``."""

    email = fields.String(load_default=None)


class AccountPublicSchema(Schema):
    """Public account view returned by sign-up and sign-in."""

    id = fields.String(required=True)
    full_name = fields.String(data_key="fullName", required=True)
    email = fields.String(required=True)
    headline = fields.String()


class ProfileDataSchema(Schema):
    """Stored profile sequences."""

    work_history = fields.List(fields.Dict(), data_key="workHistory")
    education = fields.List(fields.Dict())
    skills = fields.List(fields.String())
    interests = fields.List(fields.String())
