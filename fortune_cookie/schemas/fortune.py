"""Schemas for the fortune API."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class DrawQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    count = fields.Integer(
        required=False,
        load_default=1,
        validate=validate.Range(min=1, max=20),
    )


class FortuneDrawSchema(Schema):
    fortune = fields.String(required=True)
    lucky_numbers = fields.List(fields.Integer(), required=True)


class TriggerSchema(Schema):
    label = fields.String(required=True)
    disabled = fields.Boolean(required=True)


class SurfaceViewSchema(Schema):
    """Serialize the rendered visual tree."""

    state = fields.String(required=True)
    title = fields.String(required=True)
    subtitle = fields.String(required=True)

    # None while idle or revealing.
    card = fields.Nested(FortuneDrawSchema, allow_none=True)

    trigger = fields.Nested(TriggerSchema, required=True)
