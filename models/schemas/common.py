from datetime import datetime

from markupsafe import escape
from marshmallow import Schema, fields, validate, pre_load, post_load, EXCLUDE, ValidationError

# ASCII letters and digits only, at least one character
ALPHANUMERIC = r"^[A-Za-z0-9]+$"


def sanitize(value):
    """Escape markup-significant characters; non-strings pass through."""
    if isinstance(value, str):
        return str(escape(value))
    return value


class TrimmedString(fields.String):
    """String field that strips surrounding whitespace before validation."""

    def _deserialize(self, value, attr, data, **kwargs):
        return super()._deserialize(value, attr, data, **kwargs).strip()


def required_name(label: str) -> TrimmedString:
    """Trimmed, non-empty, alphanumeric text. Both checks always run."""
    return TrimmedString(
        required=True,
        validate=[
            validate.Length(min=1, error=f"{label} must be specified."),
            validate.Regexp(ALPHANUMERIC, error=f"{label} has non-alphanumeric characters."),
        ],
    )


class ISODate(fields.Date):
    """
    Calendar date from an ISO-8601 date or datetime string.

    A datetime such as 1775-12-16T00:00:00Z keeps only its date part.
    """

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, str):
            raise self.make_error("invalid")
        try:
            return datetime.fromisoformat(value).date()
        except ValueError as error:
            raise self.make_error("invalid") from error


def optional_date(message: str) -> ISODate:
    """ISO-8601 date; empty input means unset and skips validation."""
    return ISODate(
        load_default=None,
        allow_none=True,
        error_messages={"invalid": message, "format": message},
    )


class FormSchema(Schema):
    """
    Base for HTML form submissions.

    - unknown form fields are ignored
    - optional fields submitted empty are treated as not given (None)
    - accepted strings are escaped after validation
    """

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def _blank_optionals(self, data, **kwargs):
        data = dict(data)
        for name, field in self.fields.items():
            if field.required:
                # Missing required text is validated as empty text
                data.setdefault(name, "")
                continue
            raw = data.get(name)
            if isinstance(raw, str):
                raw = raw.strip()
            data[name] = raw or None
        return data

    @post_load
    def _escape(self, data, **kwargs):
        return {key: sanitize(value) for key, value in data.items()}

    def validate_form(self, form):
        """
        Load `form` and return (values, errors).

        `errors` is a list of (field, message) pairs in field declaration
        order; `values` is None whenever errors is non-empty.
        """
        try:
            return self.load(form), []
        except ValidationError as err:
            return None, flatten_errors(err.messages, self.fields)


def flatten_errors(messages, field_order):
    errors = []
    for name in field_order:
        found = messages.get(name) or []
        if isinstance(found, str):
            found = [found]
        errors.extend((name, message) for message in found)
    return errors
