"""
Validation Module - Declarative field rules for portfolio resources

Each resource declares a tuple of Field rules keyed by the camelCase name used
on the wire. validate_fields() turns a request payload into model attribute
values, collecting every problem before raising a single ValidationError.
"""

import math

from .errors import ValidationError

TRUE_STRINGS = {'true', '1', 'yes', 'on'}
FALSE_STRINGS = {'false', '0', 'no', 'off'}
SOCIAL_LINK_KEYS = ('linkedin', 'github', 'instagram')


class Field:
    """Validation rule for a single wire field"""

    def __init__(self, name, attr=None, kind='string', required=False, default=None,
                 choices=None, minimum=None, maximum=None, label=None, choices_message=None):
        self.name = name
        self.attr = attr or name
        self.kind = kind
        self.required = required
        self.default = default
        self.choices = choices
        self.minimum = minimum
        self.maximum = maximum
        self.label = label or name[0].upper() + name[1:]
        self.choices_message = choices_message

    def make_default(self):
        return self.default() if callable(self.default) else self.default


def _is_blank(value):
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def _to_string(field, value):
    if isinstance(value, bool) or isinstance(value, (list, dict)):
        raise ValueError(f'{field.label} must be a string')
    return str(value).strip()


def _to_number(field, value, integral=False):
    kind = 'an integer' if integral else 'a number'
    if isinstance(value, bool):
        raise ValueError(f'{field.label} must be {kind}')
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise ValueError(f'{field.label} must be {kind}')
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f'{field.label} must be {kind}')
        if integral:
            if not value.is_integer():
                raise ValueError(f'{field.label} must be {kind}')
            value = int(value)
    elif not isinstance(value, int):
        raise ValueError(f'{field.label} must be {kind}')

    if field.minimum is not None and field.maximum is not None:
        if value < field.minimum or value > field.maximum:
            raise ValueError(f'{field.label} must be between {field.minimum} and {field.maximum}')
    elif field.minimum is not None and value < field.minimum:
        raise ValueError(f'{field.label} must be at least {field.minimum}')
    elif field.maximum is not None and value > field.maximum:
        raise ValueError(f'{field.label} must be at most {field.maximum}')
    return value


def _to_boolean(field, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in TRUE_STRINGS:
        return True
    if isinstance(value, str) and value.strip().lower() in FALSE_STRINGS:
        return False
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError(f'{field.label} must be true or false')


def _to_string_list(field, value):
    # A single string is promoted to a one-item list
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ValueError(f'{field.label} must be a list of strings')

    items = []
    for item in value:
        if isinstance(item, (list, dict, bool)) or item is None:
            raise ValueError(f'{field.label} must be a list of strings')
        text = str(item).strip()
        if text:
            items.append(text)
    return items


def _to_social_links(field, value):
    if not isinstance(value, dict):
        raise ValueError(f'{field.label} must be an object')
    links = {}
    for key in SOCIAL_LINK_KEYS:
        link = value.get(key)
        if link is None:
            continue
        if not isinstance(link, str):
            raise ValueError(f'{field.label}.{key} must be a string')
        links[key] = link.strip()
    return links


CONVERTERS = {
    'string': _to_string,
    'number': _to_number,
    'integer': lambda field, value: _to_number(field, value, integral=True),
    'boolean': _to_boolean,
    'string_list': _to_string_list,
    'social_links': _to_social_links,
}


def validate_fields(rules, data, partial=False):
    """
    Validate a payload against field rules

    Args:
        rules (tuple): Field rules for the resource
        data (dict): Incoming payload, keyed by wire name
        partial (bool): Only validate fields present in the payload (updates)

    Returns:
        dict: Model attribute values ready to assign

    Raises:
        ValidationError: One entry per missing or invalid field
    """
    if not isinstance(data, dict):
        raise ValidationError([{'field': None, 'message': 'Request body must be a JSON object'}],
                              message='Invalid request body')

    values = {}
    errors = []
    missing = []

    for field in rules:
        present = field.name in data
        if partial and not present:
            continue

        value = data.get(field.name)
        if _is_blank(value) and field.kind not in ('string_list', 'social_links'):
            if field.required:
                missing.append(field)
            else:
                values[field.attr] = field.make_default()
            continue

        if value is None:
            values[field.attr] = field.make_default()
            continue

        try:
            converted = CONVERTERS[field.kind](field, value)
        except ValueError as e:
            errors.append({'field': field.name, 'message': str(e)})
            continue

        if field.choices is not None and converted not in field.choices:
            message = field.choices_message or (
                f'{field.label} must be one of: ' + ', '.join(field.choices))
            errors.append({'field': field.name, 'message': message})
            continue

        if field.required and field.kind == 'string_list' and not converted:
            missing.append(field)
            continue

        values[field.attr] = converted

    if missing:
        errors = [
            {'field': field.name, 'message': f'{field.label} is required'}
            for field in missing
        ] + errors

    if errors:
        message = None
        if missing and len(errors) == len(missing) and len(missing) > 1:
            message = _join_labels([field.label for field in missing]) + ' are required'
        raise ValidationError(errors, message=message)

    return values


def require_fields(data, names, message=None):
    """Check presence of plain request fields that are not part of a resource"""
    if not isinstance(data, dict):
        data = {}
    missing = [name for name in names if _is_blank(data.get(name))]
    if missing:
        raise ValidationError(
            [{'field': name, 'message': f'{name} is required'} for name in missing],
            message=message or 'All fields are required')


def _join_labels(labels):
    if len(labels) == 2:
        return f'{labels[0]} and {labels[1]}'
    return ', '.join(labels[:-1]) + f', and {labels[-1]}'


__all__ = ['Field', 'validate_fields', 'require_fields', 'SOCIAL_LINK_KEYS']
