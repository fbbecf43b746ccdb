# *-* coding: utf-8 *-*
"""
    Request parameters
    ~~~~~~~~~~~~~~~~~~
    Immutable bag of everything an application request is built from.
"""
import attr

from sepa.errors import ParameterError


def not_empty(obj, attribute, value):
    if isinstance(value, str):
        value = value.strip()
    if value is None or (hasattr(value, '__len__') and len(value) == 0):
        raise ParameterError('missing required parameter: {}'.format(attribute.name))


def _add_validator_to_kwargs(kwargs, validator):
    existing = kwargs.pop('validator', None)
    validators = [validator]
    if existing is not None:
        validators.append(existing)
    kwargs['validator'] = validators


def Required(**kwargs):
    """Field that must be present and non-empty when the bag is created."""
    _add_validator_to_kwargs(kwargs, not_empty)
    return attr.ib(default=None, **kwargs)


def Optional(**kwargs):
    """Command dependent field, checked only when the document is built."""
    return attr.ib(default=None, **kwargs)


@attr.s(frozen=True)
class RequestParameters(object):
    private_key = Required(repr=False)
    cert = Required(repr=False)
    # any value is accepted here, the command is resolved at build time
    command = Required()
    customer_id = Required()
    environment = Required()

    status = Optional()
    target_id = Optional()
    file_type = Optional()
    file_reference = Optional()
    content = Optional(repr=False)
    start_date = Optional()
    end_date = Optional()

    @classmethod
    def from_dict(cls, params):
        """
        Build from a plain parameter dict.

        Keys that are not request parameters (wsdl, language, ...) belong to
        the transport layer and are ignored.

        Raises:
            ParameterError: a required parameter is missing or empty.
        """
        names = {a.name for a in attr.fields(cls)}
        return cls(**{k: v for k, v in params.items() if k in names})
