"""Request body validation decorator.

@validate_request inspects the view's signature. Parameters already supplied
by the time the view runs (URL path parameters, or values injected by an
outer decorator such as @auth_required) pass through unchanged. Every other
parameter must be annotated with a Pydantic BaseModel subclass and is built
from the JSON request body.

    @blogs_bp.put("/<blog_id>")
    @auth_required
    @validate_request
    def update_blog(blog_id: str, data: BlogUpdate, identity: Identity):
        ...

Validation failures raise the API's ValidationError (400) with details:
    {"model": ..., "received": ..., "errors": [{"field", "message", "expected_type"}]}
"""

import inspect
from functools import wraps

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


def _format_errors(exc: PydanticValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "expected_type": err["type"],
        }
        for err in exc.errors()
    ]


def _redact(body: dict) -> dict:
    return {k: "***" if k == "password" else v for k, v in body.items()}


def validate_request(f):
    """Validate the JSON body into the view's BaseModel-annotated parameter.

    Raises:
        TypeError: At decoration time if the view has no parameters or its
            first parameter lacks an annotation; at request time if a body
            parameter is not annotated with a BaseModel subclass
    """
    params = list(inspect.signature(f).parameters.values())
    if not params:
        raise TypeError(f"{f.__name__} has no parameters to validate")
    if params[0].annotation is inspect.Parameter.empty:
        raise TypeError(
            f"First parameter '{params[0].name}' of {f.__name__} lacks a type annotation"
        )

    @wraps(f)
    def wrapper(*args, **kwargs):
        supplied = set(kwargs) | set(request.view_args or {})

        for param in params:
            if param.name in supplied:
                continue

            model = param.annotation
            if not (inspect.isclass(model) and issubclass(model, BaseModel)):
                raise TypeError(
                    f"Parameter '{param.name}' of {f.__name__} must be annotated "
                    f"with a Pydantic BaseModel subclass"
                )

            body = request.get_json(silent=True)
            if not isinstance(body, dict):
                raise ValidationError(
                    "Request body must be a JSON object",
                    {"model": model.__name__, "received": body}
                )

            try:
                kwargs[param.name] = model.model_validate(body)
            except PydanticValidationError as e:
                raise ValidationError(
                    "Invalid request data",
                    {
                        "model": model.__name__,
                        "received": _redact(body),
                        "errors": _format_errors(e),
                    }
                )

        return f(*args, **kwargs)

    return wrapper
