"""
Payload decoding and schema validation steps.

Both are pipeline steps: they take a RequestContext and return either an
evolved context or a 400 Fault.
"""
import json
import re
from urllib.parse import parse_qsl

from pydantic import ValidationError

from src.api.pipeline import Fault, RequestContext
from src.models.campground import CampgroundPayload

_BRACKETED = re.compile(r"\[([^\[\]]*)\]")


def expand_form(pairs):
    """
    Turn flat form fields into nested dicts.

    [("camp[title]", "Pine Ridge"), ("camp[price]", "25")]
    -> {"camp": {"title": "Pine Ridge", "price": "25"}}
    """
    result = {}
    for key, value in pairs:
        head, _, rest = key.partition("[")
        parts = [head] + (_BRACKETED.findall("[" + rest) if rest else [])
        node = result
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[parts[-1]] = value
    return result


def decode_body(ctx: RequestContext):
    content_type = ctx.content_type.split(";")[0].strip().lower()
    if content_type == "application/json":
        try:
            payload = json.loads(ctx.body or b"{}")
        except ValueError:
            return Fault("Malformed JSON body", 400)
    else:
        text = ctx.body.decode("utf-8", errors="replace")
        payload = expand_form(parse_qsl(text, keep_blank_values=True))
    return ctx.evolve(payload=payload)


def format_violations(error: ValidationError) -> str:
    """Render every violation as '"camp.title" <message>' and join them with commas."""
    messages = []
    for violation in error.errors():
        path = ".".join(str(part) for part in violation["loc"])
        messages.append(f'"{path}" {violation["msg"]}' if path else violation["msg"])
    return ",".join(messages)


def validate_campground(ctx: RequestContext):
    try:
        payload = CampgroundPayload.model_validate(ctx.payload)
    except ValidationError as e:
        return Fault(format_violations(e), 400)
    return ctx.evolve(data=payload.camp)
