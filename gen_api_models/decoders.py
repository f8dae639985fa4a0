"""Compose the response decoder of an operation.

Every declared status gets its own italia-ts-commons decoder; they are
folded left to right with ``r.composeResponseDecoders``. The success
status decodes with the codec passed to the generated factory, so callers
can override the success payload type.
"""

from __future__ import annotations

from functools import reduce

from .models import ResponseDecoders, ResponseEntry

# Name of the codec argument of the generated ``<operationId>Decoder``
SUCCESS_TYPE_PARAMETER = "type"


def decoder_for_response(
    status: str,
    type_name: str,
    no_content_type: str = "undefined",
    error_type: str = "Error",
) -> str:
    """Render the decoder for a single response status."""
    if type_name == no_content_type:
        return f"r.constantResponseDecoder<undefined, {status}>({status}, undefined)"
    if type_name == error_type:
        return f"r.basicErrorResponseDecoder<{status}>({status})"
    return (
        f'r.ioResponseDecoder<{status}, (typeof {type_name})["_A"], '
        f'(typeof {type_name})["_O"]>({status}, {type_name})'
    )


def compose_response_decoders(
    responses: list[ResponseEntry],
    success: ResponseEntry,
    no_content_type: str = "undefined",
    error_type: str = "Error",
) -> ResponseDecoders:
    decoders = [
        decoder_for_response(
            r.status,
            SUCCESS_TYPE_PARAMETER if r.status == success.status else r.type,
            no_content_type,
            error_type,
        )
        for r in responses
    ]
    expression = reduce(lambda acc, d: f"r.composeResponseDecoders({acc}, {d})", decoders)
    default_type = "t.undefined" if success.type == no_content_type else success.type
    return ResponseDecoders(expression=expression, default_type=default_type)
