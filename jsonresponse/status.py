"""HTTP status table driving the per-status convenience operations.

Every entry maps the public operation name to its status code. Both the
``Envelope`` shortcuts (``Envelope.ok``, ``Envelope.not_found``...) and the
module-level functions of ``jsonresponse.generic`` are generated from this
table, so adding a status here adds it everywhere.
"""

from http import HTTPStatus
from typing import Final

STATUS_METHODS: Final[dict[str, int]] = {
    # 1xx
    "continue_": 100,
    "switching_protocols": 101,
    "processing": 102,
    "early_hints": 103,
    # 2xx
    "ok": 200,
    "created": 201,
    "accepted": 202,
    "non_authoritative_info": 203,
    "no_content": 204,
    "reset_content": 205,
    "partial_content": 206,
    "multi_status": 207,
    "already_reported": 208,
    "im_used": 226,
    # 3xx
    "multiple_choices": 300,
    "moved_permanently": 301,
    "found": 302,
    "see_other": 303,
    "not_modified": 304,
    "use_proxy": 305,
    "temporary_redirect": 307,
    "permanent_redirect": 308,
    # 4xx
    "bad_request": 400,
    "unauthorized": 401,
    "payment_required": 402,
    "forbidden": 403,
    "not_found": 404,
    "method_not_allowed": 405,
    "not_acceptable": 406,
    "proxy_auth_required": 407,
    "request_timeout": 408,
    "conflict": 409,
    "gone": 410,
    "length_required": 411,
    "precondition_failed": 412,
    "request_entity_too_large": 413,
    "request_uri_too_long": 414,
    "unsupported_media_type": 415,
    "requested_range_not_satisfiable": 416,
    "expectation_failed": 417,
    "teapot": 418,
    "misdirected_request": 421,
    "unprocessable_entity": 422,
    "locked": 423,
    "failed_dependency": 424,
    "too_early": 425,
    "upgrade_required": 426,
    "precondition_required": 428,
    "too_many_requests": 429,
    "request_header_fields_too_large": 431,
    "unavailable_for_legal_reasons": 451,
    # 5xx
    "internal_server_error": 500,
    "not_implemented": 501,
    "bad_gateway": 502,
    "service_unavailable": 503,
    "gateway_timeout": 504,
    "http_version_not_supported": 505,
    "variant_also_negotiates": 506,
    "insufficient_storage": 507,
    "loop_detected": 508,
    "not_extended": 510,
    "network_authentication_required": 511,
}


def status_text(status_code: int) -> str:
    """Return the standard reason phrase for a status code.

    Args:
        status_code: Any integer, standard or not.

    Returns:
        str: The reason phrase, or an empty string for unknown codes.
    """
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def status_method_doc(status_code: int) -> str:
    """Build the docstring shared by the generated per-status operations."""
    phrase = status_text(status_code)
    return f"Send the response with HTTP status {status_code} ({phrase})."
