"""
RPN Runtime Error Codes

Machine failures are values, not exceptions: every code below (except the
API-misuse codes) can sit on the stack inside an Error cell and is returned
as the final result of an evaluation.

RPNError is only raised when the runtime itself is used incorrectly.
"""

from typing import Dict


# ============================================================================
# Machine Error Kinds (in-band)
# ============================================================================

E_NONE = "E_NONE"
E_UNDERFLOW = "E_UNDERFLOW"
E_OVERFLOW = "E_OVERFLOW"
E_TYPE_MISMATCH = "E_TYPE_MISMATCH"
E_UNTERMINATED_STRING = "E_UNTERMINATED_STRING"

# ============================================================================
# API Misuse Codes (raised)
# ============================================================================

E_INVALID_CONFIG = "E_INVALID_CONFIG"
E_MACHINE_RELEASED = "E_MACHINE_RELEASED"
E_STREAM_EXHAUSTED = "E_STREAM_EXHAUSTED"
E_UNKNOWN_CODE = "E_UNKNOWN_CODE"


ERROR_MESSAGES: Dict[str, str] = {
    E_NONE: "ok",
    E_UNDERFLOW: "stack underflow",
    E_OVERFLOW: "stack overflow",
    E_TYPE_MISMATCH: "type error",
    E_UNTERMINATED_STRING: "unterminated string",
    E_INVALID_CONFIG: "invalid machine configuration",
    E_MACHINE_RELEASED: "machine was released after overflow",
    E_STREAM_EXHAUSTED: "token stream is exhausted",
    E_UNKNOWN_CODE: "unknown error code",
}


class RPNError(Exception):
    """Raised when the runtime API is misused"""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


def error_message(code: str) -> str:
    """Human-readable message for an error code"""
    if code not in ERROR_MESSAGES:
        raise RPNError(E_UNKNOWN_CODE, f"No message for error code: {code}")
    return ERROR_MESSAGES[code]


__all__ = [
    'E_NONE', 'E_UNDERFLOW', 'E_OVERFLOW', 'E_TYPE_MISMATCH',
    'E_UNTERMINATED_STRING',
    'E_INVALID_CONFIG', 'E_MACHINE_RELEASED', 'E_STREAM_EXHAUSTED',
    'E_UNKNOWN_CODE',
    'ERROR_MESSAGES',
    'RPNError', 'error_message',
]
