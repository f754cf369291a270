"""Validation Error Model

- ValidationError / ParseError: structured failures with code, message,
  details and a cause chain
- ErrorCode: closed catalog of failure codes
- Ok / Err / Result: non-raising result container
- Accumulators: fail-fast or collect-all handling of member failures

Usage:
    from rapidcheck.errors import ParseError, ErrorCode

    try:
        schema.parse(payload)
    except ParseError as error:
        if error.code == ErrorCode.OBJECT_VALUE_INVALID:
            log.warning("bad_member", path=error.path, reason=error.root_cause.message)
"""
from .codes import ErrorCode

from .types import (
    ValidationError,
    ParseError,
    Result,
    Ok,
    Err,
    collect_results,
    sequence_results,
)

from .accumulators import (
    ValidationMode,
    ValidationErrorAccumulator,
    FailFastAccumulator,
    CollectAllAccumulator,
    create_accumulator,
)

__all__ = [
    "ErrorCode",
    # Failures
    "ValidationError",
    "ParseError",
    # Result
    "Result",
    "Ok",
    "Err",
    "collect_results",
    "sequence_results",
    # Accumulation
    "ValidationMode",
    "ValidationErrorAccumulator",
    "FailFastAccumulator",
    "CollectAllAccumulator",
    "create_accumulator",
]
