"""klaw-fp: Option, Result, Either and Lazy for Python 3.13+.

Explicit absence, typed failure and two-way alternatives as closed, immutable
types with a shared set of combinators (map, flat_map, fold, get_or_else...)
and conversions between them, plus a memoized Lazy value.

Flat imports (preferred):
    from klaw_fp import Option, Some, Nothing, Result, Ok, Err, Either, Left, Right, Lazy
    from klaw_fp import option_from, result_from, safe

Submodule imports (for organization):
    from klaw_fp.types.result import Ok, Err, Result
    from klaw_fp.types.option import Some, Nothing, Option
    from klaw_fp.errors import Defect, IllegalStateError

The variants are closed: match on them with ``typing.assert_never`` in the
fallback arm and a type checker will flag any unhandled case.

    match r:
        case Ok(value):
            ...
        case Err(error, trace):
            ...
        case _ as unreachable:
            assert_never(unreachable)
"""

# Configuration
from klaw_fp._config import FpConfig, get_config, init

# Decorators
from klaw_fp.decorators import safe, safe_async

# Errors
from klaw_fp.errors import (
    Defect,
    ErrorConformanceError,
    IllegalStateError,
    ResultError,
    is_defect,
)

# Types
from klaw_fp.types import (
    Either,
    Err,
    Lazy,
    Left,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Right,
    Some,
    Trace,
    collect,
    err,
    left,
    nothing,
    ok,
    option_from,
    option_from_async,
    result_from,
    result_from_async,
    result_from_awaitable,
    right,
    some,
)

__all__ = [
    # Errors
    'Defect',
    # Types
    'Either',
    'Err',
    'ErrorConformanceError',
    # Configuration
    'FpConfig',
    'IllegalStateError',
    'Lazy',
    'Left',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'ResultError',
    'Right',
    'Some',
    'Trace',
    'collect',
    'err',
    'get_config',
    'init',
    'is_defect',
    'left',
    'nothing',
    'ok',
    'option_from',
    'option_from_async',
    'result_from',
    'result_from_async',
    'result_from_awaitable',
    'right',
    # Decorators
    'safe',
    'safe_async',
    'some',
]
