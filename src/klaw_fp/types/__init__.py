"""Core types: Option, Result, Either, Lazy."""

from klaw_fp.types.either import Either, Left, Right, left, right
from klaw_fp.types.lazy import Lazy
from klaw_fp.types.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    nothing,
    option_from,
    option_from_async,
    some,
)
from klaw_fp.types.result import (
    Err,
    Ok,
    Result,
    Trace,
    collect,
    err,
    ok,
    result_from,
    result_from_async,
    result_from_awaitable,
)

__all__ = [
    'Either',
    'Err',
    'Lazy',
    'Left',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Right',
    'Some',
    'Trace',
    'collect',
    'err',
    'left',
    'nothing',
    'ok',
    'option_from',
    'option_from_async',
    'result_from',
    'result_from_async',
    'result_from_awaitable',
    'right',
    'some',
]
