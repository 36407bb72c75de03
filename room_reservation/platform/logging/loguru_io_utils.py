from inspect import FullArgSpec, getfile, getfullargspec, getsourcelines
from os.path import basename
from re import IGNORECASE, compile
from time import time
from typing import Any, Callable

from room_reservation.platform.logging.loguru_io_config import (
    DEPTH_LINE,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MAX_CONTENT_LENGTH = 500

_SENSITIVE_PATTERN = compile(
    rf"({'|'.join(SENSITIVE_KEYWORDS)})(=|': |\": )(['\"]?)[^,'\")\s]*\3",
    IGNORECASE,
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def fetch_layer_depth() -> str:
    return DEPTH_LINE * (call_depth_var.get() - 1)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    if hasattr(func, '__wrapped__'):
        func = func.__wrapped__  # type: ignore
    full_arg_spec: FullArgSpec = getfullargspec(func)
    spec_args: list[str] = full_arg_spec.args

    if not full_arg_spec.varkw:
        kw_list: list[str] = spec_args + full_arg_spec.kwonlyargs
        kwargs = {k: v for k, v in kwargs.items() if k in kw_list}

    if not full_arg_spec.varargs:
        spec_default: list[Any] = list(full_arg_spec.defaults) if full_arg_spec.defaults else []
        args_dict = dict(
            zip(
                spec_args,
                [None] * (len(spec_args) - len(spec_default)) + spec_default,
                strict=False,
            )
        )
        if args_dict := {k: v for k, v in args_dict.items() if k not in kwargs}:
            args_max_len: int = len(args_dict)
            if len(args) > args_max_len:
                args = args[:args_max_len]
        else:
            args = ()

    return args, kwargs


def mask_sensitive(data: Any) -> Any:
    try:
        data_str = str(data)
        masked = _SENSITIVE_PATTERN.sub(r"\1\2\3********\3", data_str)
        return data if data_str == masked else masked
    except Exception:
        return data


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return '********' if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    data_str = data if isinstance(data, str) else repr(data)
    if len(data_str) <= max_length:
        return data
    return f'{data_str[:max_length]}... (truncated {len(data_str) - max_length} chars)'

