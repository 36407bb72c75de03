"""
`Logger.io`: call tracing for use cases, entity transitions and store methods

Each decorated call logs its (masked) arguments and return value at DEBUG,
indented by nesting depth, and logs a raised error once at the innermost
decorated frame. Domain errors (`CustomBaseError`) are logged without a
traceback.
"""

from collections.abc import Awaitable
from functools import wraps
from inspect import iscoroutinefunction
from typing import Any, Callable, ParamSpec, TypeVar, cast, overload

from room_reservation.platform.config.core_setting import settings
from room_reservation.platform.exception.exceptions import CustomBaseError
from room_reservation.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from room_reservation.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    fetch_layer_depth,
    get_chain_start_time,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])
_P = ParamSpec('_P')
_T = TypeVar('_T')

# Log records point at the caller of the decorated function
_CALLER_DEPTH = 2


class LoguruIO:
    def __init__(self, *, reraise: bool = True, truncate: bool = True) -> None:
        self.reraise = reraise
        self.truncate = truncate
        self.call_target = ''

    def _logger(self):
        return custom_logger.bind(
            **{
                ExtraField.CALL_TARGET: self.call_target,
                ExtraField.CHAIN_START_TIME: get_chain_start_time(),
            }
        ).opt(depth=_CALLER_DEPTH)

    def _render(self, data: Any) -> Any:
        if isinstance(data, dict):
            rendered: Any = {k: self._render(should_mask_keyword(k, v)) for k, v in data.items()}
        elif isinstance(data, list | tuple):
            rendered = type(data)(self._render(item) for item in data)
        else:
            rendered = mask_sensitive(data)
        return truncate_content(rendered) if self.truncate else rendered

    def on_enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        if settings.DEBUG:
            self._logger().debug(
                f'{fetch_layer_depth()}┌ args: {self._render(args)}, kwargs: {self._render(kwargs)}'
            )

    def on_return(self, return_value: Any) -> None:
        if settings.DEBUG:
            self._logger().debug(f'{fetch_layer_depth()}└ return: {self._render(return_value)}')

    def on_error(self, e: Exception) -> None:
        # Outer decorated frames see the same exception object
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        message = f'{type(e).__name__}: {e}'
        if isinstance(e, CustomBaseError):
            self._logger().error(message)
        else:
            self._logger().exception(message)

    def __call__(self, func: _F) -> _F:
        self.call_target = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    self.on_enter(args, kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    return_value = await cast(Awaitable[Any], func(*args, **kwargs))
                    self.on_return(return_value)
                    return return_value
                except Exception as e:
                    self.on_error(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            return cast(_F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self.on_enter(args, kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return_value = func(*args, **kwargs)
                self.on_return(return_value)
                return return_value
            except Exception as e:
                self.on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, sync_wrapper)


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(reraise=reraise, truncate=truncate)
        return decorator(func) if func else decorator
