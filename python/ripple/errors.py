"""Ripple exceptions with contextual error messages."""


class RippleError(Exception):
    """Base exception for all ripple errors."""

    def __init__(self, message: str, component_name: str | None = None):
        self.component_name = component_name
        super().__init__(f"{message}\n\n  Component: {component_name}" if component_name else message)


class InvalidStepError(RippleError, ValueError):
    """Counter step is not a non-negative integer."""

    def __init__(self, step, component_name: str | None = None):
        self.step = step
        super().__init__(
            f"Counter step must be a non-negative integer, got {step!r} ({type(step).__name__})",
            component_name,
        )


class HookError(RippleError):
    pass


class HookOrderError(HookError):
    """Hooks were called in a different order than on the previous render."""

    def __init__(
        self,
        message: str,
        component_name: str | None = None,
        index: int | None = None,
        expected: str | None = None,
        found: str | None = None,
    ):
        self.index = index
        self.expected = expected
        self.found = found

        full_message = message
        if index is not None:
            full_message += f"\n\n  Hook #{index}: expected {expected}, found {found}"

        super().__init__(full_message, component_name)


class RenderLoopError(RippleError):
    pass


class UnknownHandlerError(RippleError, KeyError):
    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        message = f"No handler registered as {name!r}"
        if self.available:
            message += f"\n\n  Registered handlers: {', '.join(sorted(self.available))}"
        super().__init__(message)

    def __str__(self):
        # KeyError would repr() the message
        return self.args[0]


class ListenerError(RippleError):
    pass


class ObserverStateError(RippleError):
    pass


class FormFieldError(RippleError, KeyError):
    def __init__(self, field: str, fields: tuple[str, ...]):
        self.field = field
        self.fields = fields
        super().__init__(f"Unknown form field {field!r}; expected one of: {', '.join(fields)}")

    def __str__(self):
        return self.args[0]
