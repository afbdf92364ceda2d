class A11yError(Exception):
    """Base class for failures raised by a11yscan."""


class OptionsError(A11yError, ValueError):
    pass


class InjectionError(A11yError):
    pass


class EngineError(A11yError):
    pass
