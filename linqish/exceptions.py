from typing import Any


class LinqishError(Exception):
    """base class for all errors raised by linqish"""
    pass


class RequiredParameterError(LinqishError, ValueError):
    """raised when a parameter that must be specified was left out"""

    def __init__(self, param_name: str = None):
        if not param_name:
            raise RequiredParameterError('param_name')
        self.param_name = param_name
        super().__init__(f'Parameter "{param_name}" must be specified.')


class IndexOutOfBoundsError(LinqishError, IndexError):
    """raised when an index falls outside of a sequence"""

    def __init__(self, index: int = None):
        if index is None:
            raise RequiredParameterError('index')
        self.index = index
        super().__init__(f"The index {index} is out of bounds.")


class InvalidParameterError(LinqishError, ValueError):
    """raised when a parameter was given but cannot be used"""

    def __init__(self, param_name: str = None, reason: str = None):
        if param_name is None:
            raise RequiredParameterError('param_name')
        if reason is None:
            raise RequiredParameterError('reason')
        self.param_name = param_name
        self.reason = reason
        super().__init__(f'The parameter "{param_name}" was invalid. {reason}')


class MultipleItemsMatchError(LinqishError, ValueError):
    def __init__(self):
        super().__init__("There were multiple items which matched the expression")


class NoItemFoundError(LinqishError, ValueError):
    def __init__(self):
        super().__init__("There were no items which matched the expression")


def require(value: Any, param_name: str) -> Any:
    """return value unchanged, raising RequiredParameterError when it is None"""
    if value is None:
        raise RequiredParameterError(param_name)
    return value
