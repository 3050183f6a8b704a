class SilenceError(Exception):
    """ Base class for all Silence errors"""
    pass


class SilenceUnboundName(SilenceError):
    """ Raised when an atom is not bound in any frame of the stack"""

    def __init__(self, name: str):
        super().__init__(f"Unbound name: {name}")
        self.name = name


class SilenceArityError(SilenceError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, name: str, expected: int, got: int):
        super().__init__(f"{name}: expected {expected} argument(s), got {got}")
        self.name = name
        self.expected = expected
        self.got = got


class SilenceInvalidForm(SilenceError):
    """ Raised when a call or special form is malformed"""

    def __init__(self, name: str, detail: str | None = None):
        super().__init__(f"Invalid form: {name}" + (f" ({detail})" if detail else ""))
        self.name = name
        self.detail = detail


class SilenceTypeError(SilenceInvalidForm):
    """ Raised when a primitive receives an argument of the wrong shape"""


class SilenceEmptyStack(SilenceError):
    """ Raised when a scope mutation finds no frame to write into"""


class SilenceNoParentScope(SilenceError):
    """ Raised when let-parent! runs with fewer than two frames"""


class SilenceNotCallable(SilenceError):
    """ Raised when the operator of a call is not a procedure"""

    def __init__(self, value):
        super().__init__(f"Not callable: {value}")
        self.value = value


class SilenceSyntaxError(SilenceError):
    """ Raised when there is a syntax error"""


class SilenceArithmeticError(SilenceError):
    """ Raised on division by zero or a non-finite transcendental result"""


class SilenceImportError(SilenceError):
    """ Raised when an imported source file cannot be found or read"""
