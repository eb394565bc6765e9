MESSAGE_PREFIX = "simply-logger: "


def create_message(msg: str) -> str:
    return f"{MESSAGE_PREFIX}{msg}"


class SimplyLoggerError(Exception):
    def __init__(self, reason, details=None):
        self.reason = reason
        self.details = details
        super().__init__(create_message(reason))


class UninitializedError(SimplyLoggerError):
    def __init__(self):
        super().__init__("Logger has not been initialized")


class MissingModuleNameError(SimplyLoggerError, ValueError):
    def __init__(self):
        super().__init__("Missing module name")


class MissingFunctionNameError(SimplyLoggerError, ValueError):
    def __init__(self):
        super().__init__("Missing function name")


class NoLoggerForModuleError(SimplyLoggerError, LookupError):
    def __init__(self, mod_name, key=None):
        self.mod_name = mod_name
        super().__init__(f"No logger exists for module {mod_name}", details=key)
