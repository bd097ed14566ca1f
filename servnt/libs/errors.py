from pathlib import PurePath
from typing import Optional

class ServntException(Exception):
    pass

class ConfigException(ServntException):
    pass

class ResolveException(ServntException):
    path: Optional[PurePath]

    def __init__(self, message: str, path: Optional[PurePath] = None) -> None:
        super().__init__(message)
        self.path = path

class NotFoundException(ResolveException):
    pass

class ForbiddenException(ResolveException):
    pass

class UnknownExtensionException(ResolveException):
    pass
