from pathlib import PurePath
from types import MappingProxyType
from typing import Mapping

from servnt.libs.errors import UnknownExtensionException

DEFAULT_CONTENT_TYPES = MappingProxyType({
    "html": "text/html",
    "png": "image/png",
    "ico": "image/vnd.microsoft.icon",
    "webmanifest": "application/manifest+json"
})

def extension_of(path: str | PurePath) -> str:
    """Text after the last dot of the final segment, empty when there is none."""
    name = PurePath(path).name
    stem, dot, extension = name.rpartition(".")

    # dotfiles such as ".env" have no extension
    if not dot or not stem:
        return ""

    return extension

class ContentTypeTable:
    types: Mapping[str, str]

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        types = dict(DEFAULT_CONTENT_TYPES)

        for extension, content_type in (overrides or {}).items():
            types[extension.lstrip(".")] = content_type

        self.types = MappingProxyType(types)

    def lookup(self, path: str | PurePath) -> str:
        extension = extension_of(path)
        content_type = self.types.get(extension) if extension else None

        if content_type is None:
            raise UnknownExtensionException(f"unknown extension for {PurePath(path).name}", PurePath(path))

        return content_type
