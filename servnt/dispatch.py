from pathlib import Path
from typing import NamedTuple

from servnt.libs.config import Config
from servnt.libs.content_types import ContentTypeTable
from servnt.libs.errors import NotFoundException
from servnt.libs.resolver import PathResolver

class Asset(NamedTuple):
    path: Path
    content_type: str
    body: bytes

class Dispatcher:
    """Resolves a virtual path, looks up its content type, then reads it.

    Any ``ResolveException`` raised along the way propagates untouched, a
    caller never sees a partially built ``Asset``.
    """

    resolver: PathResolver
    content_types: ContentTypeTable

    def __init__(self, resolver: PathResolver, content_types: ContentTypeTable) -> None:
        self.resolver = resolver
        self.content_types = content_types

    @classmethod
    def from_config(cls, config: Config, root: str | Path):
        resolver = PathResolver(root, config.paths.base, config.paths.mapped)
        content_types = ContentTypeTable(config.extensions)

        return cls(resolver, content_types)

    def dispatch(self, virtual_path: str) -> Asset:
        path = self.resolver.resolve(virtual_path)
        content_type = self.content_types.lookup(path)

        try:
            body = path.read_bytes()
        except OSError as error:
            raise NotFoundException(f"{virtual_path}: {error}", path) from error

        return Asset(path, content_type, body)
