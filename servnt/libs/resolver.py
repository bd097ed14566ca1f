import logging
from pathlib import Path, PurePosixPath
from typing import Dict, NamedTuple, Tuple

from servnt.libs.errors import ConfigException, ForbiddenException, NotFoundException

logger = logging.getLogger("servnt.resolver")

SEPARATOR = "/"
ROOT = PurePosixPath(SEPARATOR)

class RouteMapping(NamedTuple):
    prefix: PurePosixPath
    target: Path

def canonicalize(path: Path) -> Path:
    # resolve(strict=True) is the only existence check
    return path.resolve(strict=True)

def normalize_prefix(prefix: str) -> PurePosixPath:
    return ROOT / prefix.strip(SEPARATOR)

def _directory(root: Path, directory: str, name: str) -> Path:
    try:
        path = canonicalize(root / directory)
    except (OSError, RuntimeError, ValueError) as error:
        raise ConfigException(f"{name} directory '{directory}' cannot be resolved: {error}") from error

    if not path.is_dir():
        raise ConfigException(f"{name} directory '{directory}' is not a directory")

    return path

class PathResolver:
    """Maps virtual request paths onto existing files.

    Mappings are tried longest prefix first, so ``/static/img`` wins over
    ``/static`` for ``/static/img/logo.png``. Anything unmatched falls back
    to the base directory.
    """

    base: Path
    mappings: Tuple[RouteMapping, ...]

    def __init__(self, root: str | Path, base: str, mapped: Dict[str, str]) -> None:
        root = Path(root).absolute()

        self.base = _directory(root, base, "base")

        mappings = []
        for prefix, target in mapped.items():
            mappings.append(RouteMapping(normalize_prefix(prefix), _directory(root, target, f"'{prefix}'")))

        mappings.sort(key=lambda mapping: len(mapping.prefix.parts), reverse=True)
        self.mappings = tuple(mappings)

    def match(self, virtual_path: str) -> Tuple[Path, Path]:
        """Returns the unresolved candidate path and the directory it must stay in."""
        match_path = ROOT / virtual_path

        for mapping in self.mappings:
            try:
                remainder = match_path.relative_to(mapping.prefix)
            except ValueError:
                continue

            if remainder.parts:
                return mapping.target / remainder, mapping.target
            return mapping.target, mapping.target

        return self.base / virtual_path.lstrip(SEPARATOR), self.base

    def resolve(self, virtual_path: str) -> Path:
        candidate, scope = self.match(virtual_path)

        try:
            path = canonicalize(candidate)
        except (OSError, RuntimeError, ValueError) as error:
            raise NotFoundException(f"{virtual_path}: {error}", candidate) from error

        if not path.is_relative_to(scope):
            logger.debug("%s resolved to %s outside of %s", virtual_path, path, scope)
            raise ForbiddenException(f"{virtual_path}: outside of {scope}", path)

        return path
