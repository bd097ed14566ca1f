import tomllib
from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple

from servnt.libs.errors import ConfigException

CONFIG_FILE_NAME = "servnt.toml"

DEFAULT_BASE = "src"
DEFAULT_HOSTNAME = "127.0.0.1"
DEFAULT_PORT = 19518

class AppConfig(NamedTuple):
    name: str
    version: str

class PathsConfig(NamedTuple):
    mapped: Dict[str, str]
    base: str = DEFAULT_BASE

class ServerConfig(NamedTuple):
    hostname: str = DEFAULT_HOSTNAME
    port: int = DEFAULT_PORT

def _table(contents: dict, key: str, name: str | None = None, required: bool = True) -> dict:
    name = name or key
    if key not in contents:
        if required:
            raise ConfigException(f"missing [{name}] table")
        return {}

    table = contents[key]
    if not isinstance(table, dict):
        raise ConfigException(f"'{name}' must be a table")

    return table

def _string(table: dict, section: str, key: str, default: str | None = None) -> str:
    value = table.get(key, default)
    if value is None:
        raise ConfigException(f"missing '{section}.{key}'")
    if not isinstance(value, str):
        raise ConfigException(f"'{section}.{key}' must be a string")

    return value

def _string_table(table: dict, name: str) -> Dict[str, str]:
    for key, value in table.items():
        if not isinstance(value, str):
            raise ConfigException(f"'{name}.{key}' must be a string")

    return dict(table)

class Config(NamedTuple):
    app: AppConfig
    paths: PathsConfig
    server: ServerConfig = ServerConfig()
    extensions: Mapping[str, str] = MappingProxyType({})

    @classmethod
    def from_dict(cls, contents: dict):
        app_dict = _table(contents, "app")
        app_config = AppConfig(
            _string(app_dict, "app", "name"),
            _string(app_dict, "app", "version")
        )

        paths_dict = _table(contents, "paths")
        paths_config = PathsConfig(
            _string_table(_table(paths_dict, "mapped", "paths.mapped"), "paths.mapped"),
            _string(paths_dict, "paths", "base", DEFAULT_BASE)
        )

        server_dict = _table(contents, "server", required=False)
        port = server_dict.get("port", DEFAULT_PORT)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ConfigException("'server.port' must be an integer")
        server_config = ServerConfig(
            _string(server_dict, "server", "hostname", DEFAULT_HOSTNAME),
            port
        )

        extensions = _string_table(
            _table(contents, "extensions", required=False), "extensions"
        )

        return cls(app_config, paths_config, server_config, extensions)

    @classmethod
    def from_file(cls, file_path: str):
        try:
            with open(file_path, "rb") as file:
                contents = tomllib.load(file)
        except OSError as error:
            raise ConfigException(f"cannot read {file_path}: {error}") from error
        except tomllib.TOMLDecodeError as error:
            raise ConfigException(f"cannot parse {file_path}: {error}") from error

        return cls.from_dict(contents)
