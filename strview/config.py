# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.

import json
import pathlib
from typing import Any
from typing import MutableMapping
from typing import Optional
from typing import Type
from typing import TypeVar

from strview import exceptions

# Design notes:

# Config is stored as json, so other programs can easily read or edit it.

# Config is a dict of json-compatible python primitives, with typed getters.
# Type checking happens on access, so each component only validates the keys
# it uses.

FILENAME = "config.json"


class Error(exceptions.Error):

    pass


class InvalidConfigError(Error):

    pass


_T = TypeVar("_T")


class Config(dict, MutableMapping[str, Any]):
    @classmethod
    def from_config_dir(cls: Type["_C"], config_dir: pathlib.Path) -> "_C":
        with config_dir.joinpath(FILENAME).open() as fp:
            try:
                data = json.load(fp)
            except json.JSONDecodeError as exc:
                raise InvalidConfigError(str(exc)) from exc
        if not isinstance(data, dict):
            raise InvalidConfigError(f"{data!r} is not an object")
        return cls(data)

    def write_config_dir(self, config_dir: pathlib.Path):
        with config_dir.joinpath(FILENAME).open(mode="w") as fp:
            json.dump(self, fp, sort_keys=True, indent=4)

    def _get(self, key: str, type_: Type[_T]) -> Optional[_T]:
        value = self.get(key)
        # bool is a subclass of int, but we don't want True to be a size
        if key in self and (
            not isinstance(value, type_)
            or (type_ is int and isinstance(value, bool))
        ):
            raise InvalidConfigError(f'"{key}": {value!r} is not a {type_}')
        return value

    def get_int(self, key: str) -> Optional[int]:
        return self._get(key, int)

    def get_positive_int(self, key: str, default: int) -> int:
        value = self.get_int(key)
        if value is None:
            return default
        if value <= 0:
            raise InvalidConfigError(f'"{key}": {value!r} is not positive')
        return value


_C = TypeVar("_C", bound=Config)
