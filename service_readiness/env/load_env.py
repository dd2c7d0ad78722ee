"""
Build an Env from process environment variables and an optional .env file.

Precedence, lowest to highest: Env field defaults, process environment,
.env file values, then any explicitly set fields on ``override``.
"""

import os
from typing import Dict, TypeVar, Union

from dotenv import dotenv_values

from .env import Env

EnvT = TypeVar("EnvT", bound=Env)

EnvValue = Union[str, int, bool, float]


def _collect_environment(parsers: Dict[str, type]) -> Dict[str, EnvValue]:
    collected: Dict[str, EnvValue] = {}

    for name, parser in parsers.items():
        raw = os.getenv(name)
        if raw:
            collected[name] = parser(raw)

    return collected


def _collect_dotenv(parsers: Dict[str, type], env_file: str) -> Dict[str, EnvValue]:
    collected: Dict[str, EnvValue] = {}

    if not os.path.exists(env_file):
        return collected

    for name, raw in dotenv_values(dotenv_path=env_file).items():
        parser = parsers.get(name)
        if parser and raw:
            collected[name] = parser(raw)

    return collected


def load_env(
    env_type: type[EnvT] = Env,
    env_file: str | None = ".env",
    override: EnvT | None = None,
) -> EnvT:
    parsers = env_type.types_map()

    settings = _collect_environment(parsers)

    if env_file:
        settings.update(_collect_dotenv(parsers, env_file))

    if override is not None:
        settings.update(override.model_dump(exclude_none=True, exclude_unset=True))
        env_type = type(override)

    return env_type(**settings)
