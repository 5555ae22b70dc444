"""
Engine configuration.

Dialects map input characters to the six expression symbols. Three are
built in; additional ones can be declared in a YAML config file:

    dialect: shorthand
    trace: false
    dialects:
      - name: shorthand
        symbols: {p: "+", m: "-", x: "*", "/": "/", "[": "(", "]": ")"}
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .tokens import LEFT_PAREN, OPERATOR_SYMBOLS, RIGHT_PAREN


ALLOWED_SYMBOLS = frozenset(OPERATOR_SYMBOLS + (LEFT_PAREN, RIGHT_PAREN))


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded."""


class Dialect(BaseModel):
    """Character table used by the tokenizer."""

    name: str = Field(..., min_length=1)
    symbols: Mapping[str, str]

    model_config = {"frozen": True}

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        if not v:
            raise ValueError("dialect must map at least one character")
        for char, symbol in v.items():
            if len(char) != 1:
                raise ValueError(f"dialect keys must be single characters, got {char!r}")
            if char.isdigit() or char.isspace():
                raise ValueError(f"dialect cannot remap digit or whitespace {char!r}")
            if symbol not in ALLOWED_SYMBOLS:
                raise ValueError(
                    f"unknown symbol {symbol!r} for {char!r}, "
                    f"expected one of {''.join(sorted(ALLOWED_SYMBOLS))}"
                )
        return MappingProxyType(dict(v))

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self.symbols.items())))

    def lookup(self, char: str) -> Optional[str]:
        return self.symbols.get(char)


MNEMONIC = Dialect(
    name="mnemonic",
    symbols={"a": "+", "b": "-", "c": "*", "d": "/", "e": "(", "f": ")"},
)

SYMBOLIC = Dialect(
    name="symbolic",
    symbols={s: s for s in ("+", "-", "*", "/", "(", ")")},
)

STANDARD = Dialect(
    name="standard",
    symbols={**MNEMONIC.symbols, **SYMBOLIC.symbols},
)

BUILTIN_DIALECTS: Dict[str, Dialect] = {
    d.name: d for d in (MNEMONIC, SYMBOLIC, STANDARD)
}


class EngineConfig(BaseModel):
    """Settings for CalculationEngine."""

    dialect: str = "standard"
    dialects: List[Dialect] = Field(default_factory=list)
    trace: bool = False

    @model_validator(mode="after")
    def check_dialect_known(self) -> "EngineConfig":
        names = set(BUILTIN_DIALECTS)
        for d in self.dialects:
            if d.name in names:
                raise ValueError(f"duplicate dialect name: {d.name}")
            names.add(d.name)
        if self.dialect not in names:
            raise ValueError(
                f"unknown dialect {self.dialect!r}, available: {', '.join(sorted(names))}"
            )
        return self

    def available_dialects(self) -> Dict[str, Dialect]:
        registry = dict(BUILTIN_DIALECTS)
        registry.update({d.name: d for d in self.dialects})
        return registry

    def resolve_dialect(self, name: Optional[str] = None) -> Dialect:
        """Return the named dialect, or the configured default."""
        name = name or self.dialect
        registry = self.available_dialects()
        if name not in registry:
            raise ConfigError(f"Unknown dialect: {name}")
        return registry[name]


def load_config(path: Union[str, Path]) -> EngineConfig:
    """
    Load an EngineConfig from a YAML file.

    A missing or empty file yields the default configuration.

    Raises:
        ConfigError: If the file is not valid YAML or fails validation.
    """
    path = Path(path)
    if not path.exists():
        return EngineConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse error in {path}: {e}") from e

    if data is None:
        return EngineConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    try:
        return EngineConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
