from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class CodecConfig:
    strict: bool = False
    pretty_print: bool = False
    indent: int = 2
    encoding: str = "UTF-8"
    xml_declaration: bool = True
    lax_attribute_form: bool = True

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must not be negative, got {self.indent}")
        if not self.encoding.strip():
            raise ValueError("encoding must not be empty")
        if self.encoding.lower() == "unicode":
            raise ValueError("encoding must name a byte encoding, got 'unicode'")

    @classmethod
    def from_env(cls) -> CodecConfig:
        return cls(
            strict=_env_bool("HERITAGE_XML_STRICT", False),
            pretty_print=_env_bool("HERITAGE_XML_PRETTY_PRINT", False),
            indent=int(os.getenv("HERITAGE_XML_INDENT", "2")),
            encoding=os.getenv("HERITAGE_XML_ENCODING", "UTF-8"),
            xml_declaration=_env_bool("HERITAGE_XML_XML_DECLARATION", True),
            lax_attribute_form=_env_bool("HERITAGE_XML_LAX_ATTRIBUTE_FORM", True),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> CodecConfig:
        config = CodecConfig.from_env()
        if config_file is None:
            config_file = Path("heritage_xml.toml")
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: CodecConfig) -> CodecConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        marshal = _get_table(data, "marshal")
        unmarshal = _get_table(data, "unmarshal")
        pretty_print = base_config.pretty_print
        if (value := marshal.get("pretty_print")) is not None:
            pretty_print = _coerce_bool(value, key="marshal.pretty_print")
        indent = base_config.indent
        if (value := marshal.get("indent")) is not None:
            indent = _coerce_int(value, key="marshal.indent")
        encoding = base_config.encoding
        if (value := marshal.get("encoding")) is not None:
            encoding = str(value)
        xml_declaration = base_config.xml_declaration
        if (value := marshal.get("xml_declaration")) is not None:
            xml_declaration = _coerce_bool(value, key="marshal.xml_declaration")
        strict = base_config.strict
        if (value := unmarshal.get("strict")) is not None:
            strict = _coerce_bool(value, key="unmarshal.strict")
        lax_attribute_form = base_config.lax_attribute_form
        if (value := unmarshal.get("lax_attribute_form")) is not None:
            lax_attribute_form = _coerce_bool(value, key="unmarshal.lax_attribute_form")
        return CodecConfig(
            strict=strict,
            pretty_print=pretty_print,
            indent=indent,
            encoding=encoding,
            xml_declaration=xml_declaration,
            lax_attribute_form=lax_attribute_form,
        )


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return _coerce_bool(raw, key=name)


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
