"""Per-format decoders.

Each :class:`Codec` turns the raw bytes of one format into plain Python data
(dicts, lists and scalars) that pydantic can validate into the target type.
:data:`CODECS` is the one table both the extension registry and the loader's
dispatch are built from, so enabling or disabling a format always adds or
removes its extensions and its decode branch together.
"""

import dataclasses
import importlib.util
import json
import logging
import typing
from collections import abc
from types import MappingProxyType, UnionType
from typing import Any, Iterable, Mapping, Optional, Union

from .formats import ConfigFormat, FormatRegistry

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

logger = logging.getLogger(__name__)


class Codec:
    """Decoder for one configuration format.

    Subclasses set :attr:`format` and :attr:`extensions`, implement
    :meth:`decode`, and list the exceptions their library raises for bad input
    in :meth:`errors`. Codecs backed by an optional library name its import
    module in :attr:`requires` and the packaging extra that installs it in
    :attr:`extra`.
    """

    format: ConfigFormat
    extensions: tuple[str, ...] = ()
    requires: Optional[str] = None
    extra: Optional[str] = None

    @property
    def available(self) -> bool:
        """Whether the decoder library is importable."""
        if self.requires is None:
            return True
        return importlib.util.find_spec(self.requires) is not None

    def decode(self, content: bytes) -> Any:
        raise NotImplementedError

    def errors(self) -> tuple[type[Exception], ...]:
        return (ValueError, RecursionError)

    def prepare(self, data: Any, target: Any) -> Any:
        """Adjust decoded data to the target type before validation."""
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self.extensions)})"


class TomlCodec(Codec):
    format = ConfigFormat.TOML
    extensions = ("toml",)

    def decode(self, content: bytes) -> Any:
        return tomllib.loads(content.decode("utf-8"))


class JsonCodec(Codec):
    format = ConfigFormat.JSON
    extensions = ("json",)

    def decode(self, content: bytes) -> Any:
        # json detects UTF-8/16/32 from the leading bytes
        return json.loads(content)


class YamlCodec(Codec):
    format = ConfigFormat.YAML
    extensions = ("yaml", "yml")
    requires = "yaml"
    extra = "yaml"

    def decode(self, content: bytes) -> Any:
        import yaml

        data = yaml.safe_load(content)
        if data is None:
            return {}
        return data

    def errors(self) -> tuple[type[Exception], ...]:
        import yaml

        return (yaml.YAMLError, ValueError, RecursionError)


class XmlCodec(Codec):
    """XML documents, read with the root element standing for the whole file.

    Child elements and attributes both become keys. Repeated children become
    lists; since a single child cannot be told apart from a one-element list,
    :meth:`prepare` wraps values wherever the target type expects a sequence.

    Empty elements become ``[]`` for sequence fields and ``""`` for string
    fields, including ``Optional[str]``: ``<name/>`` loads as ``name=""``,
    never ``None``. Omit the element to leave an optional field unset.
    """

    format = ConfigFormat.XML
    extensions = ("xml",)
    requires = "xmltodict"
    extra = "xml"

    def decode(self, content: bytes) -> Any:
        import xmltodict

        document = xmltodict.parse(content, attr_prefix="")
        root = next(iter(document.values()))
        if root is None:
            return {}
        return root

    def errors(self) -> tuple[type[Exception], ...]:
        from xml.parsers.expat import ExpatError

        return (ExpatError, ValueError, RecursionError)

    def prepare(self, data: Any, target: Any) -> Any:
        return align_sequences(data, target)


_SEQUENCE_TYPES = (list, tuple, set, frozenset, abc.Sequence, abc.MutableSequence, abc.Set)
_MAPPING_TYPES = (dict, abc.Mapping, abc.MutableMapping)


def align_sequences(value: Any, annotation: Any) -> Any:
    """Reshape XML-decoded *value* so sequences line up with *annotation*.

    A lone item where *annotation* declares a sequence becomes a one-element
    list, and an empty element becomes an empty list. Walks into nested
    models, dataclasses, TypedDicts, mappings and sequences. Anything it does
    not understand is returned unchanged for pydantic to judge.
    """
    origin = typing.get_origin(annotation)

    if origin is typing.Annotated:
        return align_sequences(value, typing.get_args(annotation)[0])

    if origin is Union or origin is UnionType:
        for arg in typing.get_args(annotation):
            if arg is not type(None):
                return align_sequences(value, arg)
        return value

    container = origin or annotation
    if container in _SEQUENCE_TYPES and not isinstance(value, (str, bytes)):
        if value is None:
            return []
        if not isinstance(value, list):
            value = [value]
        args = typing.get_args(annotation)
        if container is tuple and args and args[-1] is not Ellipsis:
            aligned = [align_sequences(v, a) for v, a in zip(value, args)]
            return aligned + value[len(args):]
        item = args[0] if args else Any
        return [align_sequences(v, item) for v in value]

    if container in _MAPPING_TYPES and isinstance(value, dict):
        args = typing.get_args(annotation)
        item = args[1] if len(args) == 2 else Any
        return {k: align_sequences(v, item) for k, v in value.items()}

    if annotation is str and value is None:
        return ""

    if isinstance(annotation, type) and isinstance(value, dict):
        hints = _field_annotations(annotation)
        if hints:
            return {k: align_sequences(v, hints.get(k, Any)) for k, v in value.items()}

    return value


def _field_annotations(cls: type) -> dict[str, Any]:
    model_fields = getattr(cls, "model_fields", None)
    if isinstance(model_fields, dict):
        hints = {}
        for name, info in model_fields.items():
            hints[name] = info.annotation
            if info.alias:
                hints[info.alias] = info.annotation
        return hints

    if dataclasses.is_dataclass(cls) or typing.is_typeddict(cls):
        try:
            hints = typing.get_type_hints(cls, include_extras=True)
        except NameError:
            logger.debug(f"Unresolved annotations on {cls.__name__}, skipping alignment")
            return {}
        if dataclasses.is_dataclass(cls):
            names = {f.name for f in dataclasses.fields(cls)}
            return {k: v for k, v in hints.items() if k in names}
        return hints

    return {}


CODECS: Mapping[ConfigFormat, Codec] = MappingProxyType(
    {codec.format: codec for codec in (TomlCodec(), JsonCodec(), XmlCodec(), YamlCodec())}
)


def available_formats() -> frozenset[ConfigFormat]:
    """Return the formats whose decoder libraries are installed."""
    return frozenset(fmt for fmt, codec in CODECS.items() if codec.available)


def build_registry(formats: Iterable[ConfigFormat]) -> FormatRegistry:
    """Build an extension registry covering exactly *formats*."""
    return FormatRegistry({fmt: CODECS[fmt].extensions for fmt in formats})
