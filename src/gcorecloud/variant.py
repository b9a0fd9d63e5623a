"""Tagged-union encoding and decoding for polymorphic JSON objects.

Some resources embed objects that come in one of several shapes, selected by
a discriminator field::

    {"type": "external", "ip_family": "ipv4"}
    {"type": "subnet", "network_id": "...", "subnet_id": "..."}

A :class:`VariantCodec` maps each discriminator value to the pydantic model
of its shape. Decoding reads the discriminator first and rejects values
outside the closed set before validating the rest of the object against the
single matching model. Encoding writes exactly the populated shape.

Example:
    ```python
    class Shape(VariantEnvelope):
        pass

    Shape.codec = VariantCodec({"circle": Circle, "square": Square}, envelope=Shape, name="shape")

    shape = Shape.codec.decode(b'{"type": "circle", "radius": 2}')
    shape.value          # Circle(type='circle', radius=2)
    Shape.codec.encode(shape)
    ```

Subclasses of :class:`VariantEnvelope` with a codec attached can be used as
field types of pydantic models.
"""

import json
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

import pydantic
from pydantic_core import core_schema

from gcorecloud.errors import DecodeError, UnknownDiscriminatorError, VariantStateError
from gcorecloud.extract import decode_error_from, load_body

M = TypeVar("M", bound=pydantic.BaseModel)


class VariantEnvelope(Generic[M]):
    """Holds the populated shape of a tagged union, keyed by its discriminator value.

    A well-formed envelope holds exactly one shape. Envelopes built from
    several shapes, or from none, can exist but are refused by
    :meth:`VariantCodec.encode`.
    """

    codec: ClassVar["VariantCodec | None"] = None

    __slots__ = ("_shapes",)

    def __init__(self, shapes: Mapping[str, M | None] | None = None):
        self._shapes: dict[str, M] = {tag: shape for tag, shape in (shapes or {}).items() if shape is not None}

    @classmethod
    def of(cls, shape: M) -> "VariantEnvelope[M]":
        """Wrap a single shape, deriving its tag from the attached codec."""
        if cls.codec is None:
            msg = f"{cls.__name__} has no codec attached"
            raise TypeError(msg)
        return cls({cls.codec.tag_for(shape): shape})

    def get(self, tag: str) -> M | None:
        return self._shapes.get(tag)

    @property
    def populated(self) -> dict[str, M]:
        return dict(self._shapes)

    @property
    def tag(self) -> str:
        """Tag of the first populated shape, or an empty string."""
        return next(iter(self._shapes), "")

    @property
    def value(self) -> M:
        """The single populated shape.

        Raises:
            VariantStateError: If zero or several shapes are populated.
        """
        if len(self._shapes) != 1:
            msg = f"{type(self).__name__} must hold exactly one shape, holds {len(self._shapes)}"
            raise VariantStateError(msg)
        return next(iter(self._shapes.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariantEnvelope):
            return NotImplemented
        return type(self) is type(other) and self._shapes == other._shapes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"{tag}={shape!r}" for tag, shape in self._shapes.items())
        return f"{type(self).__name__}({inner})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: pydantic.GetCoreSchemaHandler):
        codec = cls.codec
        if codec is None:
            msg = f"{cls.__name__} has no codec attached and cannot be used as a model field"
            raise TypeError(msg)

        def validate(value: Any) -> "VariantEnvelope":
            if isinstance(value, cls):
                return value
            return codec.decode(value)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(codec.encode_python),
        )


class VariantCodec(Generic[M]):
    """Encode and decode a closed set of shapes identified by a discriminator field.

    Args:
        variants: Total mapping of discriminator value to shape model.
        discriminator: Name of the discriminator field on the wire.
        envelope: Envelope class produced by :meth:`decode`.
        name: Human-readable name of the union, used in error messages.
    """

    def __init__(
        self,
        variants: Mapping[str, type[M]],
        *,
        discriminator: str = "type",
        envelope: type[VariantEnvelope] = VariantEnvelope,
        name: str = "variant",
    ) -> None:
        if not variants:
            msg = "variants cannot be empty"
            raise ValueError(msg)
        self.variants = dict(variants)
        self.discriminator = discriminator
        self.envelope = envelope
        self.name = name

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self.variants)

    def peek_discriminator(self, data: Mapping[str, Any]) -> str:
        """Read and check only the discriminator of a decoded object.

        Raises:
            UnknownDiscriminatorError: If it is missing or not one of the known tags.
        """
        if self.discriminator not in data:
            msg = f"{self.name} {self.discriminator} not specified, unable to decode {self.name}"
            raise UnknownDiscriminatorError(msg, value=None, discriminator=self.discriminator)

        value = data[self.discriminator]
        if not isinstance(value, str) or value not in self.variants:
            msg = f"invalid {self.name} {self.discriminator}: {value}"
            raise UnknownDiscriminatorError(msg, value=value, discriminator=self.discriminator)
        return value

    def decode(self, data: bytes | str | Mapping[str, Any]) -> VariantEnvelope[M]:
        """Decode one polymorphic object into an envelope holding its single shape.

        Raises:
            UnknownDiscriminatorError: If the discriminator is missing or unknown.
            DecodeError: If the object is not valid JSON or does not match its shape.
        """
        raw = load_body(data)
        if not isinstance(raw, Mapping):
            msg = f"Cannot decode {self.name}: expected a JSON object, got {type(raw).__name__}"
            raise DecodeError(msg, target=self.name)

        tag = self.peek_discriminator(raw)
        model = self.variants[tag]
        try:
            shape = model.model_validate(raw)
        except pydantic.ValidationError as e:
            raise decode_error_from(e, model) from e
        return self.envelope({tag: shape})

    def tag_for(self, shape: M) -> str:
        """Tag of the variant ``shape`` is an instance of."""
        for tag, model in self.variants.items():
            if type(shape) is model:
                return tag
        msg = f"{type(shape).__name__} is not a {self.name} shape"
        raise VariantStateError(msg)

    def encode_python(self, envelope: VariantEnvelope[M]) -> dict[str, Any]:
        """Serialize the single populated shape to a JSON-compatible dict.

        Optional fields left as None are omitted.

        Raises:
            VariantStateError: If the envelope holds zero or several shapes, or a
                shape does not match its tag.
        """
        populated = envelope.populated
        if len(populated) != 1:
            msg = f"no valid {self.name} {self.discriminator}: envelope holds {len(populated)} shapes"
            raise VariantStateError(msg)

        tag, shape = next(iter(populated.items()))
        if self.tag_for(shape) != tag or getattr(shape, self.discriminator, None) != tag:
            msg = f"{self.name} shape {type(shape).__name__} does not match {self.discriminator} {tag!r}"
            raise VariantStateError(msg)
        return shape.model_dump(mode="json", exclude_none=True)

    def encode(self, envelope: VariantEnvelope[M]) -> bytes:
        """Serialize the single populated shape to JSON bytes."""
        return json.dumps(self.encode_python(envelope), separators=(",", ":")).encode()

    def discriminator_of(self, envelope: VariantEnvelope[M]) -> str:
        """Tag of the populated shape, or an empty string if there is none."""
        return envelope.tag
