from __future__ import annotations
from typing import Any, Callable, ClassVar, Optional, Tuple, Union
from ..conversions import convert
from ..types.color_types import ColorSpace, ChannelTuple, ScalarVector, HUE_SPACES
from ..types.format_type import FormatType, max_non_hue, format_classes


class ColorBase:
    """
    Immutable color with unit channels and an alpha channel.

    Subclasses fix the color space (``mode``), the channel count and the
    per-channel maxima. Hue channels are stored in degrees, everything else
    (alpha included) in [0, 1]. Values are clamped on construction.
    """
    __slots__ = ('_value', '_alpha', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace]
    maxima:       ClassVar[ChannelTuple]
    convert: Callable[[ColorBase, Union[ColorSpace, str]], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ScalarVector, ColorBase], alpha: Optional[float] = None) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if alpha is None:
                alpha = value.alpha
            if value.mode == self.mode:
                value = value.value
            else:
                value = convert(value.value, value.mode, self.mode)

        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode.value} expects {self.num_channels} channels, got {len(value)}")

        # clamp value
        channels = tuple(
            max(0.0, min(float(v), m)) for v, m in zip(value, self.maxima)
        )
        a = 1.0 if alpha is None else max(0.0, min(float(alpha), 1.0))

        self._value = channels
        self._alpha = a

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTuple:
        return self._value

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    @property
    def is_transparent(self) -> bool:
        return self._alpha == 0.0

    @property
    def rgba(self) -> Tuple[float, float, float, float]:
        """Unit RGBA tuple of this color."""
        r, g, b = convert(self._value, self.mode, ColorSpace.RGB)
        return r, g, b, self._alpha

    # ------------------ FORMATS ------------------
    @classmethod
    def from_format(
        cls,
        values: ScalarVector,
        format_type: Union[FormatType, str] = FormatType.INT,
        alpha: Optional[float] = None,
    ) -> ColorBase:
        """
        Build a color from INT (0-255), FLOAT (0-1) or PERCENTAGE (0-100) channels.

        Hue channels are always given in degrees. ``alpha`` uses the same
        scale as the channels and defaults to fully opaque.
        """
        fmt = FormatType(format_type)
        maxval = max_non_hue[fmt]
        channels = tuple(
            v if m != 1.0 else v / maxval
            for v, m in zip(values, cls.maxima)
        )
        return cls(channels, alpha=1.0 if alpha is None else alpha / maxval)

    def to_format(self, format_type: Union[FormatType, str] = FormatType.INT) -> Tuple[Any, ...]:
        """Return channels followed by alpha in the requested format."""
        fmt = FormatType(format_type)
        maxval = max_non_hue[fmt]
        cast_type = format_classes[fmt]

        def _scale(v: float, m: float) -> Any:
            scaled = v if m != 1.0 else v * maxval
            return cast_type(round(scaled)) if fmt == FormatType.INT else cast_type(scaled)

        channels = tuple(_scale(v, m) for v, m in zip(self._value, self.maxima))
        return channels + (_scale(self._alpha, 1.0),)

    def to_hex(self, with_alpha: bool = False) -> str:
        """Hex string ``#rrggbb`` (or ``#rrggbbaa``) of this color."""
        r, g, b, a = (round(c * 255) for c in self.rgba)
        out = f"#{r:02x}{g:02x}{b:02x}"
        return out + f"{a:02x}" if with_alpha else out

    def with_alpha(self, alpha: float) -> ColorBase:
        """Return a new instance with modified alpha channel."""
        return self.__class__(self._value, alpha=alpha)

    # ------------------ PROTOCOL ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.mode == other.mode
            and self._value == other._value
            and self._alpha == other._alpha
        )

    def __hash__(self) -> int:
        return hash((self.mode, self._value, self._alpha))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r}, alpha={self._alpha!r})"


def build_registry(*classes: type[ColorBase]):
    return {
        cls.mode: cls
        for cls in classes
    }
