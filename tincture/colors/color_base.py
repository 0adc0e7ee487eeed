from __future__ import annotations
import numbers
from typing import Any, Callable, ClassVar, Dict, FrozenSet, Tuple, Type

from ..conversions.wrapper import to_rgba as _values_to_rgba, from_rgba as _rgba_to_values
from ..types.color_types import ColorKey, ColorSpace, RGBATuple, Scalar, ALPHA_RANGE
from ..types.format_type import FormatType
from ..utils.num_utils import clamp_value, round_half_up, wrap_hue


class ColorBase:
    __slots__ = ('_values', '_is_frozen')

    space: ClassVar[ColorSpace]
    fields: ClassVar[Tuple[ColorKey, ...]]
    ranges: ClassVar[Dict[ColorKey, Tuple[float, float]]]
    integer_fields: ClassVar[FrozenSet[ColorKey]] = frozenset()
    hue_fields: ClassVar[FrozenSet[ColorKey]] = frozenset()
    natural_format: ClassVar[FormatType] = FormatType.HEX
    _index: ClassVar[Dict[ColorKey, int]]

    # attached in color.py
    convert: Callable[[ColorBase, ColorSpace | str], ColorBase]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._index = {key: i for i, key in enumerate(cls.fields)}

    def __setattr__(self, name: str, value: Any) -> None:
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Scalar) -> None:
        if len(values) != len(self.fields):
            raise TypeError(
                f"{self.__class__.__name__} expects {len(self.fields)} values "
                f"({', '.join(k.value for k in self.fields)}), got {len(values)}"
            )
        self._values = tuple(
            self.clamp_field(key, value) for key, value in zip(self.fields, values)
        )
        super().__setattr__('_is_frozen', True)

    # ------------------ FIELD RULES ------------------
    @classmethod
    def min_max(cls, key: ColorKey) -> Tuple[float, float]:
        return cls.ranges[ColorKey(key)]

    @classmethod
    def clamp_field(cls, key: ColorKey, value: Scalar) -> Scalar:
        """Bring ``value`` into range for ``key``: hue wraps, everything else saturates."""
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"{cls.__name__}.{key.value} must be a number, got {value!r}")
        if key in cls.hue_fields:
            return wrap_hue(value)
        lo, hi = cls.ranges[key]
        if key in cls.integer_fields:
            return int(clamp_value(round_half_up(value), lo, hi))
        return clamp_value(value, lo, hi)

    @classmethod
    def cast_field(cls, key: ColorKey, value: Scalar) -> Scalar:
        """Like :meth:`clamp_field`, but hue is also snapped to whole degrees."""
        if key in cls.hue_fields:
            return wrap_hue(round_half_up(value))
        return cls.clamp_field(key, value)

    def cast(self) -> ColorBase:
        return type(self)(*(self.cast_field(k, v) for k, v in zip(self.fields, self._values)))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def values(self) -> Tuple[Scalar, ...]:
        return self._values

    @property
    def alpha(self) -> float:
        return self._values[-1]

    @property
    def is_opaque(self) -> bool:
        return self._values[-1] == 1.0

    def value_of(self, key: ColorKey) -> Scalar:
        return self._values[self._index[ColorKey(key)]]

    def replace(self, key: ColorKey, value: Scalar) -> ColorBase:
        """Return a copy with one field changed (clamped on construction)."""
        values = list(self._values)
        values[self._index[ColorKey(key)]] = value
        return type(self)(*values)

    def with_alpha(self, alpha: float) -> ColorBase:
        return self.replace(ColorKey.ALPHA, alpha)

    # ------------------ PIVOT ------------------
    def to_rgba(self) -> RGBATuple:
        return _values_to_rgba(self._values, self.space)

    @classmethod
    def from_rgba(cls, rgba: RGBATuple) -> ColorBase:
        return cls(*_rgba_to_values(rgba, cls.space))

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._values == other._values

    def __hash__(self) -> int:
        return hash((self.space, self._values))

    def __repr__(self) -> str:
        args = ", ".join(f"{k.value}={v!r}" for k, v in zip(self.fields, self._values))
        return f"{self.__class__.__name__}({args})"

    def __str__(self) -> str:
        from ..formats.text import to_text
        return to_text(self)


def build_registry(*classes: Type[ColorBase]) -> Dict[ColorSpace, Type[ColorBase]]:
    return {cls.space: cls for cls in classes}
