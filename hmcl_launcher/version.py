"""Four-part numeric versions as found in Java version strings and PE files."""

from __future__ import annotations

from dataclasses import dataclass

_PARTS = 4


@dataclass(frozen=True, order=True)
class Version:
    """A version made of exactly four integer components, ordered lexicographically."""

    parts: tuple[int, int, int, int] = (0, 0, 0, 0)

    def __post_init__(self) -> None:
        if len(self.parts) != _PARTS:
            raise ValueError(f"a version has exactly {_PARTS} parts, got {len(self.parts)}")

    @classmethod
    def parse(cls, raw: str) -> Version:
        """Parse a string such as ``1.8.0_301``.

        Dots and underscores separate components; every other non-digit
        character is skipped. Anything past the fourth component is ignored.
        """
        parts = [0] * _PARTS
        index = 0
        for char in raw:
            if index >= _PARTS:
                break
            if char in "._":
                index += 1
            elif "0" <= char <= "9":
                parts[index] = parts[index] * 10 + int(char)
        return cls(tuple(parts))

    @classmethod
    def of(cls, *args: int) -> Version:
        """Build a version from up to four integers; missing parts are zero, extras dropped."""
        parts = [int(value) for value in args[:_PARTS]]
        parts.extend([0] * (_PARTS - len(parts)))
        return cls(tuple(parts))

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.parts)