"""Caesar cipher over a configurable alphabet."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"

_UINT32 = 1 << 32


@dataclass
class Kernel:
    """Cipher settings: the shift, the alphabet and whether to keep other characters."""

    shift: int = 5
    alphabet: str = DEFAULT_ALPHABET
    foreign_chars: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.shift < _UINT32:
            raise ValueError("shift must fit in an unsigned 32-bit integer")


class CaesarCipher:
    """Encodes and decodes text by shifting letters along the kernel's alphabet."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, kernel: Kernel | None = None) -> None:
        if kernel is None:
            kernel = Kernel()
        alphabet = "".join(dict.fromkeys(kernel.alphabet))
        self._kernel = Kernel(kernel.shift, alphabet, kernel.foreign_chars)
        self._index = {ch: i for i, ch in enumerate(alphabet)}

    @property
    def kernel(self) -> Kernel:
        """A copy of the cipher's settings, with duplicate letters removed."""
        return replace(self._kernel)

    def _translate(self, message: str, decoding: bool) -> str:
        alphabet = self._kernel.alphabet
        size = len(alphabet)
        shift = self._kernel.shift
        signed_shift = shift if shift < _UINT32 // 2 else shift - _UINT32
        out = []
        for ch in message:
            index = self._index.get(ch)
            if index is None:
                if self._kernel.foreign_chars:
                    out.append(ch)
                continue
            if decoding:
                out.append(alphabet[abs(index - signed_shift) % size])
            else:
                out.append(alphabet[(index + shift) % size])
        return "".join(out)

    def encode(self, message: str) -> str:
        """Return ``message`` encoded with the current kernel."""
        return self._translate(message, decoding=False)

    def decode(self, message: str) -> str:
        """Return ``message`` decoded with the current kernel."""
        return self._translate(message, decoding=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaesarCipher):
            return NotImplemented
        return self._kernel == other._kernel

    def __repr__(self) -> str:
        return f"CaesarCipher({self._kernel!r})"