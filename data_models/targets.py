"""
Target triple parsing and the conventional data model of a target.

Only triples handed in by the caller are inspected; the host the code is
running on is never queried.
"""
from __future__ import annotations
from dataclasses import dataclass

from data_models.errors import TargetTripleError, error
from data_models.models import DataModel

_ARCH_64 = frozenset({
    'x86_64', 'amd64', 'aarch64', 'aarch64_be', 'arm64', 'arm64e',
    'riscv64', 'riscv64gc', 'ppc64', 'ppc64le', 'powerpc64', 'powerpc64le',
    'mips64', 'mips64el', 's390x', 'sparcv9', 'sparc64',
    'loongarch64', 'wasm64', 'nvptx64', 'bpfel', 'bpfeb',
})

_ARCH_32 = frozenset({
    'i386', 'i486', 'i586', 'i686', 'x86', 'arm', 'armeb', 'riscv32',
    'ppc', 'powerpc', 'powerpcle', 'mips', 'mipsel', 'sparc', 'sparcel',
    'wasm32', 'm68k', 'hexagon', 'xtensa', 'nvptx', 'arm64_32',
})

# 32-bit prefixes for sub-architecture spellings (armv7a, thumbv7em, ...)
_ARCH_32_PREFIXES = ('armv', 'thumb')

_WINDOWS_OS = frozenset({'windows', 'win32', 'mingw32'})

# OS names that may appear in the vendor slot of a vendorless triple
# (x86_64-linux-gnu, x86_64-windows-msvc).
_KNOWN_OS = _WINDOWS_OS | frozenset({
    'linux', 'darwin', 'macos', 'ios', 'freebsd', 'openbsd', 'netbsd',
    'dragonfly', 'solaris', 'illumos', 'haiku', 'fuchsia', 'cygwin',
    'wasi', 'emscripten',
})


@dataclass
class TargetPlatform:
    """Represents a compilation target platform."""
    arch: str      # arm64, x86_64, riscv64, etc.
    vendor: str    # apple, pc, unknown, etc.
    os: str        # darwin, linux, windows, etc.
    abi: str       # (empty), gnu, musl, etc.

    @property
    def is_windows(self) -> bool:
        """Returns True for Windows targets, including MinGW. Cygwin is not
        counted: it follows the Unix LP64 convention."""
        return self.os in _WINDOWS_OS

    @property
    def pointer_bits(self) -> int:
        """Pointer width implied by the architecture, 0 if not recognized."""
        if self.arch in _ARCH_64:
            return 64
        if self.arch in _ARCH_32 or self.arch.startswith(_ARCH_32_PREFIXES):
            return 32
        return 0

    @property
    def triple(self) -> str:
        """Reconstruct the target triple string."""
        parts = [self.arch, self.vendor, self.os]
        if self.abi:
            parts.append(self.abi)
        return '-'.join(parts)


def parse_triple(triple: str) -> TargetPlatform:
    """
    Parse an LLVM target triple into components.

    Examples:
        arm64-apple-darwin25.0.0 -> TargetPlatform(arm64, apple, darwin, '')
        x86_64-pc-linux-gnu -> TargetPlatform(x86_64, pc, linux, gnu)
        x86_64-w64-windows-msvc -> TargetPlatform(x86_64, w64, windows, msvc)

    The vendor may be omitted (x86_64-linux-gnu, x86_64-windows-msvc) and
    the triple is matched case-insensitively.

    Raises:
        TargetTripleError: If the triple is empty or has an empty arch.
    """
    parts = triple.strip().lower().split('-')
    if not parts[0]:
        raise error("DM0002", TargetTripleError, triple=triple)

    if 1 < len(parts) < 4 and _os_name(parts[1]) in _KNOWN_OS:
        parts.insert(1, 'unknown')

    return TargetPlatform(
        arch=parts[0],
        vendor=parts[1] if len(parts) > 1 else 'unknown',
        os=_os_name(parts[2]) if len(parts) > 2 else 'unknown',
        abi=parts[3] if len(parts) > 3 else '',
    )


def _os_name(os_part: str) -> str:
    # Handle version numbers in OS (e.g., darwin25.0.0)
    if '.' in os_part:
        os_part = os_part.split('.')[0]  # darwin25.0.0 -> darwin25
    # Further normalize darwin25 -> darwin
    if os_part.startswith('darwin'):
        os_part = 'darwin'
    return os_part


def model_for_triple(triple: str) -> DataModel:
    """Conventional data model of the target named by `triple`.

    Windows is LLP64 on 64-bit architectures; everything else 64-bit is
    LP64, except the x32 ABI, which is ILP32. 32-bit targets are ILP32.
    Unrecognized or 16-bit architectures (msp430, avr) give UNKNOWN.

    Examples:
        x86_64-pc-windows-msvc -> LLP64
        aarch64-unknown-linux-gnu -> LP64
        x86_64-pc-linux-gnux32 -> ILP32
    """
    target = parse_triple(triple)
    bits = target.pointer_bits
    if bits == 64:
        if target.abi.endswith('x32'):
            return DataModel.ILP32
        return DataModel.LLP64 if target.is_windows else DataModel.LP64
    if bits == 32:
        return DataModel.ILP32
    return DataModel.UNKNOWN
