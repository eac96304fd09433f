import pytest

from data_models import DataModel, TargetPlatform, TargetTripleError, model_for_triple, parse_triple


def test_parse_triple():
    assert parse_triple("x86_64-pc-linux-gnu") == TargetPlatform("x86_64", "pc", "linux", "gnu")
    assert parse_triple("arm64-apple-darwin25.0.0") == TargetPlatform("arm64", "apple", "darwin", "")
    assert parse_triple("x86_64-w64-windows-msvc").is_windows
    assert parse_triple("aarch64").os == "unknown"


def test_triple_round_trip():
    assert parse_triple("x86_64-pc-linux-gnu").triple == "x86_64-pc-linux-gnu"
    assert parse_triple("arm64-apple-darwin").triple == "arm64-apple-darwin"


@pytest.mark.parametrize("triple, expected", [
    ("x86_64-pc-linux-gnu", DataModel.LP64),
    ("aarch64-unknown-linux-musl", DataModel.LP64),
    ("arm64-apple-darwin23.1.0", DataModel.LP64),
    ("riscv64gc-unknown-linux-gnu", DataModel.LP64),
    ("riscv64-unknown-linux-gnu", DataModel.LP64),
    ("x86_64-unknown-freebsd", DataModel.LP64),
    ("x86_64-pc-windows-msvc", DataModel.LLP64),
    ("x86_64-w64-mingw32", DataModel.LLP64),
    ("aarch64-pc-windows-msvc", DataModel.LLP64),
    ("x86_64-pc-cygwin", DataModel.LP64),
    ("x86_64-pc-linux-gnux32", DataModel.ILP32),
    ("x86_64-linux-gnux32", DataModel.ILP32),
    ("x86_64-windows-msvc", DataModel.LLP64),
    ("x86_64-windows-gnu", DataModel.LLP64),
    ("aarch64-windows", DataModel.LLP64),
    ("x86_64-linux-gnu", DataModel.LP64),
    ("X86_64-PC-Windows-MSVC", DataModel.LLP64),
    ("AArch64-Apple-Darwin", DataModel.LP64),
    ("i686-pc-windows-msvc", DataModel.ILP32),
    ("i386-pc-linux-gnu", DataModel.ILP32),
    ("armv7a-none-eabi", DataModel.ILP32),
    ("thumbv7em-none-eabihf", DataModel.ILP32),
    ("wasm32-unknown-unknown", DataModel.ILP32),
    ("msp430-none-elf", DataModel.UNKNOWN),
    ("avr-unknown-unknown", DataModel.UNKNOWN),
])
def test_model_for_triple(triple, expected):
    assert model_for_triple(triple) is expected


@pytest.mark.parametrize("triple", ["", "   ", "-pc-linux-gnu"])
def test_invalid_triple(triple):
    with pytest.raises(TargetTripleError) as info:
        model_for_triple(triple)
    assert info.value.code == "DM0002"


def test_parse_vendorless_triple():
    assert parse_triple("x86_64-windows-msvc") == TargetPlatform("x86_64", "unknown", "windows", "msvc")
    assert parse_triple("aarch64-windows") == TargetPlatform("aarch64", "unknown", "windows", "")
    assert parse_triple("x86_64-linux-gnux32").abi == "gnux32"
    assert parse_triple("arm64-darwin23.1.0").os == "darwin"


def test_parse_triple_is_case_insensitive():
    target = parse_triple("X86_64-PC-Windows-MSVC")
    assert target == TargetPlatform("x86_64", "pc", "windows", "msvc")
    assert target.is_windows
