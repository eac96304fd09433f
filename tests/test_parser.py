import pytest

from data_models import CTypeParseError, DataModel, TypeCategory, parse_c_type

C = TypeCategory


@pytest.mark.parametrize("text, expected", [
    ("char", C.CHAR),
    ("signed char", C.CHAR),
    ("unsigned char", C.CHAR),
    ("short", C.SHORT),
    ("short int", C.SHORT),
    ("unsigned short", C.SHORT),
    ("signed short int", C.SHORT),
    ("int", C.INT),
    ("signed", C.INT),
    ("unsigned", C.INT),
    ("unsigned int", C.INT),
    ("long", C.LONG),
    ("long int", C.LONG),
    ("unsigned long", C.LONG),
    ("long unsigned int", C.LONG),
    ("long long", C.LONG_LONG),
    ("long long int", C.LONG_LONG),
    ("unsigned long long int", C.LONG_LONG),
    ("long int long", C.LONG_LONG),
    ("const volatile int", C.INT),
    ("  unsigned\tlong  ", C.LONG),
    ("void *", C.POINTER),
    ("void**", C.POINTER),
    ("const char *", C.POINTER),
    ("char * const", C.POINTER),
    ("unsigned long long * volatile *", C.POINTER),
])
def test_parse_c_type(text, expected):
    assert parse_c_type(text) is expected


@pytest.mark.parametrize("text", [
    "",
    "void",
    "const",
    "long double",
    "wchar_t",
    "longlong",
    "long long long",
    "short long",
    "char int",
    "signed unsigned int",
    "unsigned unsigned",
    "int int",
    "void int *",
    "* int",
    "int &",
    "wchar_t *",
])
def test_parse_c_type_rejects(text):
    with pytest.raises(CTypeParseError) as info:
        parse_c_type(text)
    assert info.value.code == "DM0001"
    assert isinstance(info.value, ValueError)


def test_size_of_c():
    assert DataModel.LP64.size_of_c("unsigned long") == 8
    assert DataModel.LLP64.size_of_c("unsigned long") == 4
    assert DataModel.ILP32.size_of_c("void *") == 4
    assert DataModel.IP16.size_of_c("long long") == 0
    assert DataModel.UNKNOWN.size_of_c("char") == 0


def test_size_of_c_propagates_parse_error():
    with pytest.raises(CTypeParseError):
        DataModel.LP64.size_of_c("long double")


@pytest.mark.parametrize("value", [None, 4, b"int"])
def test_parse_c_type_rejects_non_strings(value):
    with pytest.raises(CTypeParseError, match="expected a string"):
        parse_c_type(value)
