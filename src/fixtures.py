from typing import NamedTuple


class RootCase(NamedTuple):
    number: str
    r: int
    expected: str


ROOT_CASES = [
    RootCase("0", 2, "0"),
    RootCase("1", 2, "1"),
    RootCase("13", 2, "3"),
    RootCase("1024", 2, "32"),
    RootCase("189943527", 2, "13782"),
    RootCase("0", 3, "0"),
    RootCase("1", 3, "1"),
    RootCase("13", 3, "2"),
    RootCase("4096", 3, "16"),
    RootCase("189943527", 3, "574"),
    RootCase("0", 15, "0"),
    RootCase("1", 15, "1"),
    RootCase("13", 15, "1"),
    RootCase("1024", 15, "1"),
    RootCase("189943527", 15, "3"),
    RootCase("82", 2, "9"),
    RootCase("82", 3, "4"),
    RootCase("82", 4, "3"),
    RootCase("82", 5, "2"),
    RootCase("82", 15, "1"),
    RootCase("9", 2, "3"),
    RootCase("27", 3, "3"),
    RootCase("81", 4, "3"),
    RootCase("243", 5, "3"),
    RootCase("143489073", 15, "3"),
    RootCase("2147483647", 2, "46340"),
    RootCase("2147483648", 2, "46340"),
    RootCase("9223372036854775807", 3, "2097151"),
    RootCase("9223372036854775808", 3, "2097152"),
    RootCase("618970019642690137449562111", 4, "4987896"),
    RootCase("162259276829213363391578010288127", 5, "2767208"),
    RootCase("170141183460469231731687303715884105727", 6, "2353973"),
]
