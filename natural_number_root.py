import sys
from typing import Iterable, Optional

from src.algorithms import DEFAULT_EXPONENT, root
from src.fixtures import ROOT_CASES, RootCase
from src.magnitude import Magnitude


def run_case(index: int, case: RootCase) -> bool:
    n = Magnitude.from_str(case.number)
    expected = Magnitude.from_str(case.expected)
    root(n, case.r)
    if n == expected:
        print(f"Test {index} passed: root({case.number}, {case.r}) = {case.expected}")
        return True
    print(
        f"*** Test {index} failed: root({case.number}, {case.r}) "
        + f"expected <{case.expected}> but was <{n}>"
    )
    return False


def run_fixtures(cases: Iterable[RootCase] = ROOT_CASES) -> int:
    print("=" * 15 + " Fixtures " + "=" * 15)
    total = failed = 0
    for index, case in enumerate(cases, 1):
        total += 1
        if not run_case(index, case):
            failed += 1
    print(f"{total - failed}/{total} passed")
    return failed


def compute(text: str, r: int) -> Optional[Magnitude]:
    print("=" * 15 + " Compute " + "=" * 15)
    try:
        n = Magnitude.from_str(text)
        root(n, r)
    except ValueError as e:
        print(f"ERROR: {e}")
        return None
    print(f"root({text.strip()}, {r}) = {n}")
    return n


def main() -> int:
    operation = input("Run fixtures/Compute a root/Both? (f/c/b) [b]: ") or "b"

    if "b" in operation:
        operation = "fc"

    failed = 0
    if "f" in operation:
        failed = run_fixtures()

    if "c" in operation:
        text = input("Input the number: ")
        r = int(input(f"Input the root [{DEFAULT_EXPONENT}]: ") or DEFAULT_EXPONENT)
        compute(text, r)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
