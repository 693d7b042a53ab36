"""A span of time held as whole hours, minutes and seconds."""

from __future__ import annotations

import math
from typing import Sequence


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Division truncating toward zero; the remainder takes the sign of a."""
    q = abs(a) // b
    if a < 0:
        q = -q
    return q, a - q * b


class TimeSpan:
    """A time span normalised to hours, minutes and seconds.

    Built from (), (seconds), (minutes, seconds) or (hours, minutes, seconds).
    Fractional values are folded into whole seconds.
    """

    def __init__(self, *args: float) -> None:
        if len(args) > 3:
            raise TypeError("TimeSpan takes at most three values")
        h, m, s = (0.0,) * (3 - len(args)) + tuple(args)
        self._reduce(h, m, s)

    def _reduce(self, h: float, m: float, s: float) -> None:
        total = int(h * 3600 + m * 60 + _round_half_away(s))
        self._hours, total = _trunc_divmod(total, 3600)
        self._minutes, self._seconds = _trunc_divmod(total, 60)

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    def set_time(self, hours: int, minutes: int, seconds: int) -> None:
        """Set the fields directly; minutes and seconds within [-60, 60], hours >= 0."""
        if not -60 <= seconds <= 60 or not -60 <= minutes <= 60 or hours < 0:
            raise ValueError(
                "Keep minutes and seconds within -60 and 60 and hours positive"
            )
        self._hours, self._minutes, self._seconds = hours, minutes, seconds

    def is_positive(self) -> bool:
        """Return False if any field is negative."""
        return self._hours >= 0 and self._minutes >= 0 and self._seconds >= 0

    def __add__(self, other: TimeSpan) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self._hours + other._hours,
                        self._minutes + other._minutes,
                        self._seconds + other._seconds)

    def __sub__(self, other: TimeSpan) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self._hours - other._hours,
                        self._minutes - other._minutes,
                        self._seconds - other._seconds)

    def __neg__(self) -> TimeSpan:
        return TimeSpan(-self._hours, -self._minutes, -self._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return (self._hours, self._minutes, self._seconds) == (
            other._hours, other._minutes, other._seconds)

    def __str__(self) -> str:
        return (f"Hours: {self._hours}, Minutes: {self._minutes}, "
                f"Seconds: {self._seconds}")

    def __repr__(self) -> str:
        return f"TimeSpan({self._hours}, {self._minutes}, {self._seconds})"


def _show(span: TimeSpan) -> None:
    if not span.is_positive():
        print("Time for object has become negative")
    print(span)


def main(argv: Sequence[str] | None = None) -> int:
    print("Testing all TimeSpan Constructors:")
    _show(TimeSpan(45))
    test2 = TimeSpan(15, 15.9)
    _show(test2)
    _show(TimeSpan(1.5, 4, -10))
    test4 = TimeSpan(1.5, -45, 8)
    test6 = TimeSpan(1, 1, 1)

    print("testing set_time method")
    test2.set_time(1, 2, 3)
    print(test2)

    print("testing a faulty constructor")
    _show(TimeSpan(-1, 3, 3))
    print(test4)
    print(test6)

    print("testing addition")
    print(f"{test6 + test4} While expected is Hours: 1 Minutes: 46")
    print("testing subtraction ")
    print(f"{test6 - test4} While expected is Minutes: 15 Seconds: 53")

    test7 = TimeSpan(1, 2, 3)
    print("Testing negative unary negation")
    print(test7)
    _show(-test7)

    print("testing == and != comparison statements")
    test8, test9, test10 = TimeSpan(3, 3, 3), TimeSpan(3, 3, 3), TimeSpan(4, 3, 3)
    print(" == works" if test8 == test9 else " == doesn't work")
    print(" != works" if test8 != test10 else " != doesn't work")

    print("Testing for input")
    if argv is None:
        argv = input("Enter Hours, Minutes, Seconds separated by space: ").split()
    if len(argv) != 3:
        raise SystemExit("expected three integers: hours minutes seconds")
    hours, minutes, seconds = (int(v) for v in argv)
    _show(TimeSpan(hours, minutes, seconds))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())