"""Seven-segment search: decode scrambled display wiring."""

from dataclasses import dataclass

_UNIQUE_LENGTHS = {2: "1", 3: "7", 4: "4", 7: "8"}


@dataclass(frozen=True)
class Record:
    """Ten observed signal patterns and the four-digit output they drive."""

    signals: tuple
    output: tuple

    def decode(self):
        """Map each digit character to the signal pattern that shows it."""
        known = {}
        for signal in self.signals:
            digit = _UNIQUE_LENGTHS.get(len(signal))
            if digit is not None:
                known[digit] = signal
        if "1" not in known:
            raise ValueError("no pattern for digit 1")

        one = set(known["1"])
        for signal in self.signals:
            if signal in known.values():
                continue
            shared = len(one & set(signal))
            if len(signal) == 5 and shared == 2:
                known["3"] = signal
            elif len(signal) == 6 and shared == 1:
                known["6"] = signal
        if "3" not in known or "6" not in known:
            raise ValueError("cannot identify digits 3 and 6")

        six, three = set(known["6"]), set(known["3"])
        for signal in self.signals:
            if signal in known.values():
                continue
            if len(signal) == 5:
                known["5" if len(six - set(signal)) == 1 else "2"] = signal
            elif len(signal) == 6:
                known["9" if len(set(signal) - three) == 1 else "0"] = signal
        return known

    def value(self):
        """The four output digits read as one number."""
        lookup = {"".join(sorted(pattern)): digit for digit, pattern in self.decode().items()}
        digits = []
        for pattern in self.output:
            key = "".join(sorted(pattern))
            if key not in lookup:
                raise ValueError(f"output pattern {pattern!r} matches no signal")
            digits.append(lookup[key])
        return int("".join(digits))


def parse(text):
    """Read one record per line: ten patterns, a bar, four output patterns."""
    records = []
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split("|")
        if len(parts) != 2:
            raise ValueError(f"expected one '|' in {line!r}")
        signals, output = (tuple(part.split()) for part in parts)
        if len(signals) != 10 or len(output) != 4:
            raise ValueError(f"expected 10 signals and 4 outputs in {line!r}")
        records.append(Record(signals, output))
    return records


def part_one(text):
    """Count output patterns for digits with a unique segment count."""
    return sum(
        len(pattern) in _UNIQUE_LENGTHS
        for record in parse(text)
        for pattern in record.output
    )


def part_two(text):
    """Sum of all decoded output values."""
    return sum(record.value() for record in parse(text))