"""Extended polymerization: count elements after pair insertions."""

from collections import Counter


def parse(text):
    """Read the polymer template and its insertion rules, returned as (template, rules)."""
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("missing polymer template")
    template = lines[0].strip()
    rules = {}
    for line in lines[1:]:
        line = line.strip()
        if not line:
            continue
        pair, sep, element = (part.strip() for part in line.partition("->"))
        if not sep or len(pair) != 2 or len(element) != 1:
            raise ValueError(f"malformed rule: {line!r}")
        rules[pair] = element
    return template, rules


def pair_counts(template, rules, steps):
    """Counts of adjacent element pairs after the given number of insertion steps."""
    counts = Counter(a + b for a, b in zip(template, template[1:]))
    for _ in range(steps):
        grown = Counter()
        for pair, count in counts.items():
            inserted = rules.get(pair)
            if inserted is None:
                grown[pair] += count
            else:
                grown[pair[0] + inserted] += count
                grown[inserted + pair[1]] += count
        counts = grown
    return counts


def element_counts(template, pairs):
    """Element counts of the polymer described by its pair counts."""
    if not template:
        raise ValueError("empty polymer template")
    counts = Counter()
    for pair, count in pairs.items():
        counts[pair[0]] += count
    counts[template[-1]] += 1
    return counts


def _spread(template, rules, steps):
    counts = element_counts(template, pair_counts(template, rules, steps))
    return max(counts.values()) - min(counts.values())


def part_one(text):
    """Most common minus least common element count after 10 steps."""
    return _spread(*parse(text), 10)


def part_two(text):
    """Most common minus least common element count after 40 steps."""
    return _spread(*parse(text), 40)