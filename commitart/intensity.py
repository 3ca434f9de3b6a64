"""Commit-count distributions per intensity level."""

DEFAULT_INTENSITY = 2
LEVELS = (1, 2, 3, 4)

_NAMES = {
    1: "Light green (2-3 commits/day)",
    2: "Medium green (4-7 commits/day)",
    3: "Dark green (10-15 commits/day)",
    4: "Random mix (4-19 commits/day, natural look)",
}

_COLORS = {
    1: "\x1b[42m",
    2: "\x1b[102m",
    3: "\x1b[32m",
    4: "\x1b[96m",
}


def effective_level(level) -> int:
    return level if level in LEVELS else DEFAULT_INTENSITY


def commit_count(level, rng) -> int:
    """Draw how many commits one lit pixel gets at `level`."""
    level = effective_level(level)
    if level == 1:
        return 2
    if level == 2:
        return 5 if rng.random() < 0.5 else 6
    if level == 3:
        return 12 if rng.random() < 0.5 else 15
    roll = rng.random()
    if roll < 0.3:
        return rng.randint(4, 6)
    if roll < 0.7:
        return rng.randint(7, 10)
    return rng.randint(12, 19)


def intensity_name(level) -> str:
    return _NAMES.get(level, "Medium green (default)")


def intensity_color(level) -> str:
    return _COLORS[effective_level(level)]
