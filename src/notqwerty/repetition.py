"""
Detection of passwords built from a short repeated unit.

A password is a trivial repetition when, after skipping at most one character
at each end, what remains is a unit of 1 to 8 characters repeated at least
twice: ``abcabcabcabc``, ``xaaaaaaaa``, ``1212121212!``.
"""

MAX_UNIT_LENGTH = 8
MIN_REPEATS = 2


def _is_repeated(body: str, unit: int) -> bool:
    """True if every character of body equals the one unit places later."""
    return all(body[i] == body[i + unit] for i in range(len(body) - unit))


def is_trivial_repetition(password: str) -> bool:
    """Check whether password is a short unit repeated two or more times.

    The comparison is case-insensitive. Units longer than MAX_UNIT_LENGTH are
    not considered, however long the password is.
    """
    key = password.lower()
    length = len(key)

    for lead in (0, 1):
        for trail in (0, 1):
            span = length - lead - trail
            if span < MIN_REPEATS:
                continue
            body = key[lead:lead + span]
            for unit in range(1, min(MAX_UNIT_LENGTH, span // MIN_REPEATS) + 1):
                if span % unit == 0 and _is_repeated(body, unit):
                    return True
    return False
