# Lower bound (inclusive) for each letter grade, best first. Anything below the last
# bound is an "F".
GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "A+"),
    (82, "A"),
    (75, "A-"),
    (68, "B+"),
    (60, "B"),
    (52, "B-"),
    (44, "C+"),
    (36, "C"),
    (28, "C-"),
    (20, "D"),
)

FAILING_GRADE = "F"

GRADE_ORDER: tuple[str, ...] = tuple(grade for _, grade in GRADE_THRESHOLDS) + (FAILING_GRADE,)


def tunnel_grade(score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE


def grade_rank(grade: str) -> int:
    """Position of a grade in best-to-worst order (0 = "A+")."""
    try:
        return GRADE_ORDER.index(grade)
    except ValueError:
        msg = f"Unknown grade: {grade!r}"
        raise ValueError(msg) from None
