"""Annotation Summary: pure tally of recorded answers for one file pair.

Invariants:
    - Every input is counted exactly once: total == len(answers)
    - None is counted as unanswered
    - yes + maybe + no + skip + unanswered == total
"""

from dataclasses import dataclass

from code_annotation.core.domain_types import Answer


@dataclass(frozen=True)
class AnnotationSummary:
    """Per-answer counts for a file pair across every assigned user."""
    yes: int = 0
    maybe: int = 0
    no: int = 0
    skip: int = 0
    unanswered: int = 0
    total: int = 0


def summarize_answers(answers: list[str | None]) -> AnnotationSummary:
    """Count answers by kind. Unknown strings are rejected with ValueError."""
    counts = {answer: 0 for answer in Answer}
    unanswered = 0
    for raw in answers:
        if raw is None:
            unanswered += 1
            continue
        counts[Answer(raw)] += 1

    return AnnotationSummary(
        yes=counts[Answer.YES],
        maybe=counts[Answer.MAYBE],
        no=counts[Answer.NO],
        skip=counts[Answer.SKIP],
        unanswered=unanswered,
        total=len(answers),
    )
