"""Classification and normalization stages and shared result types."""

from __future__ import annotations

import dataclasses

from blanklines.enums import Evidence, Failure, Verdict


@dataclasses.dataclass(frozen=True, slots=True)
class Classification:
    """The classifier's verdict on a buffer and the evidence behind it.

    *label* is the matched Content-Type value or signature name, *score*
    the non-printable ratio when the heuristic decided.
    """

    verdict: Verdict
    evidence: Evidence
    label: str | None = None
    score: float | None = None

    @property
    def is_text(self) -> bool:
        return self.verdict is Verdict.TEXT

    def to_dict(self) -> dict[str, str | float | None]:
        """Convert this classification to a plain dict.

        :returns: A dict with ``'verdict'``, ``'evidence'``, ``'label'`` and
            ``'score'`` keys.
        """
        return {
            "verdict": self.verdict.value,
            "evidence": self.evidence.value,
            "label": self.label,
            "score": self.score,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class ProcessingResult:
    """Outcome of normalizing one message or body.

    ``modified`` is true exactly when ``data`` differs from the input; when
    it is false ``data`` is the input object itself.  ``failure`` records
    why a message was left (partly) untouched.
    """

    data: bytes
    modified: bool
    failure: Failure | None = None
    classification: Classification | None = None

    @classmethod
    def unchanged(
        cls,
        original: bytes,
        failure: Failure | None = None,
        classification: Classification | None = None,
    ) -> ProcessingResult:
        return cls(original, False, failure, classification)

    @classmethod
    def compare(
        cls,
        original: bytes,
        new: bytes,
        failure: Failure | None = None,
        classification: Classification | None = None,
    ) -> ProcessingResult:
        """Build a result, keeping *original* when *new* has the same bytes."""
        if new == original:
            return cls(original, False, failure, classification)
        return cls(new, True, failure, classification)
