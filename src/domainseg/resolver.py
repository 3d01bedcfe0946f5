"""Pick the alternate segmentation of an ambiguous letter run"""

import math
from typing import Optional, Sequence

from .stub import Stub


class AmbiguityResolver:
    """Choose the second-best LATIN stub among competing segmentations

    The first candidate is always the primary. Alternates are only tracked for
    labels above the rightmost one.
    """

    def choose_alternate(
        self,
        candidates: Sequence[Stub],
        level: int,
        alternate_exists: bool,
    ) -> Optional[Stub]:
        """Return the alternate stub, or None when the run does not diverge.

        Candidates are scanned from the last found to the second; a candidate
        only replaces the current best with a strictly lower rating. Before
        any alternate exists for the domain, a candidate also needs a rating
        below the length of its run.
        """
        if len(candidates) < 2 or level <= 1:
            return None

        best = None
        best_rating = math.inf
        for candidate in reversed(candidates[1:]):
            rating = candidate.rating()
            if rating < best_rating and (alternate_exists or rating < len(candidate.text)):
                best, best_rating = candidate, rating
        return best
