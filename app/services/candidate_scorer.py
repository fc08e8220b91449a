# app/services/candidate_scorer.py
from typing import Callable, Dict, List, Mapping, Sequence, Tuple

from app.models.trip import Candidate, ScoredCandidate

TagMatcher = Callable[[Mapping[str, str], str], bool]


def amenity_is_preference(tags: Mapping[str, str], pref: str) -> bool:
    return tags.get("amenity") == pref


def has_toilets(tags: Mapping[str, str], pref: str) -> bool:
    return tags.get("toilets") == "yes"


def has_cuisine(tags: Mapping[str, str], pref: str) -> bool:
    return bool(tags.get("cuisine"))


def sells_fuel(tags: Mapping[str, str], pref: str) -> bool:
    return tags.get("amenity") == "fuel" or tags.get("shop") == "convenience"


# Applies to every preference, known or not.
GENERIC_RULES: Tuple[TagMatcher, ...] = (amenity_is_preference,)

# Extra ways a known preference can be satisfied.
PREFERENCE_RULES: Dict[str, Tuple[TagMatcher, ...]] = {
    "toilets": (has_toilets,),
    "restaurant": (has_cuisine,),
    "food": (has_cuisine,),
    "fuel": (sells_fuel,),
}


class CandidateScorer:
    """
    Scores raw candidates against the caller's preferences.

    Each preference counts at most once, however many of its rules match.
    A candidate with no match scores 0 and stays selectable as a plain stop.
    """

    def __init__(self, rules: Mapping[str, Sequence[TagMatcher]] | None = None) -> None:
        self.rules = PREFERENCE_RULES if rules is None else rules

    def matches(self, tags: Mapping[str, str], pref: str) -> bool:
        matchers = (*GENERIC_RULES, *self.rules.get(pref, ()))
        return any(match(tags, pref) for match in matchers)

    def score(self, candidate: Candidate, preferences: Sequence[str]) -> ScoredCandidate:
        matched: List[str] = []
        for pref in preferences:
            if pref not in matched and self.matches(candidate.tags, pref):
                matched.append(pref)

        return ScoredCandidate(
            coordinate=candidate.coordinate,
            name=candidate.name,
            tags=candidate.tags,
            score=len(matched),
            matched_preferences=matched,
        )

    def score_all(
        self,
        candidates: Sequence[Candidate],
        preferences: Sequence[str],
    ) -> List[ScoredCandidate]:
        return [self.score(c, preferences) for c in candidates]
