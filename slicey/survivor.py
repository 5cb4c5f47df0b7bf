from slicey.claim import Claim
from slicey.slicey_error import AmbiguousResultError, NoResultError


def _overlaps_nothing(claim: Claim, claims: list[Claim]) -> bool:
    return all(
        other.rect.overlaps(claim.rect) is None
        for other in claims
        if other != claim
    )


def survivors(claims: list[Claim]) -> list[Claim]:
    """Get every claim that overlaps no other claim, in list order"""
    return [claim for claim in claims if _overlaps_nothing(claim, claims)]


def part2(claims: list[Claim], strict: bool = False) -> int | None:
    """Find the id of the claim that overlaps no other claim.

    Args:
        claims: The claims to search
        strict: When False the first non-overlapping claim wins and None is returned
            if there is none. When True exactly one such claim must exist.

    Returns:
        The id of the surviving claim, or None

    Raises:
        NoResultError: In strict mode, if every claim overlaps another
        AmbiguousResultError: In strict mode, if several claims overlap nothing
    """
    if not strict:
        return next(
            (claim.id for claim in claims if _overlaps_nothing(claim, claims)), None
        )

    found = survivors(claims)
    if not found:
        raise NoResultError("every claim overlaps another claim")
    if len(found) > 1:
        raise AmbiguousResultError([claim.id for claim in found])
    return found[0].id
