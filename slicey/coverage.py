from slicey.claim import Claim


def contested_cells(claims: list[Claim]) -> set[tuple[int, int]]:
    """Get the unit cells covered by at least two claims"""
    cells = set()
    for i, claim in enumerate(claims):
        for other in claims[:i]:
            overlap = claim.rect.overlaps(other.rect)
            if overlap is not None:
                cells.update(overlap.cells())
    return cells


def part1(claims: list[Claim]) -> int:
    """Count the unit cells claimed more than once"""
    return len(contested_cells(claims))
