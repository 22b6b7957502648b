"""Drop-set construction."""

from ..models.exercises import DIFFICULTY_ORDER, Difficulty, Exercise
from ..models.session import SETS_PER_CHAIN


def get_drop_set_exercises(
    exercises: list[Exercise],
    current_difficulty: Difficulty,
    size: int = SETS_PER_CHAIN,
) -> list[Exercise]:
    """Build a drop set: start at the current difficulty and step down.

    Walks from current_difficulty down one tier per set, taking the first
    active exercise found at each exact tier. Missing tiers are filled with
    the easiest remaining active exercises. The result never repeats an
    exercise and is shorter than `size` when the active pool is smaller.

    Args:
        exercises: Exercises of a single exercise class
        current_difficulty: Difficulty the first set should use
        size: Maximum number of exercises to return

    Returns:
        Ordered exercises, one per set
    """
    active = [e for e in exercises if e.active]
    start = Difficulty(current_difficulty).index
    result: list[Exercise] = []

    for step in range(size):
        target_index = start - step
        if target_index < 0:
            break
        target = DIFFICULTY_ORDER[target_index]
        match = next((e for e in active if e.difficulty == target), None)
        if match is not None:
            result.append(match)

    # Fill from the bottom (sorted() is stable, so ties keep input order)
    remaining = sorted(
        (e for e in active if not any(e is r for r in result)),
        key=lambda e: e.difficulty.index,
    )
    while len(result) < size and remaining:
        result.append(remaining.pop(0))

    return result
