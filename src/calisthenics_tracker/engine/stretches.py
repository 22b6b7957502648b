"""Cooldown stretch recommendation."""

import random

from ..models.exercises import MuscleChain
from ..models.stretches import POSITION_ORDER, Stretch
from .rotation import check_exhaustive
from .store import WorkoutStore

# Muscle tags each chain should be stretched through
CHAIN_STRETCH_TAGS: dict[MuscleChain, list[str]] = {
    MuscleChain.QUADS: ["Quadriceps", "Hip Flexors", "Hips"],
    MuscleChain.TRICEPS_PECTORALS: ["Triceps", "Chest", "Shoulders"],
    MuscleChain.ABDOMINALS_OBLIQUES: ["Hip Flexors", "Back", "Spine"],
    MuscleChain.HAMSTRINGS_CALVES: ["Hamstrings", "Calves", "Ankles"],
    MuscleChain.BICEPS_SCAPULA: ["Biceps", "Shoulders", "Back", "Lats"],
    MuscleChain.GLUTES_LUMBAR: ["Glutes", "Back", "Hips"],
}

check_exhaustive(CHAIN_STRETCH_TAGS, MuscleChain, "CHAIN_STRETCH_TAGS")

# Candidates considered per position, after ranking by coverage
TOP_CANDIDATES = 3


def target_tags(muscle_chains: list[MuscleChain]) -> set[str]:
    """Union of stretch tags for the given chains."""
    tags: set[str] = set()
    for chain in muscle_chains:
        tags.update(CHAIN_STRETCH_TAGS[MuscleChain(chain)])
    return tags


def pick_stretches(
    stretches: list[Stretch],
    muscle_chains: list[MuscleChain],
    rng: random.Random,
) -> list[Stretch]:
    """Choose at most one matching active stretch per body position."""
    targets = target_tags(muscle_chains)
    matching = [
        s for s in stretches
        if s.active and any(mg in targets for mg in s.muscle_groups)
    ]

    selected = []
    for position in POSITION_ORDER:
        candidates = [s for s in matching if s.position == position]
        if not candidates:
            continue
        # Stretches covering more muscles first
        candidates.sort(key=lambda s: len(s.muscle_groups), reverse=True)
        selected.append(rng.choice(candidates[:TOP_CANDIDATES]))
    return selected


class StretchRecommender:
    """Recommends a cooldown for a workout's muscle chains."""

    def __init__(self, store: WorkoutStore, rng: random.Random | None = None):
        self.store = store
        self.rng = rng or random.Random()

    async def recommend(self, muscle_chains: list[MuscleChain]) -> list[Stretch]:
        stretches = await self.store.get_active_stretches()
        return pick_stretches(stretches, muscle_chains, self.rng)


async def get_stretches_for_workout(
    store: WorkoutStore,
    muscle_chains: list[MuscleChain],
    rng: random.Random | None = None,
) -> list[Stretch]:
    """Recommend up to one stretch per position for the given chains."""
    return await StretchRecommender(store, rng).recommend(muscle_chains)
