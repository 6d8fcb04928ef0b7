import random

from config import RANDOM_SEED

LOCALITY_PROBABILITY = 0.8
MIN_LOCALITY_RUN = 5
MAX_LOCALITY_RUN = 20
MAX_LOCALITY_OFFSET = 4


class AccessPatternGenerator:
    """
    Generates page references with spatial locality.

    Most references land a few pages past a locality center that moves every
    5-20 references; the rest are uniform over the whole process. Each call to
    generate() starts over from the seed, so results are reproducible.
    """

    def __init__(self, seed=RANDOM_SEED):
        self.seed = seed

    def generate(self, num_pages, num_accesses):
        if num_pages < 1:
            raise ValueError(f"Process must have at least one page, got {num_pages}")

        rng = random.Random(self.seed)
        last_page = num_pages - 1
        accesses = []

        current_locality = 0
        locality_counter = 0

        for _ in range(num_accesses):
            # Working set moves
            if locality_counter == 0:
                current_locality = rng.randint(0, last_page)
                locality_counter = rng.randint(MIN_LOCALITY_RUN, MAX_LOCALITY_RUN)
            locality_counter -= 1

            if rng.random() < LOCALITY_PROBABILITY:
                offset = rng.randint(0, min(MAX_LOCALITY_OFFSET, last_page))
                accesses.append(min(current_locality + offset, last_page))
            else:
                accesses.append(rng.randint(0, last_page))

        return accesses
