import random
from typing import Any, Dict

from econochella.base_model.act import Act
from econochella.util.parser import parse_venues
from econochella.config import DEFAULT_BUDGET, DEFAULT_TEMPERATURE

# (duration in minutes, probability), roughly the spread of the reference catalogue
DURATION_WEIGHTS = [(30, 0.1), (40, 0.1), (50, 0.15), (60, 0.3), (70, 0.15), (80, 0.08), (90, 0.1), (100, 0.02)]

ACT_NAME_PARTS = (
    ["The", "DJ", "Lil", "Big", "Electric", "Silent", "Velvet", "Neon", "Rusty", "Golden"],
    ["Falcons", "Monkeys", "Anthem", "Project", "Revenge", "Indigo", "Sloths", "Coccyx", "Buzz", "Dynamite"],
)


def generate_test_data(n_acts: int, seed: int = 13062025, duplicate_probability: float = 0.1) -> Dict[str, Any]:
    """
    Generate a random act catalogue in the same JSON shape as a festival file.
    Some acts are duplicated to exercise duplicate handling.
    """
    gen = random.Random(seed) # With a fix a seed for reproducibility

    durations = [d for d, _ in DURATION_WEIGHTS]
    probs = [p for _, p in DURATION_WEIGHTS]

    acts = []
    for i in range(n_acts):
        name = f"{gen.choice(ACT_NAME_PARTS[0])} {gen.choice(ACT_NAME_PARTS[1])} {i + 1}"
        duration = gen.choices(durations, weights=probs, k=1)[0]
        cost = gen.randint(0, 35) * 10_000
        # most acts earn more than they cost, a few are loss makers
        revenue = max(0, cost + gen.randint(-5, 60) * 10_000)
        act = {"name": name, "duration": duration, "revenue": revenue, "cost": cost}
        acts.append(act)

        if gen.random() < duplicate_probability:
            acts.append(dict(act))

    return {
        "budget": DEFAULT_BUDGET,
        "temperature": DEFAULT_TEMPERATURE,
        "venues": [],
        "acts": acts,
        "rules": [],
    }


def generate_test_data_parsed(n_acts: int, seed: int = 13062025, duplicate_probability: float = 0.1) -> Dict[str, Any]:
    """Same as generate_test_data, but with Act and Venue objects like parse_input returns"""
    if n_acts <= 0:
        raise ValueError(f"Number of acts must be positive, got {n_acts}")

    data = generate_test_data(n_acts, seed, duplicate_probability)
    return {
        "budget": data["budget"],
        "temperature": data["temperature"],
        "acts": [Act(**act) for act in data["acts"]],
        "venues": parse_venues(data["venues"]),
        "rules": [],
    }
