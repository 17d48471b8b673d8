import math
import random
from typing import Optional

from econochella.base_model.festival import Festival
from econochella.config import DEFAULT_ITERATIONS, DEFAULT_TEMPERATURE, DEFAULT_REPORT_EVERY
from econochella.local_search.move import do_move
from econochella.local_search.move_generator import generate_random_move
from econochella.local_search.rules_engine import feasible, calculate_value, validate_rules
from econochella.util.sa_logger import SimulatedAnnealingLogger


def _accept_move(delta: int, temperature: float, rng: random.Random) -> bool:
    """
    Metropolis criterion. Improvements are always taken, a loss of `delta`
    is taken with probability exp(delta / temperature).
    """
    if delta > 0:
        return True
    return rng.random() < math.exp(delta / temperature)


def simulated_annealing(festival: Festival, iterations: int, temperature: float,
                        rng: Optional[random.Random] = None,
                        report_every: int = DEFAULT_REPORT_EVERY,
                        log_file_path: str = None,
                        sa_logger: Optional[SimulatedAnnealingLogger] = None) -> Festival:
    """
    Random walk over line-ups with a fixed temperature and a fixed number of iterations.

    Each iteration moves one random act to a random placement on a copy of the
    running line-up. Infeasible copies are thrown away. Feasible ones replace the
    running line-up according to the Metropolis criterion.

    Args:
        festival: Starting line-up, it is not modified
        iterations: Number of proposed moves
        temperature: Constant temperature, higher accepts more losses
        rng: Source of all random draws, seed it for reproducible runs
        report_every: Print the running value every n iterations (0 disables)
        log_file_path: Also write the progress lines to this file
        sa_logger: Records every iteration for later analysis

    Returns:
        The best feasible line-up seen
    """
    if iterations < 0:
        raise ValueError(f"Number of iterations must be non-negative, got {iterations}")
    if temperature <= 0:
        raise ValueError(f"Temperature must be positive, got {temperature}")
    validate_rules(festival.rules, festival.acts)

    if rng is None:
        rng = random.Random()

    # Open log file if path is provided
    log_file = None
    if log_file_path:
        log_file = open(log_file_path, 'w')

    # Custom log function to write to both console and file
    def log_output(message):
        print(message)
        if log_file:
            log_file.write(message + "\n")
            log_file.flush()

    try:
        running = festival.clone()
        running_value = calculate_value(running)
        best = running.clone()
        best_value = running_value

        moves_accepted = 0
        moves_infeasible = 0

        if report_every:
            log_output(f"Starting simulated annealing with parameters:")
            log_output(f"Iterations: {iterations}")
            log_output(f"Temperature: {temperature}")
            log_output(f"Budget: {festival.budget}")
            log_output(f"Acts: {len(festival.acts)}, Rules: {len(festival.rules)}")
            log_output(f"Initial value: {running_value}")

        for iteration in range(1, iterations + 1):
            candidate = running.clone()
            move = generate_random_move(candidate, rng)
            do_move(move, candidate, rng)

            is_feasible = feasible(candidate)
            is_accepted = False
            if is_feasible:
                candidate_value = calculate_value(candidate)
                delta = candidate_value - running_value
                if _accept_move(delta, temperature, rng): # accept move
                    running = candidate
                    running_value = candidate_value
                    is_accepted = True
                    moves_accepted += 1
            else: # reject, running stays as it is
                moves_infeasible += 1

            is_best = running_value > best_value
            if is_best:
                best = running.clone()
                best_value = running_value

            if sa_logger is not None:
                sa_logger.log_state(running_value, best_value, temperature, str(move), is_feasible, is_accepted, is_best)

            if report_every and iteration % report_every == 0:
                log_output(f"Iteration: {iteration}, Running: {running_value}, Best: {best_value}"
                           f"{' - New best!' if is_best else ''}")

        best.check_consistency()

        if report_every:
            log_output(f"Accepted: {moves_accepted}/{iterations}, Infeasible: {moves_infeasible}/{iterations}")
            log_output(f"Final value: {best_value}")
    finally:
        if log_file:
            log_file.close()

    return best


def run_local_search(festival: Festival, log_file_path: str = None,
                     iterations: int = DEFAULT_ITERATIONS,
                     temperature: float = DEFAULT_TEMPERATURE,
                     seed: Optional[int] = None,
                     report_every: int = DEFAULT_REPORT_EVERY,
                     sa_logger: Optional[SimulatedAnnealingLogger] = None) -> Festival:
    rng = random.Random(seed)

    optimized_festival = simulated_annealing(
        festival,
        iterations=iterations,
        temperature=temperature,
        rng=rng,
        report_every=report_every,
        log_file_path=log_file_path,
        sa_logger=sa_logger
    )

    return optimized_festival
