"""
Local search optimization module for festival line-ups.
Includes simulated annealing and supporting components.
"""

from econochella.local_search.simulated_annealing import simulated_annealing, run_local_search
from econochella.local_search.move import Move, do_move
from econochella.local_search.move_generator import generate_random_move, choose_placement
from econochella.local_search.rules_engine import feasible, get_violations, calculate_value

__all__ = [
    'simulated_annealing',
    'run_local_search',
    'Move',
    'do_move',
    'generate_random_move',
    'choose_placement',
    'feasible',
    'get_violations',
    'calculate_value',
]
