"""
Festival line-up optimiser: books acts into venues under budget, time and
placement rules using simulated annealing.
"""

__version__ = "0.1.0"
