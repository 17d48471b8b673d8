import json
import os
from dataclasses import dataclass
from datetime import datetime
from typing import List

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


@dataclass
class SearchState:
    """Represents one iteration of the search"""
    iteration: int
    running_value: int
    best_value: int
    temperature: float
    move_description: str
    is_feasible: bool
    is_accepted: bool
    is_best: bool


class SimulatedAnnealingLogger:
    """Logger for capturing search states during simulated annealing"""

    def __init__(self, log_every_n_iterations: int = 1):
        self.states: List[SearchState] = []
        self.log_every_n_iterations = log_every_n_iterations
        self.iteration_count = 0

    def log_state(self,
                  running_value: int,
                  best_value: int,
                  temperature: float,
                  move_description: str,
                  is_feasible: bool,
                  is_accepted: bool,
                  is_best: bool):
        """Log a search state"""

        self.iteration_count += 1

        # Only log every n iterations to avoid too much data, but always keep new bests
        if self.iteration_count % self.log_every_n_iterations != 0 and not is_best:
            return

        self.states.append(SearchState(
            iteration=self.iteration_count,
            running_value=running_value,
            best_value=best_value,
            temperature=temperature,
            move_description=move_description,
            is_feasible=is_feasible,
            is_accepted=is_accepted,
            is_best=is_best
        ))

    def iterations(self) -> np.ndarray:
        return np.array([s.iteration for s in self.states], dtype=int)

    def running_values(self) -> np.ndarray:
        return np.array([s.running_value for s in self.states], dtype=np.int64)

    def best_values(self) -> np.ndarray:
        return np.array([s.best_value for s in self.states], dtype=np.int64)

    def acceptance_rate(self) -> float:
        if not self.states:
            return 0.0
        return float(np.mean([s.is_accepted for s in self.states]))

    def feasibility_rate(self) -> float:
        if not self.states:
            return 0.0
        return float(np.mean([s.is_feasible for s in self.states]))

    def create_plot(self, output_path: str = None):
        """Plot the running and best value over the iterations"""
        if not self.states:
            print("No states logged!")
            return None

        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = os.path.join("output", f"search_trace_{timestamp}.png")
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        x = self.iterations()
        fig, ax = plt.subplots(figsize=(12, 6))
        ax.plot(x, self.running_values(), color='tab:blue', linewidth=1, alpha=0.7, label='Running value')
        ax.plot(x, self.best_values(), color='tab:red', linewidth=2, label='Best value')

        best_x = [s.iteration for s in self.states if s.is_best]
        best_y = [s.best_value for s in self.states if s.is_best]
        ax.scatter(best_x, best_y, color='tab:red', s=15, zorder=3)

        ax.set_xlabel('Iteration')
        ax.set_ylabel('Net value ($)')
        ax.set_title(f'Simulated annealing (T = {self.states[0].temperature}), '
                     f'accepted {self.acceptance_rate():.1%}, feasible {self.feasibility_rate():.1%}')
        ax.grid(True, alpha=0.3)
        ax.legend(loc='lower right')
        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
        plt.close(fig)

        print(f"Search trace saved to {output_path}")
        return output_path

    def save_log(self, filepath: str):
        """Save the log data to a JSON file"""
        data = []
        for state in self.states:
            data.append({
                'iteration': state.iteration,
                'running_value': state.running_value,
                'best_value': state.best_value,
                'temperature': state.temperature,
                'move': state.move_description,
                'is_feasible': state.is_feasible,
                'is_accepted': state.is_accepted,
                'is_best': state.is_best
            })

        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def load_log(filepath: str) -> 'SimulatedAnnealingLogger':
        """Load log data from a JSON file"""
        logger = SimulatedAnnealingLogger()

        with open(filepath, 'r') as f:
            data = json.load(f)

        for item in data:
            logger.states.append(SearchState(
                iteration=item['iteration'],
                running_value=item['running_value'],
                best_value=item['best_value'],
                temperature=item['temperature'],
                move_description=item['move'],
                is_feasible=item['is_feasible'],
                is_accepted=item['is_accepted'],
                is_best=item['is_best']
            ))
        logger.iteration_count = logger.states[-1].iteration if logger.states else 0

        return logger
