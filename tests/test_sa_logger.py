import os
import tempfile
import unittest

from econochella.util.sa_logger import SimulatedAnnealingLogger


class TestSimulatedAnnealingLogger(unittest.TestCase):

    def setUp(self):
        self.logger = SimulatedAnnealingLogger(log_every_n_iterations=3)
        # (running, best, feasible, accepted, is_best)
        steps = [
            (100, 100, True, True, True),
            (100, 100, False, False, False),
            (80, 100, True, True, False),
            (150, 150, True, True, True),
            (150, 150, False, False, False),
            (150, 150, True, False, False),
        ]
        for running, best, is_feasible, is_accepted, is_best in steps:
            self.logger.log_state(running, best, 0.5, "Move", is_feasible, is_accepted, is_best)

    def test_every_nth_state_and_new_bests_are_kept(self):
        self.assertEqual(self.logger.iteration_count, 6)
        self.assertEqual(list(self.logger.iterations()), [1, 3, 4, 6])
        self.assertEqual(list(self.logger.best_values()), [100, 100, 150, 150])

    def test_rates(self):
        self.assertAlmostEqual(self.logger.acceptance_rate(), 0.75)
        self.assertAlmostEqual(self.logger.feasibility_rate(), 1.0)
        self.assertEqual(SimulatedAnnealingLogger().acceptance_rate(), 0.0)

    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "history.json")
            self.logger.save_log(path)
            loaded = SimulatedAnnealingLogger.load_log(path)

        self.assertEqual(loaded.states, self.logger.states)
        self.assertEqual(loaded.iteration_count, 6)

    def test_plot(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "plots", "trace.png")
            self.assertEqual(self.logger.create_plot(path), path)
            self.assertTrue(os.path.exists(path))

    def test_plot_without_states(self):
        self.assertIsNone(SimulatedAnnealingLogger().create_plot())


if __name__ == '__main__':
    unittest.main()
