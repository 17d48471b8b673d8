import unittest

from econochella.base_model.placement import Placement
from econochella.util.data_generator import generate_test_data, generate_test_data_parsed, DURATION_WEIGHTS
from econochella.util.parser import parse_data


class TestDataGenerator(unittest.TestCase):

    def test_same_seed_same_catalogue(self):
        self.assertEqual(generate_test_data(30, seed=5), generate_test_data(30, seed=5))
        self.assertNotEqual(generate_test_data(30, seed=5), generate_test_data(30, seed=6))

    def test_acts_are_well_formed(self):
        data = generate_test_data(200)
        durations = {d for d, _ in DURATION_WEIGHTS}

        self.assertGreaterEqual(len(data["acts"]), 200)
        for act in data["acts"]:
            self.assertIn(act["duration"], durations)
            self.assertGreaterEqual(act["cost"], 0)
            self.assertGreaterEqual(act["revenue"], 0)

    def test_duplicates(self):
        without = generate_test_data(50, duplicate_probability=0.0)
        self.assertEqual(len(without["acts"]), 50)

        every = generate_test_data(50, duplicate_probability=1.0)
        self.assertEqual(len(every["acts"]), 100)
        self.assertEqual(every["acts"][0], every["acts"][1])

    def test_output_is_a_valid_festival_file(self):
        parsed = parse_data(generate_test_data(20))
        self.assertGreaterEqual(len(parsed["acts"]), 20)
        self.assertEqual(set(parsed["venues"]), set(Placement.venues()))

    def test_parsed(self):
        parsed = generate_test_data_parsed(10, seed=1)
        self.assertEqual(parsed["rules"], [])
        self.assertEqual(set(parsed["venues"]), set(Placement.venues()))
        self.assertEqual(parsed["acts"][0].name, generate_test_data(10, seed=1)["acts"][0]["name"])

        with self.assertRaises(ValueError):
            generate_test_data_parsed(0)


if __name__ == '__main__':
    unittest.main()
