import random
import unittest

from econochella.base_model.act import Act
from econochella.base_model.festival import Festival
from econochella.base_model.placement import Placement
from econochella.base_model.venue import Venue
from econochella.local_search.move import Move, do_move
from econochella.local_search.move_generator import generate_random_move


def build_venues() -> dict:
    return {
        Placement.TENT: Venue("tent", 15, 300, 17 * 60),
        Placement.AMPHITHEATER: Venue("amphitheater", 30, 360, 16 * 60),
        Placement.STADIUM: Venue("stadium", 30, 360, 18 * 60),
    }


class TestFestival(unittest.TestCase):

    def setUp(self):
        self.acts = [
            Act("The Bionic Men", 60, 300_000, 100_000),
            Act("Infu$ion", 50, 100_000, 65_000),
            Act("Infu$ion", 50, 100_000, 65_000),
            Act("Sonderbund", 70, 600_000, 120_000),
            Act("Forgotten Indigo", 30, 50_000, 0),
        ]
        self.festival = Festival(self.acts, build_venues(), budget=1_000_000)

    def test_all_acts_start_unplaced(self):
        self.assertTrue(all(p is Placement.UNPLACED for p in self.festival.placements))
        self.assertEqual(self.festival.planned_acts(), [])
        self.assertEqual(len(self.festival.unplanned_acts()), 5)

    def test_empty_catalogue_is_rejected(self):
        with self.assertRaises(ValueError):
            Festival([], build_venues(), budget=100)

    def test_missing_venue_is_rejected(self):
        venues = build_venues()
        del venues[Placement.STADIUM]
        with self.assertRaises(ValueError):
            Festival(self.acts, venues, budget=100)

    def test_festivals_from_same_venues_are_independent(self):
        venues = build_venues()
        first = Festival(self.acts, venues, budget=1_000_000)
        first.place_act(0, Placement.TENT)
        second = Festival(self.acts, venues, budget=1_000_000)

        self.assertEqual(venues[Placement.TENT].slots, [])
        self.assertEqual(second.venues[Placement.TENT].slots, [])
        second.check_consistency()
        first.check_consistency()

    def test_booked_venue_is_rejected(self):
        venues = build_venues()
        venues[Placement.STADIUM].insert_act_at(self.acts[0], 0)
        with self.assertRaises(ValueError):
            Festival(self.acts, venues, budget=1_000_000)

    def test_rules_default_to_empty(self):
        self.assertEqual(self.festival.rules, ())
        self.assertEqual(Festival(self.acts, build_venues(), budget=1, rules=None).rules, ())

    def test_move_between_venues(self):
        self.festival.place_act(0, Placement.TENT)
        self.festival.place_act(3, Placement.TENT)
        self.festival.place_act(0, Placement.STADIUM)

        self.assertEqual(self.festival.venues[Placement.TENT].act_names(), ["Sonderbund"])
        self.assertEqual(self.festival.venues[Placement.STADIUM].act_names(), ["The Bionic Men"])
        self.assertEqual(self.festival.placement_of("The Bionic Men"), Placement.STADIUM)
        self.festival.check_consistency()

    def test_move_to_unplaced_removes_act(self):
        self.festival.place_act(3, Placement.AMPHITHEATER)
        self.festival.place_act(3, Placement.UNPLACED)

        self.assertEqual(self.festival.venues[Placement.AMPHITHEATER].slots, [])
        self.assertIs(self.festival.placements[3], Placement.UNPLACED)
        self.festival.check_consistency()

    def test_move_to_same_venue_keeps_a_single_copy(self):
        rng = random.Random(7)
        self.festival.place_act(0, Placement.TENT)
        self.festival.place_act(3, Placement.TENT)

        for _ in range(20):
            self.festival.move_act(3, Placement.TENT, rng)
            self.assertEqual(sorted(self.festival.venues[Placement.TENT].act_names()), ["Sonderbund", "The Bionic Men"])
            self.festival.check_consistency()

    def test_duplicates_are_tracked_independently(self):
        self.festival.place_act(1, Placement.STADIUM)
        self.festival.place_act(2, Placement.TENT)

        self.assertEqual(self.festival.placements_of("Infu$ion"), [Placement.STADIUM, Placement.TENT])
        self.festival.place_act(2, Placement.UNPLACED)
        self.assertEqual(self.festival.placements_of("Infu$ion"), [Placement.STADIUM, Placement.UNPLACED])
        self.festival.check_consistency()

    def test_random_moves_keep_every_act_in_exactly_one_place(self):
        """
        Every act instance is either unplaced or in exactly one venue program, after every move.
        """
        rng = random.Random(13062025)
        for i in range(1000):
            move = generate_random_move(self.festival, rng)
            do_move(move, self.festival, rng)
            try:
                self.festival.check_consistency()
            except ValueError as e:
                self.fail(f"Iteration {i}, {move}: {e}")

        total_in_programs = sum(venue.number_of_acts() for venue in self.festival.venues.values())
        self.assertEqual(total_in_programs, len(self.festival.planned_acts()))

    def test_clone_is_independent(self):
        self.festival.place_act(0, Placement.TENT)
        clone = self.festival.clone()
        clone.place_act(3, Placement.TENT)
        clone.place_act(0, Placement.UNPLACED)

        self.assertEqual(self.festival.venues[Placement.TENT].act_names(), ["The Bionic Men"])
        self.assertIs(self.festival.placements[0], Placement.TENT)
        self.assertIs(self.festival.placements[3], Placement.UNPLACED)
        self.festival.check_consistency()
        clone.check_consistency()

    def test_choose_act_stays_in_range(self):
        rng = random.Random(1)
        indices = {self.festival.choose_act(rng)[0] for _ in range(200)}
        self.assertEqual(indices, set(range(len(self.acts))))

    def test_get_venue_of_unplaced_raises(self):
        with self.assertRaises(ValueError):
            self.festival.get_venue(Placement.UNPLACED)
        self.assertEqual(self.festival.get_schedule(Placement.UNPLACED), [])

    def test_unknown_act_lookup_raises(self):
        with self.assertRaises(ValueError):
            self.festival.index_of("Nobody")

    def test_do_move_checks_old_placement(self):
        rng = random.Random(3)
        move = Move(0, Placement.TENT, Placement.STADIUM)
        with self.assertRaises(ValueError):
            do_move(move, self.festival, rng)

    def test_to_json(self):
        self.festival.place_act(4, Placement.AMPHITHEATER)
        data = self.festival.to_json()

        self.assertEqual(data["cost"], 0)
        self.assertEqual(data["venues"]["amphitheater"]["program"], [{"act": "Forgotten Indigo", "start_time": 0}])
        self.assertEqual(len(data["unplaced"]), 4)


if __name__ == '__main__':
    unittest.main()
