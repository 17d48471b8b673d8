from pathlib import Path

# Defaults for a run, the CLI flags in main.py override them.

DEFAULT_FESTIVAL_PATH = Path(__file__).resolve().parent / "data" / "default_festival.json"

DEFAULT_ITERATIONS = 1000
DEFAULT_TEMPERATURE = 0.5
DEFAULT_BUDGET = 1_370_000
DEFAULT_SEED = 13062025
DEFAULT_REPORT_EVERY = 1

# (break_duration, capacity_duration, start "HH:MM") per venue, used when a
# festival file leaves out its venues and by the --test data generator
DEFAULT_VENUES = {
    "tent": (15, 300, "17:00"),
    "amphitheater": (30, 360, "16:00"),
    "stadium": (30, 360, "18:00"),
}
