"""
Main Execution Script for the Vaccination Allocator.

Usage:
  # Synthetic population, default hubs and hours
  python run_scheduler.py

  # Real people list, custom intervals and hubs, JSON export
  python run_scheduler.py --people people.csv --breaks 40 60 80 \
      --hub "Fiera:4:5:2" --hub "Stadio:2:3:1" --hours 8 8 8 8 8 4 0 --export week.json
"""

import os
import sys
import json
import logging
import argparse
from pathlib import Path

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from generators.data_factory import PopulationGenerator
from scheduler import VaccinationCampaign, PeopleLoader, VaccinationError

logger = logging.getLogger("Main")

# --- CONFIGURATION ---
DEFAULT_BREAKS = [40, 50, 60, 70, 80]
DEFAULT_HOURS = [10, 10, 10, 10, 10, 6, 0]
DEFAULT_HUBS = ["Fiera:4:5:2", "Stadio:2:3:1"]
SYNTHETIC_PEOPLE = 2000
SYNTHETIC_SEED = 42
# ---------------------


def parse_hub(text: str):
    """'NAME:DOCTORS:NURSES:OTHER' -> (name, (d, n, o))"""
    parts = text.split(":")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"Hub must be NAME:DOCTORS:NURSES:OTHER, got {text!r}")
    name, *staff = parts
    try:
        return name, tuple(int(s) for s in staff)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Staff counts must be integers in {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weekly vaccination slot allocation")
    parser.add_argument("--people", type=Path, help="CSV with header SSN,LAST,FIRST,YEAR")
    parser.add_argument("--synthetic", type=int, default=SYNTHETIC_PEOPLE,
                        help="Synthetic people to generate when --people is not given")
    parser.add_argument("--seed", type=int, default=SYNTHETIC_SEED)
    parser.add_argument("--breaks", type=int, nargs="*", default=DEFAULT_BREAKS)
    parser.add_argument("--hours", type=int, nargs="+", default=DEFAULT_HOURS)
    parser.add_argument("--hub", type=parse_hub, action="append", dest="hubs",
                        help="Repeatable, NAME:DOCTORS:NURSES:OTHER")
    parser.add_argument("--year", type=int, default=None, help="Reference year for ages")
    parser.add_argument("--export", type=Path, help="Write the weekly plan as JSON")
    parser.add_argument("--verbose", action="store_true")
    return parser


def export_week_data(campaign: VaccinationCampaign, week, filename: Path) -> None:
    """
    Serializes the allocation state into a JSON document.
    """
    logger.info(f"💾 Exporting weekly plan to {filename}...")

    data = {
        "year": campaign.current_year,
        "intervals": campaign.get_age_intervals(),
        "available": campaign.get_available(),
        "week": week,
        "statistics": campaign.stats.summary(),
    }

    with open(filename, 'w') as f:
        json.dump(data, f, indent=2)
    logger.info("✅ Weekly plan exported.")


def load_rejected(line_number: int, line: str) -> None:
    print(f"  ⚠️ line {line_number}: {line}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    campaign = VaccinationCampaign(current_year=args.year)

    try:
        # --- PHASE 1: PEOPLE (CSV vs. Synthetic) ---
        if args.people:
            loaded = PeopleLoader(campaign, on_error=load_rejected).load_path(args.people)
            logger.info(f"📂 {loaded} people loaded from {args.people}")
        else:
            generator = PopulationGenerator(seed=args.seed)
            campaign.add_people(generator.generate_people(args.synthetic, campaign.current_year))

        # --- PHASE 2: CAMPAIGN SETUP ---
        campaign.set_age_intervals(*args.breaks)
        campaign.set_hours(*args.hours)
        for name, staff in args.hubs or [parse_hub(h) for h in DEFAULT_HUBS]:
            campaign.configure_hub(name, staff)
    except (VaccinationError, OSError) as e:
        logger.error(f"❌ Invalid setup: {e}")
        return 1

    # --- PHASE 3: ALLOCATION ---
    week = campaign.week_allocate()

    # --- PHASE 4: REPORTING ---
    stats = campaign.stats.summary()

    print("\n" + "=" * 50)
    print("📊 WEEKLY ALLOCATION REPORT")
    print("=" * 50)
    print(f"People registered:   {stats['total_people']}")
    print(f"People allocated:    {stats['allocated_people']} ({stats['proportion_allocated']:.1%})")
    print("\nDistribution by age interval:")
    for label, share in stats["distribution_of_allocated"].items():
        print(f"  {label:>10}  {share:.1%}")
    print("\nDaily allocations per hub:")
    for hub, days in stats["hub_daily_allocations"].items():
        print(f"  {hub:<12} {days}")

    if args.export:
        export_week_data(campaign, week, args.export)

    return 0


if __name__ == "__main__":
    sys.exit(main())
