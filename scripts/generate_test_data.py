#!/usr/bin/env python3
"""
Generate test airport and ADS-B event files.

Creates an airports.json and an events.txt that flight-finder can read,
with aircraft flying multi-leg itineraries between major US airports.
Useful for manual runs and for checking segmentation on large datasets.

Features:
- Curved flight paths using quadratic Bezier curves (not straight lines)
- Realistic altitude profiles (climb, cruise, descend) in feet
- Ground time between legs so stop-overs show up as descent + climb
- A share of reports without position or altitude, like real receivers
- Events written in shuffled order; flight-finder sorts them itself
"""

import json
import random
import datetime
import argparse
from pathlib import Path

# Airport coordinates and elevation in feet
AIRPORTS = {
    "KSEA": (47.4490, -122.3093, 433),  # Seattle
    "KPDX": (45.5887, -122.5975, 31),  # Portland
    "KSFO": (37.6190, -122.3749, 13),  # San Francisco
    "KLAX": (33.9425, -118.4081, 128),  # Los Angeles
    "KDEN": (39.8617, -104.6731, 5434),  # Denver
    "KSLC": (40.7884, -111.9778, 4227),  # Salt Lake City
    "KPHX": (33.4343, -112.0116, 1135),  # Phoenix
    "KBOI": (43.5644, -116.2228, 2871),  # Boise
}

REPORT_INTERVAL_SECONDS = 30


def generate_leg(start, end, start_time, num_points=120):
    """Generate the reports of one leg between two airports.

    Returns a list of (timestamp, lat, lon, alt) tuples.
    """
    lat1, lon1, elev1 = start
    lat2, lon2, elev2 = end

    cruise_alt = random.randint(25000, 38000)

    # Offset the midpoint perpendicular to the flight path to create curves
    offset_factor = random.uniform(0.1, 0.3) * random.choice([-1, 1])
    mid_lat = (lat1 + lat2) / 2 - (lon2 - lon1) * offset_factor
    mid_lon = (lon1 + lon2) / 2 + (lat2 - lat1) * offset_factor

    reports = []
    for i in range(num_points):
        t = i / (num_points - 1)

        # B(t) = (1-t)^2 * P0 + 2(1-t)t * P1 + t^2 * P2
        lat = (1 - t) ** 2 * lat1 + 2 * (1 - t) * t * mid_lat + t**2 * lat2
        lon = (1 - t) ** 2 * lon1 + 2 * (1 - t) * t * mid_lon + t**2 * lon2

        if t < 0.25:  # Climb
            alt = elev1 + (cruise_alt - elev1) * (t / 0.25)
        elif t > 0.75:  # Descend
            alt = elev2 + (cruise_alt - elev2) * ((1 - t) / 0.25)
        else:  # Cruise
            alt = cruise_alt + random.randint(-100, 100)

        timestamp = start_time + datetime.timedelta(seconds=i * REPORT_INTERVAL_SECONDS)
        reports.append((timestamp, lat, lon, round(alt)))

    return reports


def generate_ground_time(airport, start_time, num_points=20):
    """Reports while parked, at airport elevation."""
    lat, lon, elev = airport
    return [
        (
            start_time + datetime.timedelta(seconds=i * REPORT_INTERVAL_SECONDS),
            lat + random.uniform(-0.002, 0.002),
            lon + random.uniform(-0.002, 0.002),
            elev,
        )
        for i in range(num_points)
    ]


def generate_aircraft_events(identifier, num_legs, start_time, gap_ratio):
    """Generate all event records for one aircraft."""
    airport_list = list(AIRPORTS.keys())
    current = random.choice(airport_list)
    reports = []

    for leg in range(num_legs):
        destination = random.choice([a for a in airport_list if a != current])
        leg_reports = generate_leg(AIRPORTS[current], AIRPORTS[destination], start_time)
        reports.extend(leg_reports)
        start_time = leg_reports[-1][0] + datetime.timedelta(seconds=REPORT_INTERVAL_SECONDS)

        if leg < num_legs - 1:
            ground = generate_ground_time(AIRPORTS[destination], start_time)
            reports.extend(ground)
            start_time = ground[-1][0] + datetime.timedelta(seconds=REPORT_INTERVAL_SECONDS)

        current = destination

    records = []
    for timestamp, lat, lon, alt in reports:
        record = {
            "identifier": identifier,
            "timestamp": timestamp.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "latitude": round(lat, 5),
            "longitude": round(lon, 5),
            "altitude": alt,
        }
        roll = random.random()
        if roll < gap_ratio / 2:
            record["latitude"] = None
            record["longitude"] = None
        elif roll < gap_ratio:
            record["altitude"] = None
        records.append(record)

    return records


def main():
    """Generate test airport and event files."""
    parser = argparse.ArgumentParser(
        description="Generate test airports.json and events.txt for flight-finder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100 aircraft (default) into Resources/
  %(prog)s

  # 1000 aircraft with up to 4 legs each
  %(prog)s 1000 --max-legs 4

  # Then run
  flight-finder --airports Resources/airports.json --events Resources/events.txt
        """,
    )
    parser.add_argument(
        "count",
        type=int,
        nargs="?",
        default=100,
        help="Number of aircraft to generate (default: 100)",
    )
    parser.add_argument(
        "--max-legs",
        type=int,
        default=3,
        help="Maximum legs per aircraft (default: 3)",
    )
    parser.add_argument(
        "--gap-ratio",
        type=float,
        default=0.05,
        help="Share of reports missing position or altitude (default: 0.05)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="Resources",
        help="Output directory (default: Resources)",
    )
    args = parser.parse_args()

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    airports = [
        {"identifier": ident, "latitude": lat, "longitude": lon, "elevation": elev}
        for ident, (lat, lon, elev) in AIRPORTS.items()
    ]
    with open(output_dir / "airports.json", "w") as f:
        json.dump(airports, f, indent=2)

    print(f"Generating {args.count:,} aircraft in {output_dir}/")

    all_records = []
    total_legs = 0
    for i in range(args.count):
        identifier = f"{random.randint(0, 0xFFFFFF):06X}"
        num_legs = random.randint(1, args.max_legs)
        start_time = datetime.datetime(
            2026, random.randint(1, 12), random.randint(1, 28), random.randint(5, 12), random.randint(0, 59)
        )
        records = generate_aircraft_events(identifier, num_legs, start_time, args.gap_ratio)
        all_records.extend(records)
        total_legs += num_legs

    random.shuffle(all_records)

    with open(output_dir / "events.txt", "w") as f:
        for record in all_records:
            f.write(json.dumps(record) + "\n")

    print(f"\n✓ Wrote {len(airports)} airports and {len(all_records):,} events ({total_legs:,} legs)")
    print("\nTo find the flights, run:")
    print(f"  flight-finder --airports {output_dir}/airports.json --events {output_dir}/events.txt")


if __name__ == "__main__":
    main()
