#!/usr/bin/env python3
"""
Flight Finder
Reconstructs probable flights from ADS-B events and known airports.

Usage:
    python flight-finder.py
    python flight-finder.py --airports airports.json --events events.txt --output flights.json
    python flight-finder.py --debug  # Debug mode
"""

from flight_finder.cli import main


if __name__ == "__main__":
    main()
