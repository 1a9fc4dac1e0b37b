#!/usr/bin/env python3
"""
Seed script: creates the classic villas via the API (no direct DB).
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --base-url http://localhost:8000/api
"""

import argparse

import httpx

API_BASE = "http://localhost:8000/api"

VILLAS = [
    {"name": "Pool View", "occupancy": 4, "sqft": 100},
    {"name": "Beach View", "occupancy": 3, "sqft": 100},
]


def main():
    ap = argparse.ArgumentParser(description="Seed villas via API")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        for villa in VILLAS:
            try:
                r = client.post("/VillaAPI", json=villa)
                if r.status_code == 201:
                    created += 1
                    print(f"  Created {villa['name']} (id={r.json()['result']['id']})")
                elif r.status_code == 400:
                    # Duplicate name: already seeded
                    print(f"  Skipped {villa['name']}: {r.json().get('errorMessages')}")
                else:
                    errors.append(f"Villa {villa['name']}: {r.status_code} {r.text[:80]}")
            except httpx.HTTPError as e:
                errors.append(f"Villa {villa['name']}: {e}")

    print(f"\nDone. Villas created: {created}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors:
            print("  ", e)


if __name__ == "__main__":
    main()
