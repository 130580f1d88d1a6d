"""
Import Script: JSON to database
Loads portfolio content from a JSON document through the repositories, so the
same validation rules as the API apply.

Document shape:
    {"profile": {...}, "skills": [...], "projects": [...],
     "experience": [...], "certificates": [...]}

Usage:
    python migrations/import_portfolio_json.py portfolio.json [--replace]
"""

import os
import sys
import json
import argparse

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.data import profiles, COLLECTIONS
from utils.errors import ValidationError


def import_portfolio(data, replace=False):
    """
    Import portfolio content into the database

    Args:
        data (dict): Parsed JSON document
        replace (bool): Delete existing collection records first

    Returns:
        dict: Number of records imported per section
    """
    counts = {}

    if data.get('profile'):
        profiles.upsert(data['profile'])
        counts['profile'] = 1

    for segment, repository in COLLECTIONS.items():
        records = data.get(segment) or []
        if replace:
            removed = repository.clear()
            print(f"  Removed {removed} existing {segment}")

        imported = 0
        for index, record in enumerate(records):
            try:
                repository.create(record)
                imported += 1
            except ValidationError as e:
                print(f"  [SKIP] {segment}[{index}]: {e.message}")
        counts[segment] = imported
        print(f"  [OK] {imported}/{len(records)} {segment} imported")

    return counts


def main(argv=None):
    """Main import function"""
    parser = argparse.ArgumentParser(description='Import portfolio content from JSON')
    parser.add_argument('json_file', help='Path to the JSON document')
    parser.add_argument('--replace', action='store_true',
                        help='Delete existing skills, projects, experience and certificates first')
    args = parser.parse_args(argv)

    print("=" * 60)
    print("Portfolio JSON Import")
    print("=" * 60)

    if not os.path.exists(args.json_file):
        print(f"Error: {args.json_file} not found!")
        return 1

    with open(args.json_file, 'r', encoding='utf-8') as f:
        data = json.load(f)

    from app import create_app
    app = create_app()
    with app.app_context():
        counts = import_portfolio(data, replace=args.replace)

    print("\n" + "=" * 60)
    print("Import completed: " + ", ".join(f"{k}={v}" for k, v in counts.items()))
    print("=" * 60)
    return 0


if __name__ == '__main__':
    sys.exit(main())
