#!/usr/bin/env python3
"""
Script to add a property through the add property form endpoint
Usage: python scripts/submit_property.py --title "Example title" --asking-price "$100"
"""

import argparse
import os
import sys
from datetime import datetime

import requests

FIELDS = [
    ("title", "--title"),
    ("askingPrice", "--asking-price"),
    ("description", "--description"),
    ("address", "--address"),
    ("img", "--img"),
]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Add a property listing")
    for name, flag in FIELDS:
        parser.add_argument(flag, dest=name, default="")
    return parser.parse_args(argv)


def submit_property(fields: dict) -> bool:
    """Post the form fields and report whether the property was created"""

    api_url = os.getenv('APP_URL', 'http://localhost:8000')
    endpoint = f"{api_url}/add-property"

    try:
        response = requests.post(endpoint, data=fields, allow_redirects=False, timeout=30)

        if response.status_code == 303 and response.headers.get("location") == "/":
            print(f"[{datetime.now()}] ✅ Property created: {fields['title']!r}")
            return True

        try:
            detail = response.json().get("error", response.text)
        except ValueError:
            detail = response.text
        print(f"[{datetime.now()}] ❌ Property not created (status {response.status_code}): {detail}")
        return False

    except requests.exceptions.RequestException as e:
        print(f"[{datetime.now()}] ❌ Error submitting property: {str(e)}")
        return False


if __name__ == "__main__":
    args = parse_args()
    success = submit_property({name: getattr(args, name) for name, _ in FIELDS})
    sys.exit(0 if success else 1)
