#!/usr/bin/env python3
"""List, add or seed contacts in the Neo4j phonebook.

  python scripts/phonebook_cli.py                  # list every contact
  python scripts/phonebook_cli.py add "Ada Lovelace" 39-44-5323523
  python scripts/phonebook_cli.py seed             # sample contacts, skips existing names

Run from repo root with .env (NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD).
"""
import argparse
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from dotenv import load_dotenv  # noqa: E402
from neo4j import GraphDatabase  # noqa: E402

from phonebook.application import ContactError, ContactService  # noqa: E402
from phonebook.infrastructure import (  # noqa: E402
    Neo4jContactStore,
    ensure_contact_constraints,
)

load_dotenv(REPO_ROOT / ".env")

SAMPLE_CONTACTS = [
    ("Arto Hellas", "040-123456"),
    ("Ada Lovelace", "39-44-5323523"),
    ("Dan Abramov", "12-43-234345"),
    ("Mary Poppendieck", "39-23-6423122"),
]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("list", help="print every contact")
    add = sub.add_parser("add", help="create one contact")
    add.add_argument("name")
    add.add_argument("number")
    sub.add_parser("seed", help="create the sample contacts")
    return parser


def _seed(service: ContactService) -> None:
    existing = {c.name for c in service.list_contacts()}
    added = 0
    for name, number in SAMPLE_CONTACTS:
        if name in existing:
            continue
        service.create_contact(name, number)
        added += 1
    print(f"Seeded {added} contact(s); {len(SAMPLE_CONTACTS) - added} already present.")


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    driver = GraphDatabase.driver(uri, auth=(user, password))
    try:
        ensure_contact_constraints(driver)
        service = ContactService(Neo4jContactStore(driver))
        if args.command == "add":
            contact = service.create_contact(args.name, args.number)
            print(f"added {contact.name} number {contact.number} to phonebook")
        elif args.command == "seed":
            _seed(service)
        else:
            print("phonebook:")
            for contact in service.list_contacts():
                print(f"{contact.name} - {contact.number}")
        return 0
    except ContactError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        driver.close()


if __name__ == "__main__":
    sys.exit(main())
