#!/usr/bin/env python3
"""
Script para poblar la base de datos con categorías de ejemplo.

Uso:
    python scripts/seed_data.py
    python scripts/seed_data.py --db data/demo.db
"""
import argparse
import os
import sys

# Agregar el directorio raíz al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from category_tree.db import seed_all
from category_tree.repositories.sqlite.factory import create_sqlite_container


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo categories")
    parser.add_argument("--db", help="SQLite file (default: CATEGORY_DB_PATH)")
    args = parser.parse_args()

    seed_all(create_sqlite_container(args.db))
