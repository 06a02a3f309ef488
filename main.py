"""CLI entrypoint for the Vehicle Prototype Lab."""

from __future__ import annotations

import sys

from vehicle_lab.config import load_catalog
from vehicle_lab.logging_config import setup_logging
from vehicle_lab.session import VehicleSession


def main() -> None:
    """Run an interactive vehicle build session on the console."""
    setup_logging()
    catalog = load_catalog()
    VehicleSession(catalog=catalog).run()


if __name__ == "__main__":
    sys.exit(main() or 0)
