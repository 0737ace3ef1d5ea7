"""CLI demo that exercises the :class:`brawlapi.BrawlAPI` client.

Run with the virtual environment activated::

    BRAWLAPI_TOKEN=... python examples/demo_brawlapi.py [PLAYER_TAG]

Optionally set ``BRAWLAPI_BASE_URL`` if the API is not available at the
default (``https://brawlapi.cf/api/``).
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from brawlapi import BrawlAPI, BrawlAPIError

logging.basicConfig(level=logging.INFO)

def main() -> None:
    client = BrawlAPI(os.environ.get("BRAWLAPI_TOKEN"))

    print("Endpoints:", ", ".join(client.get_endpoints()))

    top_clubs = client.get_top_clubs(5)
    print(f"\nTop {len(top_clubs)} clubs:")
    for rank, club in enumerate(top_clubs, start=1):
        print(f"  {rank}. {club.name} ({club.tag}) - {club.trophies} trophies")

    if len(sys.argv) < 2:
        return

    try:
        player = client.get_player(sys.argv[1])
    except BrawlAPIError as exc:
        print(f"Could not fetch player: {exc}")
        return

    print(f"\nPlayer {player.name} ({player.tag}):")
    pprint({key: player.get(key) for key in ["trophies", "highestTrophies", "expLevel"]})

    club = player.get_club()
    if club is not None:
        print(f"Club: {club.name} with {len(club.members)} members")


if __name__ == "__main__":
    main()
