"""
Seed a demo Funko collection for one user.
Run from project root: python3 scripts/seed_collection.py [user]
Writes into FUNKO_DATA_DIR (default ./data). Funkos already present are left alone.
"""
import os
import sys
from pathlib import Path

# Add project root so the packages are importable
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from collection.manager import FunkoCollectionManager
from funko.models import Funko, FunkoGenre, FunkoType
from storage.files import DATA_DIR

DEFAULT_USER = "demo"

# (id, name, description, type, genre, franchise, number, exclusive, special features, market value)
DEMO_FUNKOS = [
    ("1", "Harry Potter", "A wizard with a lightning bolt scar on his forehead",
     FunkoType.POP, FunkoGenre.FILMS_AND_TV, "Harry Potter", 1, False, "None", 10.0),
    ("2", "Hermione Granger", "Brightest witch of her age",
     FunkoType.POP, FunkoGenre.FILMS_AND_TV, "Harry Potter", 3, False, "None", 12.5),
    ("3", "Sonic the Hedgehog", "The fastest thing alive",
     FunkoType.POP, FunkoGenre.VIDEOGAMES, "Sonic", 283, True, "Glows in the dark", 35.0),
    ("4", "Goku Ultra Instinct", "Goku mastering Ultra Instinct",
     FunkoType.POP, FunkoGenre.ANIME, "Dragon Ball Super", 386, True, "Metallic finish", 60.0),
    ("5", "Homer Simpson", "D'oh!",
     FunkoType.VINYL_SODA, FunkoGenre.ANIMATION, "The Simpsons", 1, False, "Chase variant odds 1:6", 25.0),
    ("6", "Freddie Mercury", "Live Aid 1985",
     FunkoType.POP, FunkoGenre.MUSIC, "Queen", 96, False, "None", 18.0),
    ("7", "Michael Jordan", "Chicago Bulls #23",
     FunkoType.VINYL_GOLD, FunkoGenre.SPORTS, "NBA", 54, True, "Gold chrome", 120.0),
    ("8", "Batman 1989 Batmobile", "Batman riding the 1989 Batmobile",
     FunkoType.POP_RIDES, FunkoGenre.FILMS_AND_TV, "Batman", 276, False, "Vehicle", 45.0),
]


def seed_collection(user: str, data_dir=DATA_DIR) -> int:
    """Add every demo Funko the user does not already own. Returns how many were added."""
    manager = FunkoCollectionManager(user, data_dir)
    added = 0
    for row in DEMO_FUNKOS:
        if manager.add_funko(Funko(*row)):
            added += 1
    return added


def main() -> None:
    user = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_USER
    data_dir = os.environ.get("FUNKO_DATA_DIR") or DATA_DIR
    added = seed_collection(user, data_dir)
    print(f"Seeded {added} Funkos for {user} in {data_dir}. Done.")


if __name__ == "__main__":
    main()
