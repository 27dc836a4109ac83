"""
Sample Data Seeder

Loads a fixed list of 50 well-known books for demos and manual testing.

Seeding is idempotent: before inserting an entry the seeder reloads the
whole table and skips the entry if a book with the same title and author
already exists. That is one get_all() per entry, fine for tens of rows
and not meant for more. The check and the insert are not atomic, so two
seeders running at once can still insert duplicates.

A storage or validation failure on one entry is logged and counted; the
remaining entries are still processed. A connection failure aborts the
run.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from catalog.exceptions import CatalogConnectionError, CatalogError
from catalog.models.book import Book
from catalog.services.repository import BookStore

logger = logging.getLogger(__name__)

# (title, author, category, year, publisher)
SeedEntry = tuple[str, str, str, int | None, str | None]

SEED_BOOKS: list[SeedEntry] = [
    ("Der Herr der Ringe: Die Gefährten", "J.R.R. Tolkien", "Fantasy", 1954, "Klett-Cotta"),
    ("1984", "George Orwell", "Dystopie", 1949, "Secker & Warburg"),
    ("Clean Code", "Robert C. Martin", "Programmierung", 2008, "Prentice Hall"),
    ("Harry Potter und der Stein der Weisen", "J.K. Rowling", "Fantasy", 1997, "Bloomsbury"),
    ("Das Kapital", "Karl Marx", "Wirtschaft", 1867, "Verlag Otto Meisner"),
    ("Stolz und Vorurteil", "Jane Austen", "Roman", 1813, "T. Egerton"),
    ("Der große Gatsby", "F. Scott Fitzgerald", "Roman", 1925, "Charles Scribners Sons"),
    ("Moby Dick", "Herman Melville", "Roman", 1851, "Richard Bentley"),
    ("Krieg und Frieden", "Leo Tolstoi", "Roman", 1869, "Russischer Bote"),
    ("Die Verwandlung", "Franz Kafka", "Roman", 1915, "Kurt Wolff Verlag"),
    ("Fahrenheit 451", "Ray Bradbury", "Science Fiction", 1953, "Ballantine Books"),
    ("Der Fänger im Roggen", "J.D. Salinger", "Roman", 1951, "Little, Brown and Company"),
    ("Wer die Nachtigall stört", "Harper Lee", "Roman", 1960, "J. B. Lippincott & Co."),
    ("Die Bibel", "Verschiedene Autoren", "Religion", None, "Verschiedene"),
    ("Der kleine Prinz", "Antoine de Saint-Exupéry", "Märchen", 1943, "Reynal & Hitchcock"),
    ("Brave New World", "Aldous Huxley", "Science Fiction", 1932, "Chatto & Windus"),
    ("Der Name der Rose", "Umberto Eco", "Krimi", 1980, "Bompiani"),
    ("Midnight's Children", "Salman Rushdie", "Roman", 1981, "Jonathan Cape"),
    ("Hundert Jahre Einsamkeit", "Gabriel García Márquez", "Magischer Realismus", 1967, "Editorial Sudamericana"),
    ("Die Chroniken von Narnia", "C.S. Lewis", "Fantasy", 1950, "Geoffrey Bles"),
    ("Dune", "Frank Herbert", "Science Fiction", 1965, "Chilton Books"),
    ("Foundation", "Isaac Asimov", "Science Fiction", 1951, "Gnome Press"),
    ("Der Hobbit", "J.R.R. Tolkien", "Fantasy", 1937, "George Allen & Unwin"),
    ("Neuromancer", "William Gibson", "Cyberpunk", 1984, "Ace Books"),
    ("Der Outsider", "Albert Camus", "Philosophie", 1942, "Gallimard"),
    ("Anna Karenina", "Leo Tolstoi", "Roman", 1877, "Russischer Bote"),
    ("Ulysses", "James Joyce", "Roman", 1922, "Sylvia Beach"),
    ("Lolita", "Vladimir Nabokov", "Roman", 1955, "Olympia Press"),
    ("Auf der Suche nach der verlorenen Zeit", "Marcel Proust", "Roman", 1913, "Bernard Grasset"),
    ("Die Odyssee", "Homer", "Epos", None, "Antike Überlieferung"),
    ("Madame Bovary", "Gustave Flaubert", "Roman", 1857, "Michel Lévy Frères"),
    ("Die göttliche Komödie", "Dante Alighieri", "Epos", 1320, "Mittelalterliche Handschriften"),
    ("Hamlet", "William Shakespeare", "Drama", 1603, "Nicholas Ling und John Trundell"),
    ("Don Quijote", "Miguel de Cervantes", "Roman", 1605, "Juan de la Cuesta"),
    ("Wuthering Heights", "Emily Brontë", "Roman", 1847, "Thomas Cautley Newby"),
    ("Jane Eyre", "Charlotte Brontë", "Roman", 1847, "Smith, Elder & Co."),
    ("Die Schatzinsel", "Robert Louis Stevenson", "Abenteuer", 1883, "Cassell & Company"),
    ("Dracula", "Bram Stoker", "Horror", 1897, "Archibald Constable and Company"),
    ("Frankenstein", "Mary Shelley", "Horror", 1818, "Lackington, Hughes, Harding, Mavor & Jones"),
    ("Dr. Jekyll und Mr. Hyde", "Robert Louis Stevenson", "Horror", 1886, "Longmans, Green & Co."),
    ("Die Abenteuer des Sherlock Holmes", "Arthur Conan Doyle", "Krimi", 1892, "George Newnes"),
    ("Mord im Orient Express", "Agatha Christie", "Krimi", 1934, "Collins Crime Club"),
    ("Der Malteser Falke", "Dashiell Hammett", "Krimi", 1930, "Alfred A. Knopf"),
    ("Der Pate", "Mario Puzo", "Krimi", 1969, "G. P. Putnam's Sons"),
    ("Catch-22", "Joseph Heller", "Satire", 1961, "Simon & Schuster"),
    ("Slaughterhouse-Five", "Kurt Vonnegut", "Science Fiction", 1969, "Delacorte Press"),
    ("One Flew Over the Cuckoo's Nest", "Ken Kesey", "Roman", 1962, "Viking Press"),
    ("Die Farbe Lila", "Alice Walker", "Roman", 1982, "Harcourt Brace Jovanovich"),
    ("Beloved", "Toni Morrison", "Roman", 1987, "Alfred A. Knopf"),
    ("The Road", "Cormac McCarthy", "Postapokalyptisch", 2006, "Alfred A. Knopf"),
]


# Range of MySQL's YEAR type; the server rejects anything outside it
MYSQL_YEAR_RANGE = (1901, 2155)


def years_outside_mysql_range(entries: Iterable[SeedEntry] = SEED_BOOKS) -> list[str]:
    """Titles whose year a MySQL YEAR column cannot store."""
    low, high = MYSQL_YEAR_RANGE
    return [
        title for title, _author, _category, year, _publisher in entries
        if year is not None and not low <= year <= high
    ]


@dataclass
class SeedReport:
    """What a seed run did."""

    inserted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.inserted) + len(self.skipped) + len(self.failed)


def _exists(store: BookStore, title: str, author: str) -> bool:
    return any(
        existing.title == title and existing.author == author
        for existing in store.get_all()
    )


def seed(store: BookStore, entries: Iterable[SeedEntry] = SEED_BOOKS) -> SeedReport:
    """
    Insert every entry that is not stored yet.

    Args:
        store: Target repository.
        entries: (title, author, category, year, publisher) tuples.

    Returns:
        SeedReport listing inserted, skipped and failed titles.
    """
    report = SeedReport()
    logger.info("Seeding books...")

    for title, author, category, year, publisher in entries:
        try:
            if _exists(store, title, author):
                logger.info(f"Already present: {title}")
                report.skipped.append(title)
                continue

            store.save(Book(title, author, category, year, publisher))
            logger.info(f"Added: {title} by {author}")
            report.inserted.append(title)
        except CatalogConnectionError:
            raise
        except CatalogError as exc:
            logger.error(f"Failed to seed {title!r}: {exc}")
            report.failed[title] = str(exc)

    logger.info(
        f"Seeding finished: {len(report.inserted)} added, "
        f"{len(report.skipped)} already present, {len(report.failed)} failed"
    )
    return report
