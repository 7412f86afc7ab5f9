"""Create demo groups, verses and registrations for development."""

from retreat_verses import storage
from retreat_verses.models import DEFAULT_MEAL_PURPOSE, DEFAULT_SNACK_PURPOSE

DEMO_GROUPS = [
    ("Group 1", "lamb"),
    ("Group 2", "dove"),
    ("Group 3", "olive"),
]

DEMO_VERSES = [
    ("Give us this day our daily bread.", DEFAULT_MEAL_PURPOSE),
    ("Taste and see that the LORD is good.", DEFAULT_MEAL_PURPOSE),
    ("Man shall not live by bread alone.", DEFAULT_SNACK_PURPOSE),
    ("This is the day which the LORD hath made.", DEFAULT_SNACK_PURPOSE),
]


async def create_demo_data() -> None:
    """Wipe groups and verses, then create fresh demo data."""
    store = storage.get_store()
    await store.delete_all_groups()
    await store.delete_all_verses()
    await store.get_verse_purposes()

    groups = [await store.add_group(name, password) for name, password in DEMO_GROUPS]
    verses = [await store.add_verse(text, type) for text, type in DEMO_VERSES]

    # Every group gets two verses; the first group has already used one
    for i, group in enumerate(groups):
        for verse in (verses[i % len(verses)], verses[(i + 1) % len(verses)]):
            await store.register_verse(group.id, verse.id)
    await store.use_verse(groups[0].id, verses[0].id)
