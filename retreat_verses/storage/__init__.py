"""File-based JSON storage for groups, verses and their registrations.

Data layout:
  data/
    groups.json          Groups (id, name, passwordHash)
    verses.json          Verses (id, text, type)
    purposes.json        Verse purposes (array of strings, seeded on first read)
    registrations.json   Group/verse pairs with registeredAt, usedAt, recitedAt

Every operation runs under one process-wide lock and sees a fresh copy of
the files it touches. Deleting a group or verse removes its registrations
in the same locked section. Files are rewritten whole; there is no
rollback across files.

Verse type compatibility: older verses.json files store ``type`` as a
number (1 = snack, anything else = meal). They are read as the purpose
string and written back as a string.
"""

# Re-export all public symbols so `from retreat_verses import storage` works.

from .core import (  # noqa: F401
    data_dir,
    get_store,
    init_storage,
)

from .files import (  # noqa: F401
    COLLECTIONS,
    GROUPS,
    PURPOSES,
    REGISTRATIONS,
    VERSES,
    read_collection,
    write_collection,
)

from .gate import (  # noqa: F401
    Gate,
    UnitOfWork,
)

from .groups import (  # noqa: F401
    hash_password,
)

from .store import (  # noqa: F401
    DataStore,
)
