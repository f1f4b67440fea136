from __future__ import annotations

from dataclasses import dataclass, field

from ..library.model import LibraryVisit
from ..users.model import User
from ..visitors.model import Visitor
from .table import Table


@dataclass
class EntityStore:
    """Process-resident state of one application instance.

    Built once per app (or per test) and handed to the repositories.
    """

    users: Table[User] = field(default_factory=lambda: Table("users"))
    visitors: Table[Visitor] = field(default_factory=lambda: Table("visitors"))
    library_visits: Table[LibraryVisit] = field(default_factory=lambda: Table("library_visits"))
