from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_TICKET_PREFIX
from .library.memory_library_repository import InMemoryLibraryVisitRepository
from .library.service import LibraryService
from .reports.service import ReportService
from .storage.store import EntityStore
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import AuthService, UserService
from .visitors.memory_visitor_repository import InMemoryVisitorRepository
from .visitors.service import VisitorService
from .visitors.tickets import TicketIssuer


@dataclass(frozen=True)
class Container:
    store: EntityStore

    users_repo: InMemoryUserRepository
    visitors_repo: InMemoryVisitorRepository
    library_repo: InMemoryLibraryVisitRepository

    auth_service: AuthService
    user_service: UserService
    visitor_service: VisitorService
    library_service: LibraryService
    report_service: ReportService


def build_container(*, store: Optional[EntityStore] = None, ticket_prefix: str = DEFAULT_TICKET_PREFIX) -> Container:
    store = store or EntityStore()

    users_repo = InMemoryUserRepository(store.users)
    visitors_repo = InMemoryVisitorRepository(store.visitors)
    library_repo = InMemoryLibraryVisitRepository(store.library_visits)

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo)
    visitor_service = VisitorService(visitors_repo, tickets=TicketIssuer(ticket_prefix), library=library_repo)
    library_service = LibraryService(library_repo)
    report_service = ReportService(visitors_repo)

    return Container(
        store=store,
        users_repo=users_repo,
        visitors_repo=visitors_repo,
        library_repo=library_repo,
        auth_service=auth_service,
        user_service=user_service,
        visitor_service=visitor_service,
        library_service=library_service,
        report_service=report_service,
    )
