"""OD application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, Optional
from uuid import UUID

from domain.entities import ODApplication
from domain.enums import ApplicationStatus
from domain.value_objects import ApprovalFacts, RosterQuery


class IODApplicationRepository(ABC):
    """
    Abstract repository interface for the Application Record Store.

    Implementations must make ``compare_and_set`` atomic per application id:
    of two writers holding the same version, exactly one succeeds.
    """

    @abstractmethod
    async def create(self, application: ODApplication) -> ODApplication:
        """
        Persist a newly submitted application.

        Args:
            application: Validated application in its initial state

        Returns:
            Stored ODApplication
        """
        pass

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[ODApplication]:
        """
        Retrieve an application by ID.

        Args:
            application_id: Application UUID

        Returns:
            ODApplication if found, None otherwise
        """
        pass

    @abstractmethod
    async def compare_and_set(
        self,
        application_id: UUID,
        expected_version: int,
        approval: ApprovalFacts,
    ) -> ODApplication:
        """
        Write new approval facts only if the stored version still matches.

        Args:
            application_id: Application UUID
            expected_version: Version observed when the application was read
            approval: Approval facts to store

        Returns:
            Updated ODApplication with its version advanced by one

        Raises:
            NotFoundError: If the application does not exist
            ConcurrentModificationError: If the stored version differs
        """
        pass

    @abstractmethod
    async def query(self, roster_query: RosterQuery) -> list[ODApplication]:
        """
        Return applications matching a roster query, ordered by
        submission time then id.
        """
        pass

    @abstractmethod
    async def list_by_student(self, student_identity: str) -> list[ODApplication]:
        """Return a student's applications, newest submission first."""
        pass

    @abstractmethod
    async def list_pending_faculty(self, department: Optional[str] = None) -> list[ODApplication]:
        """Return pending applications still awaiting faculty approval."""
        pass

    @abstractmethod
    async def list_pending_hod(self, department: Optional[str] = None) -> list[ODApplication]:
        """Return faculty-approved applications awaiting HOD approval."""
        pass

    @abstractmethod
    async def count_by_status(self, student_identity: str) -> dict[ApplicationStatus, int]:
        """Count a student's applications per derived status."""
        pass

    @abstractmethod
    async def distinct_facets(self) -> dict[str, list]:
        """Return the distinct ``years`` and ``sections`` present in the store."""
        pass

    @abstractmethod
    def savepoint(self) -> AsyncContextManager[None]:
        """
        Scope for one item's writes.

        Everything written inside the block is undone if the block raises;
        earlier successful blocks in the same unit of work are kept.
        """
        pass
