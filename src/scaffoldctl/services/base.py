"""BaseService: abstract foundation for all scaffoldctl services.

Every service receives a :class:`Project` at construction time. The Project
provides the project root, resolved settings, file I/O, and the command
and prompt collaborators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scaffoldctl.infrastructure.project import Project


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class EnvService(BaseService):
            def merge(self, declarations, section_label=None) -> ServiceResult:
                public = self._project.read(...)
                ...
    """

    def __init__(self, project: Project) -> None:
        self._project = project

    @property
    def project(self) -> Project:
        return self._project
