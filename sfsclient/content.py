"""Content descriptions returned by the service: identifiers, files and app packages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Sequence


def _is_permutation(lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
    """True if both sequences hold equal elements, in any order."""
    if len(lhs) != len(rhs):
        return False
    remaining = list(rhs)
    for item in lhs:
        try:
            remaining.remove(item)
        except ValueError:
            return False
    return not remaining


@dataclass(frozen=True)
class ContentId:
    """Identifies a piece of content by namespace, name and version."""

    namespace: str
    name: str
    version: str


@dataclass(eq=False)
class File:
    """A downloadable file with its location, size and hashes."""

    file_id: str
    url: str
    size_in_bytes: int
    hashes: dict[Hashable, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.size_in_bytes < 0:
            raise ValueError("size_in_bytes cannot be negative")
        self.hashes = dict(self.hashes)

    def clone(self) -> File:
        """Return an independent copy of this file."""
        return File(self.file_id, self.url, self.size_in_bytes, dict(self.hashes))

    def _base_equal(self, other: File) -> bool:
        return (
            self.file_id == other.file_id
            and self.url == other.url
            and self.size_in_bytes == other.size_in_bytes
            and self.hashes == other.hashes
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._base_equal(other)

    __hash__ = None  # type: ignore[assignment]


@dataclass
class ApplicabilityDetails:
    """Architectures and platforms an app file applies to."""

    architectures: list[Any] = field(default_factory=list)
    platform_applicability_for_package: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.architectures = list(self.architectures)
        self.platform_applicability_for_package = list(self.platform_applicability_for_package)


@dataclass(eq=False)
class AppFile(File):
    """A file of an app package, with applicability details and a moniker."""

    applicability_details: ApplicabilityDetails = field(default_factory=ApplicabilityDetails)
    file_moniker: str = ""

    @classmethod
    def make(
        cls,
        file_id: str,
        url: str,
        size_in_bytes: int,
        hashes: dict[Hashable, str],
        architectures: Iterable[Any],
        platform_applicability_for_package: Iterable[str],
        file_moniker: str,
    ) -> AppFile:
        """Build an app file, assembling its applicability details."""
        details = ApplicabilityDetails(
            list(architectures), list(platform_applicability_for_package)
        )
        return cls(file_id, url, size_in_bytes, dict(hashes), details, file_moniker)

    def clone(self) -> AppFile:
        return AppFile(
            self.file_id,
            self.url,
            self.size_in_bytes,
            dict(self.hashes),
            ApplicabilityDetails(
                list(self.applicability_details.architectures),
                list(self.applicability_details.platform_applicability_for_package),
            ),
            self.file_moniker,
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._base_equal(other)
            and self.applicability_details == other.applicability_details
            and self.file_moniker == other.file_moniker
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class Content:
    """A content identifier with its files. Equal contents hold the same files in any order."""

    content_id: ContentId
    files: list[File] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.files = list(self.files)

    @classmethod
    def make(cls, namespace: str, name: str, version: str, files: Iterable[File]) -> Content:
        """Build content from its identifier parts and copies of the given files."""
        return cls(ContentId(namespace, name, version), [f.clone() for f in files])

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.content_id == other.content_id and _is_permutation(self.files, other.files)

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class AppPrerequisiteContent:
    """A prerequisite of an app, with its files."""

    content_id: ContentId
    files: list[AppFile] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.files = list(self.files)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.content_id == other.content_id and _is_permutation(self.files, other.files)

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class AppContent:
    """An app with its update id, ordered prerequisites and files."""

    content_id: ContentId
    update_id: str = ""
    prerequisites: list[AppPrerequisiteContent] = field(default_factory=list)
    files: list[AppFile] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.prerequisites = list(self.prerequisites)
        self.files = list(self.files)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.content_id == other.content_id
            and self.update_id == other.update_id
            and self.prerequisites == other.prerequisites
            and _is_permutation(self.files, other.files)
        )

    __hash__ = None  # type: ignore[assignment]