from __future__ import annotations

import time
from typing import Callable
from uuid import uuid4

from photostream.domain.models import RenamePair, RenameState, StagedRename
from photostream.ports.filesystem_port import FilesystemPort

TEMP_PREFIX = "__tmp__"


def make_temp_name(original_name: str) -> str:
    return f"{TEMP_PREFIX}{time.time_ns()}__{uuid4().hex[:12]}__{original_name}"


class RenameBatch:
    """
    Two-phase rename of one run: every file moves PENDING -> STAGED -> COMMITTED.

    After a failure the batch still describes which files sit under their
    original, temporary or final names.
    """

    def __init__(self, items: list[StagedRename]) -> None:
        self.items = items

    def __len__(self) -> int:
        return len(self.items)

    def in_state(self, state: RenameState) -> list[StagedRename]:
        return [item for item in self.items if item.state is state]

    @property
    def is_committed(self) -> bool:
        return all(item.state is RenameState.COMMITTED for item in self.items)

    @property
    def pairs(self) -> list[RenamePair]:
        return [item.pair for item in self.items]


class RenameService:
    def __init__(
        self,
        filesystem: FilesystemPort,
        temp_name_factory: Callable[[str], str] = make_temp_name,
    ) -> None:
        self._filesystem = filesystem
        self._temp_name_factory = temp_name_factory

    def prepare(self, pairs: list[RenamePair]) -> RenameBatch:
        sources = [pair.original_name for pair in pairs]
        targets = [pair.final_name for pair in pairs]
        if len(set(sources)) != len(sources):
            raise ValueError("Rename batch lists the same source more than once.")
        if len(set(targets)) != len(targets):
            raise ValueError("Rename batch assigns the same target more than once.")

        used = set(sources) | set(targets)
        items: list[StagedRename] = []
        for pair in pairs:
            temp_name = self._temp_name_factory(pair.original_name)
            while temp_name in used or self._filesystem.exists(temp_name):
                temp_name = self._temp_name_factory(pair.original_name)
            used.add(temp_name)
            items.append(StagedRename(pair=pair, temp_name=temp_name))
        return RenameBatch(items)

    def apply(self, batch: RenameBatch) -> None:
        """
        Stage every pending file under its temporary name, then commit all
        staged files to their final names.

        IOFailure from the filesystem propagates as-is and nothing is rolled
        back; the batch records how far each file got.
        """
        for item in batch.in_state(RenameState.PENDING):
            self._filesystem.rename(item.pair.original_name, item.temp_name)
            item.state = RenameState.STAGED

        for item in batch.in_state(RenameState.STAGED):
            self._filesystem.rename(item.temp_name, item.pair.final_name)
            item.state = RenameState.COMMITTED

    def rename_all(self, pairs: list[RenamePair]) -> RenameBatch:
        batch = self.prepare(pairs)
        self.apply(batch)
        return batch
