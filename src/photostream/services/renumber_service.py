from __future__ import annotations

from photostream.domain.allocator import allocate
from photostream.domain.classifier import classify, reserved_numbers
from photostream.domain.config import RenumberConfig
from photostream.domain.models import FileEntry, RenumberPlan, RunResult
from photostream.ports.filesystem_port import FilesystemPort
from photostream.services.manifest_service import ManifestService
from photostream.services.rename_service import RenameBatch, RenameService
from photostream.services.scanner import scan_photos


class RenumberService:
    def __init__(
        self,
        filesystem: FilesystemPort,
        config: RenumberConfig,
        rename_service: RenameService,
        manifest_service: ManifestService,
    ) -> None:
        self._filesystem = filesystem
        self._config = config
        self._rename_service = rename_service
        self._manifest_service = manifest_service
        self.last_batch: RenameBatch | None = None

    def plan(self) -> RenumberPlan:
        entries = scan_photos(self._filesystem, self._config.extensions)
        classification = classify(entries, self._config.protected_range)
        reserved = reserved_numbers(classification.numbered)
        pairs = allocate(
            classification.candidates,
            self._config.start_number,
            reserved,
            self._filesystem.exists,
            self._config.zero_pad_width,
            self._config.protected_range,
        )
        return RenumberPlan(entries=entries, classification=classification, pairs=pairs)

    def run(self) -> RunResult:
        self.last_batch = None
        plan = self.plan()

        if self._config.dry_run:
            manifest = self._manifest_service.from_entries(_planned_entries(plan))
        else:
            if plan.pairs:
                self.last_batch = self._rename_service.prepare(plan.pairs)
                self._rename_service.apply(self.last_batch)
            manifest = self._manifest_service.collect()
            self._manifest_service.write(manifest)

        return RunResult(
            protected=plan.classification.protected,
            pairs=plan.pairs,
            manifest=manifest,
            manifest_path=self._config.manifest_path,
            dry_run=self._config.dry_run,
        )


def _planned_entries(plan: RenumberPlan) -> list[FileEntry]:
    renamed = {pair.original_name: pair.final_name for pair in plan.pairs}
    return [
        FileEntry.from_name(renamed.get(entry.name, entry.name)) for entry in plan.entries
    ]
