from __future__ import annotations

from dotenv import find_dotenv, load_dotenv

from photostream.container import build_services
from photostream.domain.errors import IOFailure
from photostream.domain.models import RenameState, RunResult
from photostream.settings import load_config


def format_summary(result: RunResult) -> list[str]:
    lines: list[str] = []
    if result.dry_run:
        lines.append("Dry run: no files were renamed or written.")
    lines.append(f"Protected (unchanged): {len(result.protected)}")
    lines.append(f"Renamed: {len(result.pairs)}")
    if result.pairs:
        lines.append("Rename map:")
        for pair in result.pairs:
            lines.append(f"  {pair.original_name} -> {pair.final_name}")
    lines.append(f"PHOTO_STREAM items: {len(result.manifest)} -> {result.manifest_path.resolve()}")
    return lines


def main() -> None:
    load_dotenv(find_dotenv(usecwd=True), override=False)
    try:
        config = load_config()
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc
    if not config.photos_dir.is_dir():
        raise SystemExit(f"Photos directory not found: {config.photos_dir}")

    services = build_services(config)
    renumber_service = services["renumber_service"]
    try:
        result = renumber_service.run()
    except IOFailure as exc:
        batch = renumber_service.last_batch
        if batch is not None and not batch.is_committed:
            print("Rename batch left partially applied:")
            for item in batch.items:
                print(f"  [{item.state.value}] {item.pair.original_name} -> {item.current_name}")
        raise SystemExit(f"Renumbering failed: {exc}") from exc

    for line in format_summary(result):
        print(line)


if __name__ == "__main__":
    main()
