"""Tests for the JSON schedule repository."""

import json
from pathlib import Path

import pytest

from tests.test_timetable_service import sample_document
from train_timetable.adapters.json_store import JsonScheduleRepository
from train_timetable.domain.errors import DataUnavailableError


@pytest.fixture
def dataset_file(tmp_path: Path) -> Path:
    """Write the sample dataset to a temporary file."""
    path = tmp_path / "processed_train_schedule.json"
    path.write_text(json.dumps(sample_document(), ensure_ascii=False), encoding="utf-8")
    return path


@pytest.mark.asyncio
async def test_loads_dataset_from_file(dataset_file: Path) -> None:
    """Given a valid dataset file, when loading, then all sections are parsed."""
    dataset = await JsonScheduleRepository(dataset_file).load_dataset()

    assert dataset.validity is not None
    assert dataset.validity.date_debut == "01-01-2024"
    assert dataset.feries == ["25-12-2024"]
    assert list(dataset.lines["L1"]) == ["A", "R"]
    assert dataset.announcements[0]["message"] == "Service réduit le 14 juillet"


@pytest.mark.asyncio
async def test_schedule_key_order_is_preserved(dataset_file: Path) -> None:
    """Given a train whose stations are not alphabetical, when loading, then file order is kept."""
    dataset = await JsonScheduleRepository(dataset_file).load_dataset()

    record = dataset.lines["L1"]["R"][0]
    assert record is not None
    assert record.to_train().stations == ["StationB", "StationA"]


@pytest.mark.asyncio
async def test_file_is_reread_on_every_call(dataset_file: Path) -> None:
    """Given the file changes between calls, when loading again, then the new content is returned."""
    repository = JsonScheduleRepository(dataset_file)
    await repository.load_dataset()

    document = sample_document()
    document["feries"] = ["01-01-2024"]
    dataset_file.write_text(json.dumps(document), encoding="utf-8")

    dataset = await repository.load_dataset()
    assert dataset.feries == ["01-01-2024"]


@pytest.mark.asyncio
async def test_missing_file_raises_data_unavailable(tmp_path: Path) -> None:
    """Given no file, when loading, then DataUnavailableError names the source."""
    path = tmp_path / "missing.json"

    with pytest.raises(DataUnavailableError) as exc_info:
        await JsonScheduleRepository(path).load_dataset()

    assert exc_info.value.source == str(path)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


@pytest.mark.asyncio
async def test_invalid_json_raises_data_unavailable(tmp_path: Path) -> None:
    """Given a file that is not JSON, when loading, then DataUnavailableError is raised."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DataUnavailableError, match="invalid dataset"):
        await JsonScheduleRepository(path).load_dataset()


@pytest.mark.asyncio
async def test_malformed_validity_raises_data_unavailable(tmp_path: Path) -> None:
    """Given a validity block with an unreadable date, when loading, then DataUnavailableError is raised."""
    path = tmp_path / "bad_validity.json"
    path.write_text(
        json.dumps({"validity": {"date_debut": "first of may", "date_fin": "31-12-2024"}}),
        encoding="utf-8",
    )

    with pytest.raises(DataUnavailableError):
        await JsonScheduleRepository(path).load_dataset()
