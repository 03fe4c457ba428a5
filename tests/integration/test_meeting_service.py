"""
Test suite for MeetingService against an in-memory SQLite database.

Covers create/read/update/delete round trips, filtered listing and
pagination, duplication, status statistics and envelope failures.

System role: Verification of meeting minute data access operations
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from meeting_minutes.application.services import MeetingService
from meeting_minutes.boundary.db.models.meeting_model import MeetingModel, MeetingStatus
from meeting_minutes.boundary.db.store_errors import MISSING_RELATION_MESSAGE
from meeting_minutes.models.meeting import MeetingMinuteCreate, MeetingMinuteUpdate


async def _create(meeting_service: MeetingService, **overrides):
    payload = {
        "title": "Weekly Sync",
        "time": datetime(2025, 1, 10, 9, 0, tzinfo=timezone.utc),
        "content": "Notes",
    }
    payload.update(overrides)
    result = await meeting_service.create(payload)
    assert result.success, result.error
    return result.data


class TestMeetingServiceCreate:
    """Test suite for MeetingService.create()."""

    @pytest.mark.asyncio
    async def test_create_should_return_persisted_row(
        self, meeting_service: MeetingService, meeting_payload: dict
    ) -> None:
        """Test create returns generated id, timestamps and supplied fields."""
        # Act
        result = await meeting_service.create(meeting_payload)

        # Assert
        assert result.success is True
        assert result.error is None
        assert result.data.title == "Q1 Planning"
        assert result.data.content == "# Agenda"
        assert isinstance(result.data.id, uuid.UUID)
        assert result.data.created_at is not None
        assert result.data.updated_at >= result.data.created_at

    @pytest.mark.asyncio
    async def test_create_should_default_status_to_draft(
        self, meeting_service: MeetingService, meeting_payload: dict
    ) -> None:
        """Test status defaults to draft when omitted."""
        result = await meeting_service.create(meeting_payload)

        assert result.data.status == "draft"

    @pytest.mark.asyncio
    async def test_create_should_accept_meeting_date_alias(
        self, meeting_service: MeetingService, meeting_time: datetime
    ) -> None:
        """Test the scheduled time may be supplied as meeting_date."""
        result = await meeting_service.create(
            {"title": "Board", "meeting_date": meeting_time, "content": ""}
        )

        assert result.success is True
        assert result.data.time.replace(tzinfo=None) == meeting_time.replace(tzinfo=None)

    @pytest.mark.asyncio
    async def test_create_should_accept_schema_instance(
        self, meeting_service: MeetingService, meeting_time: datetime
    ) -> None:
        """Test create accepts a MeetingMinuteCreate directly."""
        payload = MeetingMinuteCreate(
            title="Retro",
            time=meeting_time,
            status=MeetingStatus.PUBLISHED,
            location="Room 4",
            tags=["team", "retro"],
            created_by="alice",
        )

        result = await meeting_service.create(payload)

        assert result.success is True
        assert result.data.status == "published"
        assert result.data.location == "Room 4"
        assert result.data.tags == ["team", "retro"]
        assert result.data.created_by == "alice"

    @pytest.mark.asyncio
    async def test_create_should_fail_on_blank_title(
        self, meeting_service: MeetingService, meeting_time: datetime
    ) -> None:
        """Test blank title yields a failure envelope, not an exception."""
        result = await meeting_service.create({"title": "   ", "time": meeting_time})

        assert result.success is False
        assert result.data is None
        assert "Title is required" in result.error

    @pytest.mark.asyncio
    async def test_create_should_fail_on_unknown_status(
        self, meeting_service: MeetingService, meeting_time: datetime
    ) -> None:
        """Test an invalid status value is rejected."""
        result = await meeting_service.create(
            {"title": "X", "time": meeting_time, "status": "deleted"}
        )

        assert result.success is False
        assert result.error.startswith("Invalid payload")


class TestMeetingServiceGetById:
    """Test suite for MeetingService.get_by_id()."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_created_fields(
        self, meeting_service: MeetingService, meeting_payload: dict
    ) -> None:
        """Test create followed by get_by_id yields equal caller-supplied fields."""
        created = (await meeting_service.create(meeting_payload)).data

        result = await meeting_service.get_by_id(created.id)

        assert result.success is True
        assert result.data.id == created.id
        assert result.data.title == created.title
        assert result.data.content == created.content
        assert result.data.time == created.time
        assert result.data.updated_at >= result.data.created_at

    @pytest.mark.asyncio
    async def test_get_by_id_should_resolve_attendees_to_empty_list(
        self, meeting_service: MeetingService, meeting_payload: dict
    ) -> None:
        """Test a meeting without links has attendees == []."""
        created = (await meeting_service.create(meeting_payload)).data

        result = await meeting_service.get_by_id(created.id)

        assert result.data.attendees == []

    @pytest.mark.asyncio
    async def test_get_by_id_should_fail_when_not_found(
        self, meeting_service: MeetingService
    ) -> None:
        """Test a missing id yields a failure envelope."""
        missing_id = uuid.uuid4()

        result = await meeting_service.get_by_id(missing_id)

        assert result.success is False
        assert result.data is None
        assert result.error == f"Meeting minute {missing_id} not found"


class TestMeetingServiceUpdate:
    """Test suite for MeetingService.update()."""

    @pytest.mark.asyncio
    async def test_update_should_change_only_supplied_fields(
        self, meeting_service: MeetingService
    ) -> None:
        """Test omitted fields are unchanged and supplied fields match."""
        created = await _create(meeting_service, location="HQ", tags=["a"])

        result = await meeting_service.update(created.id, {"title": "Renamed"})

        assert result.success is True
        assert result.data.title == "Renamed"
        assert result.data.content == created.content
        assert result.data.location == "HQ"
        assert result.data.tags == ["a"]
        assert result.data.status == created.status
        assert result.data.time == created.time

    @pytest.mark.asyncio
    async def test_update_should_allow_any_status_transition(
        self, meeting_service: MeetingService
    ) -> None:
        """Test status can move from archived back to draft."""
        created = await _create(meeting_service, status="archived")

        result = await meeting_service.update(
            created.id, MeetingMinuteUpdate(status=MeetingStatus.DRAFT)
        )

        assert result.success is True
        assert result.data.status == "draft"

    @pytest.mark.asyncio
    async def test_update_should_keep_updated_at_not_before_created_at(
        self, meeting_service: MeetingService
    ) -> None:
        """Test timestamps stay ordered after an update."""
        created = await _create(meeting_service)

        result = await meeting_service.update(created.id, {"content": "edited"})

        assert result.data.created_at == created.created_at
        assert result.data.updated_at >= result.data.created_at

    @pytest.mark.asyncio
    async def test_update_with_empty_payload_should_return_row(
        self, meeting_service: MeetingService
    ) -> None:
        """Test an empty update returns the current row."""
        created = await _create(meeting_service)

        result = await meeting_service.update(created.id, {})

        assert result.success is True
        assert result.data.id == created.id

    @pytest.mark.asyncio
    async def test_update_should_fail_when_not_found(
        self, meeting_service: MeetingService
    ) -> None:
        """Test updating a missing id yields a failure envelope."""
        result = await meeting_service.update(uuid.uuid4(), {"title": "Nope"})

        assert result.success is False
        assert result.error.endswith("not found")


class TestMeetingServiceDelete:
    """Test suite for MeetingService.delete()."""

    @pytest.mark.asyncio
    async def test_delete_then_get_should_fail(
        self, meeting_service: MeetingService, meeting_payload: dict
    ) -> None:
        """Test the create, delete, get_by_id example flow."""
        created = await meeting_service.create(meeting_payload)
        assert created.success is True
        assert created.data.title == "Q1 Planning"

        deleted = await meeting_service.delete(created.data.id)
        assert deleted.success is True
        assert deleted.data is None

        fetched = await meeting_service.get_by_id(created.data.id)
        assert fetched.success is False
        assert fetched.error is not None

    @pytest.mark.asyncio
    async def test_delete_should_succeed_when_already_absent(
        self, meeting_service: MeetingService
    ) -> None:
        """Test delete does not distinguish absent rows."""
        result = await meeting_service.delete(uuid.uuid4())

        assert result.success is True
        assert result.data is None


class TestMeetingServiceList:
    """Test suite for MeetingService.get_all()."""

    @pytest.mark.asyncio
    async def test_get_all_should_order_by_time_descending(
        self, meeting_service: MeetingService, meeting_time: datetime
    ) -> None:
        """Test most recent meeting comes first."""
        await _create(meeting_service, title="old", time=meeting_time)
        await _create(meeting_service, title="new", time=meeting_time + timedelta(days=2))
        await _create(meeting_service, title="mid", time=meeting_time + timedelta(days=1))

        result = await meeting_service.get_all()

        assert [m.title for m in result.data] == ["new", "mid", "old"]

    @pytest.mark.asyncio
    async def test_get_all_should_return_empty_list_without_rows(
        self, meeting_service: MeetingService
    ) -> None:
        """Test an empty table lists as []."""
        result = await meeting_service.get_all()

        assert result.success is True
        assert result.data == []

    @pytest.mark.asyncio
    async def test_search_should_match_title_or_content_case_insensitively(
        self, meeting_service: MeetingService
    ) -> None:
        """Test search hits title or content regardless of case."""
        await _create(meeting_service, title="Budget review", content="")
        await _create(meeting_service, title="Standup", content="Discussed the BUDGET")
        await _create(meeting_service, title="Standup", content="Nothing relevant")

        result = await meeting_service.get_all(search="budget")

        assert len(result.data) == 2
        for meeting in result.data:
            assert "budget" in (meeting.title + meeting.content).lower()

    @pytest.mark.asyncio
    async def test_search_should_treat_wildcards_literally(
        self, meeting_service: MeetingService
    ) -> None:
        """Test % in the search term is not a wildcard."""
        await _create(meeting_service, title="Growth 10% target")
        await _create(meeting_service, title="Growth 100 target")

        result = await meeting_service.get_all(search="10%")

        assert [m.title for m in result.data] == ["Growth 10% target"]

    @pytest.mark.asyncio
    async def test_status_filter_should_return_only_matching_rows(
        self, meeting_service: MeetingService
    ) -> None:
        """Test status equality filter."""
        await _create(meeting_service, status="archived")
        await _create(meeting_service, status="draft")

        result = await meeting_service.get_all(status="archived")

        assert len(result.data) == 1
        assert result.data[0].status == "archived"

    @pytest.mark.asyncio
    async def test_status_and_search_should_combine_with_and(
        self, meeting_service: MeetingService
    ) -> None:
        """Test status AND (title OR content) search."""
        await _create(meeting_service, title="Budget", status="archived")
        await _create(meeting_service, title="Other", content="budget", status="archived")
        await _create(meeting_service, title="Budget", status="published")
        await _create(meeting_service, title="Other", status="archived")

        result = await meeting_service.get_all(status=MeetingStatus.ARCHIVED, search="Budget")

        assert len(result.data) == 2
        assert all(m.status == "archived" for m in result.data)

    @pytest.mark.asyncio
    async def test_limit_should_cap_results(
        self, meeting_service: MeetingService, meeting_time: datetime
    ) -> None:
        """Test limit without offset."""
        for day in range(5):
            await _create(meeting_service, title=f"m{day}", time=meeting_time + timedelta(days=day))

        result = await meeting_service.get_all(limit=2)

        assert [m.title for m in result.data] == ["m4", "m3"]

    @pytest.mark.asyncio
    async def test_offset_without_limit_should_page_by_ten(
        self, meeting_service: MeetingService, meeting_time: datetime
    ) -> None:
        """Test offset alone uses a page size of 10."""
        for minute in range(15):
            await _create(
                meeting_service,
                title=f"m{minute:02d}",
                time=meeting_time + timedelta(minutes=minute),
            )

        result = await meeting_service.get_all(offset=2)

        assert len(result.data) == 10
        assert result.data[0].title == "m12"

    @pytest.mark.asyncio
    async def test_offset_with_limit_should_page(
        self, meeting_service: MeetingService, meeting_time: datetime
    ) -> None:
        """Test offset and limit together."""
        for minute in range(6):
            await _create(
                meeting_service,
                title=f"m{minute}",
                time=meeting_time + timedelta(minutes=minute),
            )

        result = await meeting_service.get_all(limit=2, offset=2)

        assert [m.title for m in result.data] == ["m3", "m2"]

    @pytest.mark.asyncio
    async def test_unrecognized_status_filter_should_match_stored_value(
        self, meeting_service: MeetingService, session_factory, meeting_time: datetime
    ) -> None:
        """Test a status outside the known set filters by plain equality."""
        await _create(meeting_service, status="draft")
        async with session_factory() as session:
            session.add(MeetingModel(title="Review", time=meeting_time, status="in_review"))
            await session.commit()

        result = await meeting_service.get_all(status="in_review")
        nothing = await meeting_service.get_all(status="bogus")

        assert result.success is True
        assert [m.title for m in result.data] == ["Review"]
        assert result.data[0].status == "in_review"
        assert nothing.success is True
        assert nothing.data == []


class TestMeetingServiceDuplicate:
    """Test suite for MeetingService.duplicate()."""

    @pytest.mark.asyncio
    async def test_duplicate_should_copy_as_draft_with_suffix(
        self, meeting_service: MeetingService
    ) -> None:
        """Test copy title, status, id and untouched source."""
        source = await _create(
            meeting_service,
            title="Board Meeting",
            status="published",
            content="# Minutes",
            location="HQ",
            tags=["board"],
        )

        result = await meeting_service.duplicate(source.id)

        assert result.success is True
        copy = result.data
        assert copy.title == "Board Meeting (Copy)"
        assert copy.status == "draft"
        assert copy.id != source.id
        assert copy.content == "# Minutes"
        assert copy.location == "HQ"
        assert copy.tags == ["board"]
        assert copy.time == source.time

        original = await meeting_service.get_by_id(source.id)
        assert original.data.title == "Board Meeting"
        assert original.data.status == "published"

    @pytest.mark.asyncio
    async def test_duplicate_should_fail_when_source_missing(
        self, meeting_service: MeetingService
    ) -> None:
        """Test duplicate of a missing id fails and writes nothing."""
        result = await meeting_service.duplicate(uuid.uuid4())

        assert result.success is False
        assert (await meeting_service.get_all()).data == []


class TestMeetingServiceStats:
    """Test suite for MeetingService.get_stats()."""

    @pytest.mark.asyncio
    async def test_get_stats_should_count_per_status(
        self, meeting_service: MeetingService
    ) -> None:
        """Test counters sum to total when all statuses are known."""
        for status in ("draft", "draft", "published", "archived"):
            await _create(meeting_service, status=status)

        result = await meeting_service.get_stats()

        assert result.success is True
        stats = result.data
        assert (stats.total, stats.draft, stats.published, stats.archived) == (4, 2, 1, 1)
        assert stats.total == stats.draft + stats.published + stats.archived

    @pytest.mark.asyncio
    async def test_get_stats_should_count_unknown_status_in_total_only(
        self, meeting_service: MeetingService, session_factory, meeting_time: datetime
    ) -> None:
        """Test a row with an unrecognized status only affects total."""
        await _create(meeting_service, status="published")
        async with session_factory() as session:
            session.add(MeetingModel(title="Legacy", time=meeting_time, status="pending"))
            await session.commit()

        stats = (await meeting_service.get_stats()).data

        assert stats.total == 2
        assert stats.published == 1
        assert stats.draft == 0
        assert stats.archived == 0

    @pytest.mark.asyncio
    async def test_get_stats_on_empty_table(self, meeting_service: MeetingService) -> None:
        """Test all counters are zero without rows."""
        stats = (await meeting_service.get_stats()).data

        assert stats.model_dump() == {"total": 0, "draft": 0, "published": 0, "archived": 0}


class TestMeetingServiceStoreErrors:
    """Test suite for store failures surfacing through the envelope."""

    @pytest.mark.asyncio
    async def test_missing_table_should_suggest_setup_script(self, empty_engine) -> None:
        """Test a missing relation is rewritten to the setup script message."""
        from sqlalchemy.ext.asyncio import async_sessionmaker

        service = MeetingService(async_sessionmaker(empty_engine, expire_on_commit=False))

        result = await service.get_all()

        assert result.success is False
        assert result.data is None
        assert result.error == MISSING_RELATION_MESSAGE

    @pytest.mark.asyncio
    async def test_health_check_style_read_on_missing_table_fails(self, empty_engine) -> None:
        """Test stats on a missing table fail through the envelope too."""
        from sqlalchemy.ext.asyncio import async_sessionmaker

        service = MeetingService(async_sessionmaker(empty_engine, expire_on_commit=False))

        result = await service.get_stats()

        assert result.success is False
        assert "setup script" in result.error


class TestMeetingServiceIdentifiers:
    """Test suite for ids supplied in their string form."""

    @pytest.mark.asyncio
    async def test_string_id_should_work_for_every_single_row_operation(
        self, meeting_service: MeetingService
    ) -> None:
        """Test ids copied out of JSON output are accepted."""
        # Arrange
        created = await _create(meeting_service, title="Board")
        text_id = str(created.id)

        # Act
        fetched = await meeting_service.get_by_id(text_id)
        updated = await meeting_service.update(text_id, {"title": "Board (final)"})
        copied = await meeting_service.duplicate(text_id)
        deleted = await meeting_service.delete(text_id)

        # Assert
        assert fetched.success is True
        assert fetched.data.id == created.id
        assert updated.data.title == "Board (final)"
        assert copied.data.title == "Board (final) (Copy)"
        assert deleted.success is True
        assert (await meeting_service.get_by_id(created.id)).success is False

    @pytest.mark.asyncio
    async def test_malformed_id_should_fail_readably(
        self, meeting_service: MeetingService
    ) -> None:
        """Test an unparsable id is reported without SQL text."""
        for result in (
            await meeting_service.get_by_id("not-a-uuid"),
            await meeting_service.update("not-a-uuid", {"title": "x"}),
            await meeting_service.delete("not-a-uuid"),
            await meeting_service.duplicate("not-a-uuid"),
        ):
            assert result.success is False
            assert result.data is None
            assert result.error == "Invalid id: 'not-a-uuid'"


class TestMeetingServiceNullUpdates:
    """Test suite for explicit nulls in update payloads."""

    @pytest.mark.asyncio
    async def test_null_title_should_be_rejected_before_the_store(
        self, meeting_service: MeetingService
    ) -> None:
        """Test title=None reads as a missing title, not a constraint failure."""
        created = await _create(meeting_service, title="Keep me")

        result = await meeting_service.update(created.id, {"title": None})

        assert result.success is False
        assert "Title is required" in result.error
        assert "NOT NULL" not in result.error
        assert (await meeting_service.get_by_id(created.id)).data.title == "Keep me"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["time", "content", "status"])
    async def test_null_required_field_should_be_rejected(
        self, meeting_service: MeetingService, field: str
    ) -> None:
        """Test other NOT NULL columns cannot be nulled either."""
        created = await _create(meeting_service)

        result = await meeting_service.update(created.id, {field: None})

        assert result.success is False
        assert f"{field.capitalize()} is required" in result.error

    @pytest.mark.asyncio
    async def test_null_optional_field_should_clear_it(
        self, meeting_service: MeetingService
    ) -> None:
        """Test nullable columns still accept an explicit null."""
        created = await _create(meeting_service, location="HQ")

        result = await meeting_service.update(created.id, {"location": None})

        assert result.success is True
        assert result.data.location is None
